#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from albums.adapters.musicbrainz import MusicBrainzAPIError
from albums.app import list_studio_albums
from albums.config import configure_logging
from albums.ui.output import render_discography

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

USAGE_MESSAGE = "No artist provided"


class UsageError(ValueError):
    """Raised when the command line does not name an artist."""


def _join_query(words: Sequence[str]) -> str:
    # every word is part of the artist name, including ones that look like flags
    if not words:
        raise UsageError(USAGE_MESSAGE)
    return " ".join(words)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        query = _join_query(args_list)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)

    try:
        discography = list_studio_albums(query)
    except MusicBrainzAPIError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    for line in render_discography(discography):
        print(line)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)", file=sys.stderr)
    sys.exit(1)


def run() -> None:
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
