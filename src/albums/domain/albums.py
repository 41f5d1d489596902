"""Selection and ordering of studio albums."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from .model import Album

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import ReleaseGroup

log = logging.getLogger(__name__)

UNKNOWN_YEAR: Final[int] = 0
_YEAR_DIGITS: Final[int] = 4
_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


def extract_year(date: str | None) -> int:
    """Return the year encoded in the first four characters of ``date``.

    Anything that does not start with four ASCII digits yields ``UNKNOWN_YEAR``,
    which sorts before every real year.
    """

    if not date or len(date) < _YEAR_DIGITS:
        return UNKNOWN_YEAR
    prefix = date[:_YEAR_DIGITS]
    if not all(char in _ASCII_DIGITS for char in prefix):
        return UNKNOWN_YEAR
    return int(prefix)


def is_studio_album(release_group: ReleaseGroup) -> bool:
    return not release_group.secondary_types


def select_studio_albums(release_groups: Iterable[ReleaseGroup]) -> list[Album]:
    """Keep release groups without secondary types, preserving their order."""

    albums: list[Album] = []
    for release_group in release_groups:
        if not is_studio_album(release_group):
            log.debug(
                "Skipping %r (%s)",
                release_group.title,
                ", ".join(release_group.secondary_types),
            )
            continue
        albums.append(
            Album(title=release_group.title, year=extract_year(release_group.first_release_date))
        )
    return albums


def sort_by_year(albums: Iterable[Album]) -> list[Album]:
    # sorted() is stable: albums from the same year keep the service order
    return sorted(albums, key=lambda album: album.year)
