"""Application configuration helpers."""

from __future__ import annotations

from albums.common.logging import configure_logging

from .http import HttpConfig
from .musicbrainz import (
    DEFAULT_MUSICBRAINZ_BASE_URL,
    USER_AGENT,
    MusicBrainzConfig,
    get_musicbrainz_config,
)

__all__ = [
    "DEFAULT_MUSICBRAINZ_BASE_URL",
    "USER_AGENT",
    "HttpConfig",
    "MusicBrainzConfig",
    "configure_logging",
    "get_musicbrainz_config",
]
