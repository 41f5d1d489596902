"""MusicBrainz configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from albums import __version__

from .http import HttpConfig

DEFAULT_MUSICBRAINZ_BASE_URL: Final[str] = "http://musicbrainz.org/ws/2"
APP_NAME: Final[str] = "albums"
PROJECT_URL: Final[str] = "https://github.com/prasmussen/albums"
USER_AGENT: Final[str] = f"{APP_NAME}/{__version__} ( {PROJECT_URL} )"

ARTIST_SEARCH_LIMIT: Final[int] = 1
RELEASE_GROUP_LIMIT: Final[int] = 100


@dataclass(frozen=True, slots=True)
class MusicBrainzConfig:
    http: HttpConfig
    artist_search_limit: int = ARTIST_SEARCH_LIMIT
    release_group_limit: int = RELEASE_GROUP_LIMIT


def get_musicbrainz_config(*, base_url: str = DEFAULT_MUSICBRAINZ_BASE_URL) -> MusicBrainzConfig:
    http = HttpConfig(
        name="musicbrainz",
        base_url=base_url,
        default_headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )
    return MusicBrainzConfig(http=http)
