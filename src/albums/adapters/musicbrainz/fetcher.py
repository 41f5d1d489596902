"""MusicBrainz discography source."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from albums.config.musicbrainz import get_musicbrainz_config
from albums.domain.ports import DiscographySource

from .client import MusicBrainzAPIError, MusicBrainzClient
from .translator import translate_artist, translate_release_group

if TYPE_CHECKING:
    from albums.config.musicbrainz import MusicBrainzConfig
    from albums.domain.model import Artist, ReleaseGroup

    from .schema import MusicBrainzArtistSearch, MusicBrainzReleaseGroupBrowse

log = getLogger(__name__)


class ArtistNotFoundError(MusicBrainzAPIError):
    """Raised when an artist search returns no results."""


class DiscographyLookupClient(Protocol):
    def search_artists(
        self, *, query: str, limit: int | None = None
    ) -> MusicBrainzArtistSearch: ...

    def browse_release_groups(
        self, *, artist_mbid: str, limit: int | None = None
    ) -> MusicBrainzReleaseGroupBrowse: ...


class MusicBrainzDiscographySource:
    """Resolve artists and list their album release groups via MusicBrainz."""

    def __init__(
        self,
        *,
        config: MusicBrainzConfig | None = None,
        client: DiscographyLookupClient | None = None,
    ) -> None:
        self._config = config or get_musicbrainz_config()
        self._client = client or MusicBrainzClient(config=self._config)

    def find_artist(self, query: str) -> Artist:
        results = self._client.search_artists(query=query, limit=1)
        if not results.artists:
            log.info("MusicBrainz search returned no artists for %r", query)
            raise ArtistNotFoundError("No artists found")
        artist = translate_artist(results.artists[0])
        log.info("Resolved %r to %s (%s)", query, artist.name, artist.id)
        return artist

    def fetch_release_groups(self, artist_id: str) -> list[ReleaseGroup]:
        results = self._client.browse_release_groups(artist_mbid=artist_id)
        log.debug(
            "Fetched %d of %s release groups for %s",
            len(results.release_groups),
            results.release_group_count if results.release_group_count is not None else "?",
            artist_id,
        )
        return [translate_release_group(payload) for payload in results.release_groups]


if TYPE_CHECKING:
    _source_check: DiscographySource = MusicBrainzDiscographySource()
