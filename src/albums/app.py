"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from albums.adapters.musicbrainz import MusicBrainzDiscographySource
from albums.domain.albums import select_studio_albums, sort_by_year
from albums.domain.model import Discography

if TYPE_CHECKING:
    from albums.domain.ports import DiscographySource

log = getLogger(__name__)


def list_studio_albums(
    query: str,
    *,
    source: DiscographySource | None = None,
) -> Discography:
    """Resolve ``query`` to an artist and return its studio albums, oldest first."""

    active_source = source or MusicBrainzDiscographySource()
    artist = active_source.find_artist(query)
    release_groups = active_source.fetch_release_groups(artist.id)
    albums = sort_by_year(select_studio_albums(release_groups))
    log.info(
        "%s: %d of %d release groups are studio albums",
        artist.name,
        len(albums),
        len(release_groups),
    )
    return Discography(artist=artist, albums=tuple(albums))
