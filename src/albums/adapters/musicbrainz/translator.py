"""Translate MusicBrainz payloads into domain values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from albums.domain.model import Artist, ReleaseGroup

if TYPE_CHECKING:
    from .schema import MusicBrainzArtist, MusicBrainzReleaseGroup


def translate_artist(payload: MusicBrainzArtist) -> Artist:
    return Artist(id=payload.id, name=payload.name)


def translate_release_group(payload: MusicBrainzReleaseGroup) -> ReleaseGroup:
    return ReleaseGroup(
        id=payload.id,
        title=payload.title,
        primary_type=payload.primary_type,
        secondary_types=tuple(payload.secondary_types),
        first_release_date=payload.first_release_date or "",
    )
