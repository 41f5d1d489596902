"""MusicBrainz discography adapter."""

from __future__ import annotations

from .client import (
    MusicBrainzAPIError,
    MusicBrainzClient,
    MusicBrainzDecodeError,
    MusicBrainzTransportError,
)
from .fetcher import ArtistNotFoundError, MusicBrainzDiscographySource

__all__ = [
    "ArtistNotFoundError",
    "MusicBrainzAPIError",
    "MusicBrainzClient",
    "MusicBrainzDecodeError",
    "MusicBrainzDiscographySource",
    "MusicBrainzTransportError",
]
