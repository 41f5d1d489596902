"""Domain types and rules for studio album listings."""

from __future__ import annotations

from .albums import extract_year, is_studio_album, select_studio_albums, sort_by_year
from .model import Album, Artist, Discography, ReleaseGroup

__all__ = [
    "Album",
    "Artist",
    "Discography",
    "ReleaseGroup",
    "extract_year",
    "is_studio_album",
    "select_studio_albums",
    "sort_by_year",
]
