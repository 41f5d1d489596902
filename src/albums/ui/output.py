"""Plain-text rendering of album listings."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from albums.domain.model import Album, Discography


def format_album(album: Album) -> str:
    return f"{album.year:04d} {album.title}"


def render_discography(discography: Discography) -> list[str]:
    """Return the output lines for ``discography``, without trailing newlines."""

    name = discography.artist.name
    if discography.is_empty:
        return [f"{name} has no albums yet"]
    return [f"Albums by {name}", *(format_album(album) for album in discography.albums)]
