"""Ports for fetching discography data from an external provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .model import Artist, ReleaseGroup


@runtime_checkable
class DiscographySource(Protocol):
    """Port for resolving an artist and listing its album release groups."""

    def find_artist(self, query: str) -> Artist:
        """Return the best-matching artist or raise if there is none."""
        ...

    def fetch_release_groups(self, artist_id: str) -> list[ReleaseGroup]:
        """Return the artist's album release groups in provider order."""
        ...


__all__ = ["DiscographySource"]
