"""Value objects for artists, release groups and albums."""

from __future__ import annotations

from dataclasses import dataclass, field

type MBId = str


@dataclass(frozen=True, slots=True)
class Artist:
    id: MBId
    name: str


@dataclass(frozen=True, slots=True)
class ReleaseGroup:
    """A conceptual release as listed by the metadata service.

    ``first_release_date`` is a partial ISO date (``1977``, ``1977-03`` or
    ``1977-03-04``) or an empty string when the service does not know it.
    """

    id: MBId
    title: str
    primary_type: str | None = None
    secondary_types: tuple[str, ...] = ()
    first_release_date: str = ""


@dataclass(frozen=True, slots=True)
class Album:
    title: str
    year: int = 0  # 0 = unknown


@dataclass(frozen=True, slots=True)
class Discography:
    artist: Artist
    albums: tuple[Album, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.albums
