"""MusicBrainz response schemas for artist search and release-group browse."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

type MBId = str
type MBDate = str  # Format: YYYY, YYYY-MM or YYYY-MM-DD


class MusicBrainzBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.debug(
            "MusicBrainz %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class MBEntityType(StrEnum):
    ARTIST = "artist"
    RELEASE_GROUP = "release-group"


class MBReleaseGroupPrimaryType(StrEnum):
    ALBUM = "Album"
    SINGLE = "Single"
    EP = "EP"
    BROADCAST = "Broadcast"
    OTHER = "Other"


class MusicBrainzArtist(MusicBrainzBaseModel):
    id: MBId
    name: str
    sort_name: str | None = Field(default=None, alias="sort-name")
    disambiguation: str | None = None
    score: int | None = None


class MusicBrainzArtistSearch(MusicBrainzBaseModel):
    created: str | None = None
    count: int | None = None
    offset: int | None = None
    artists: list[MusicBrainzArtist]


class MusicBrainzReleaseGroup(MusicBrainzBaseModel):
    id: MBId
    title: str
    # plain strings, the service adds new types without notice
    primary_type: str | None = Field(default=None, alias="primary-type")
    secondary_types: list[str] = Field(default_factory=list, alias="secondary-types")
    first_release_date: MBDate | None = Field(default=None, alias="first-release-date")
    disambiguation: str | None = None


class MusicBrainzReleaseGroupBrowse(MusicBrainzBaseModel):
    release_group_count: int | None = Field(default=None, alias="release-group-count")
    release_group_offset: int | None = Field(default=None, alias="release-group-offset")
    release_groups: list[MusicBrainzReleaseGroup] = Field(alias="release-groups")
