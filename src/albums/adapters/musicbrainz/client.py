"""MusicBrainz API client."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ValidationError

from albums.adapters.http_client import HttpClient

from .schema import (
    MBEntityType,
    MBReleaseGroupPrimaryType,
    MusicBrainzArtistSearch,
    MusicBrainzReleaseGroupBrowse,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from albums.config.http import HttpConfig
    from albums.config.musicbrainz import MusicBrainzConfig

log = getLogger(__name__)


class MusicBrainzAPIError(RuntimeError):
    """Raised when a MusicBrainz lookup cannot produce a result."""


class MusicBrainzTransportError(MusicBrainzAPIError):
    """Raised when the request fails on the wire or with an HTTP error status."""


class MusicBrainzDecodeError(MusicBrainzAPIError):
    """Raised when the response body is not the JSON document we expect."""


class MusicBrainzClient:
    """Low-level HTTP client for the MusicBrainz API."""

    def __init__(
        self,
        *,
        config: MusicBrainzConfig,
        client_factory: Callable[[HttpConfig], HttpClient] | None = None,
    ) -> None:
        self._config = config
        self._http = config.http
        self._client_factory = client_factory or HttpClient

    def search_artists(self, *, query: str, limit: int | None = None) -> MusicBrainzArtistSearch:
        params = {
            "query": f"artist:{query}",
            "limit": str(limit if limit is not None else self._config.artist_search_limit),
            "fmt": "json",
        }
        return asyncio.run(
            self._get(
                path=f"{MBEntityType.ARTIST}/",
                params=params,
                model=MusicBrainzArtistSearch,
            )
        )

    def browse_release_groups(
        self,
        *,
        artist_mbid: str,
        release_type: MBReleaseGroupPrimaryType = MBReleaseGroupPrimaryType.ALBUM,
        limit: int | None = None,
    ) -> MusicBrainzReleaseGroupBrowse:
        params = {
            "artist": artist_mbid,
            "type": release_type.lower(),
            "limit": str(limit if limit is not None else self._config.release_group_limit),
            "fmt": "json",
        }
        return asyncio.run(
            self._get(
                path=f"{MBEntityType.RELEASE_GROUP}/",
                params=params,
                model=MusicBrainzReleaseGroupBrowse,
            )
        )

    async def _get[M: BaseModel](
        self,
        *,
        path: str,
        params: dict[str, str],
        model: type[M],
    ) -> M:
        if self._http.base_url is None:
            raise MusicBrainzAPIError("Missing MusicBrainz base_url in HTTP configuration")

        async with self._client_factory(self._http) as client:
            try:
                response = await client.get(path, params=params)
                log.debug("GET %s -> %s", response.url, response.status_code)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise MusicBrainzTransportError(
                    f"MusicBrainz returned HTTP {exc.response.status_code} for {exc.request.url}"
                ) from exc
            except httpx.HTTPError as exc:
                raise MusicBrainzTransportError(str(exc) or type(exc).__name__) from exc

        return _decode(response, model)


def _decode[M: BaseModel](response: httpx.Response, model: type[M]) -> M:
    try:
        payload = response.json()
    except ValueError as exc:
        raise MusicBrainzDecodeError(f"Invalid JSON from {response.url}: {exc}") from exc

    if not isinstance(payload, dict):
        raise MusicBrainzDecodeError("Unexpected MusicBrainz response payload")

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MusicBrainzDecodeError(
            f"Unexpected MusicBrainz {model.__name__} payload: {exc.error_count()} invalid field(s)"
        ) from exc
