"""HTTP behaviour of the MusicBrainz client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from albums.adapters.musicbrainz.client import (
    MusicBrainzClient,
    MusicBrainzDecodeError,
    MusicBrainzTransportError,
)
from albums.config.musicbrainz import USER_AGENT

if TYPE_CHECKING:
    from collections.abc import Callable

    from albums.adapters.http_client import HttpClient
    from albums.config.http import HttpConfig
    from albums.config.musicbrainz import MusicBrainzConfig

    type Handler = Callable[[httpx.Request], httpx.Response]
    type FactoryBuilder = Callable[[Handler], Callable[[HttpConfig], HttpClient]]


def test_search_artists_sends_expected_request(
    musicbrainz_config: MusicBrainzConfig,
    make_client_factory: FactoryBuilder,
    artist_search_payload: dict[str, object],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=artist_search_payload)

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    result = client.search_artists(query="Radio head", limit=1)

    assert [artist.name for artist in result.artists] == ["Radiohead"]
    (request,) = seen
    assert request.method == "GET"
    assert request.url.host == "mb.test"
    assert request.url.path == "/ws/2/artist/"
    assert dict(request.url.params) == {
        "query": "artist:Radio head",
        "limit": "1",
        "fmt": "json",
    }
    assert request.headers["User-Agent"] == USER_AGENT


def test_browse_release_groups_sends_expected_request(
    musicbrainz_config: MusicBrainzConfig,
    make_client_factory: FactoryBuilder,
    release_groups_payload: dict[str, object],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=release_groups_payload)

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    result = client.browse_release_groups(artist_mbid="A1")

    assert len(result.release_groups) == 6
    (request,) = seen
    assert request.url.path == "/ws/2/release-group/"
    assert dict(request.url.params) == {
        "artist": "A1",
        "type": "album",
        "limit": "100",
        "fmt": "json",
    }
    assert request.headers["User-Agent"] == USER_AGENT


def test_http_error_status_raises_transport_error(
    musicbrainz_config: MusicBrainzConfig,
    make_client_factory: FactoryBuilder,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="Service Unavailable")

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    with pytest.raises(MusicBrainzTransportError, match="HTTP 503"):
        client.search_artists(query="Radiohead")


def test_connection_failure_raises_transport_error(
    musicbrainz_config: MusicBrainzConfig,
    make_client_factory: FactoryBuilder,
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    with pytest.raises(MusicBrainzTransportError, match="Name or service not known") as excinfo:
        client.browse_release_groups(artist_mbid="A1")

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_invalid_json_raises_decode_error(
    musicbrainz_config: MusicBrainzConfig,
    make_client_factory: FactoryBuilder,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    with pytest.raises(MusicBrainzDecodeError, match="Invalid JSON"):
        client.search_artists(query="Radiohead")


def test_non_object_json_raises_decode_error(
    musicbrainz_config: MusicBrainzConfig,
    make_client_factory: FactoryBuilder,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=["not", "an", "object"])

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    with pytest.raises(MusicBrainzDecodeError):
        client.browse_release_groups(artist_mbid="A1")


def test_schema_mismatch_raises_decode_error(
    musicbrainz_config: MusicBrainzConfig,
    make_client_factory: FactoryBuilder,
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"artists": [{"name": "No Id"}]})

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    with pytest.raises(MusicBrainzDecodeError, match="MusicBrainzArtistSearch"):
        client.search_artists(query="No Id")


def test_explicit_zero_limit_is_sent_as_is(
    musicbrainz_config: MusicBrainzConfig,
    make_client_factory: FactoryBuilder,
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/artist/"):
            return httpx.Response(200, json={"artists": []})
        return httpx.Response(200, json={"release-groups": []})

    client = MusicBrainzClient(
        config=musicbrainz_config,
        client_factory=make_client_factory(handler),
    )

    client.search_artists(query="Radiohead", limit=0)
    client.browse_release_groups(artist_mbid="A1", limit=0)

    assert [request.url.params["limit"] for request in seen] == ["0", "0"]
