from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
import pytest

from albums.adapters.http_client import HttpClient
from albums.config.musicbrainz import get_musicbrainz_config

if TYPE_CHECKING:
    from collections.abc import Callable

    from albums.config.http import HttpConfig
    from albums.config.musicbrainz import MusicBrainzConfig

MusicBrainzPayload = dict[str, object]
type ClientFactory = Callable[[HttpConfig], HttpClient]

FIXTURES = Path(__file__).resolve().parent / "data" / "musicbrainz"


def _load_payload(name: str) -> MusicBrainzPayload:
    with (FIXTURES / name).open() as handle:
        return json.load(handle)


@pytest.fixture
def artist_search_payload() -> MusicBrainzPayload:
    return _load_payload("artist_search.json")


@pytest.fixture
def release_groups_payload() -> MusicBrainzPayload:
    return _load_payload("release_groups.json")


@pytest.fixture
def musicbrainz_config() -> MusicBrainzConfig:
    return get_musicbrainz_config(base_url="http://mb.test/ws/2")


@pytest.fixture
def make_client_factory() -> Callable[[Callable[[httpx.Request], httpx.Response]], ClientFactory]:
    """Build a client factory whose requests are answered by ``handler``."""

    def build(handler: Callable[[httpx.Request], httpx.Response]) -> ClientFactory:
        async def async_handler(request: httpx.Request) -> httpx.Response:
            return handler(request)

        def factory(config: HttpConfig) -> HttpClient:
            return HttpClient(config, transport=httpx.MockTransport(async_handler))

        return factory

    return build
