"""Configuration types for the HTTP client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class HttpConfig:
    name: str
    base_url: str | None = None
    # None disables the timeout entirely; requests may block until the server answers.
    timeout_seconds: float | None = None
    follow_redirects: bool = True
    default_headers: Mapping[str, str] | None = None
