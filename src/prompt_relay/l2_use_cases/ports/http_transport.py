"""Port: HTTP transport."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class HttpResponse:
    """Status and raw body text of one HTTP exchange."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpTransport(Protocol):
    """Abstract blocking HTTP client. Zero framework types leak through."""

    def request(self, url: str, method: str, *, data: str, headers: Mapping[str, str]) -> HttpResponse:
        """Send one request and return the full response, whatever its status.

        Raises TransportError when no response could be obtained.
        """
        ...
