"""Gateway: blocking HTTP transport over httpx — implements HttpTransport port."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from prompt_relay.l1_entities.errors import TransportError
from prompt_relay.l2_use_cases.ports.http_transport import HttpResponse

log = logging.getLogger('prelay.http')


class HttpxTransport:
    """Opens a fresh httpx.Client per request; nothing is shared between calls."""

    def __init__(self, timeout_seconds: float = 60.0, transport: httpx.BaseTransport | None = None) -> None:
        self._timeout = timeout_seconds
        self._transport = transport  # injectable for tests (httpx.MockTransport)

    def request(self, url: str, method: str, *, data: str, headers: Mapping[str, str]) -> HttpResponse:
        log.debug('%s %s (%d bytes)', method, url, len(data))
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                resp = client.request(method, url, content=data.encode('utf-8'), headers=dict(headers))
        except httpx.TimeoutException as e:
            raise TransportError(f'request to {url} timed out') from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f'request to {url} failed: {type(e).__name__}: {e}') from e
        except UnicodeEncodeError as e:
            raise TransportError(f'request to {url} failed: header values must be ASCII') from e

        log.debug('%s %s -> %d', method, url, resp.status_code)
        return HttpResponse(status_code=resp.status_code, body=resp.text)
