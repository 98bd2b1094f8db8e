"""Shared POST-and-normalize helpers for the relay use cases."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from prompt_relay.l1_entities.errors import MalformedResponseError, TransportError
from prompt_relay.l2_use_cases.ports.http_transport import HttpResponse, HttpTransport
from prompt_relay.l2_use_cases.ports.secret_provider import SecretProvider

log = logging.getLogger('prelay.api')

T = TypeVar('T')


def build_headers(api_key: str) -> dict[str, str]:
    return {
        'Content-Type': 'application/json',
        'Authorization': f'Bearer {api_key}',
    }


def post_json(
    transport: HttpTransport,
    secrets: SecretProvider,
    *,
    url: str,
    body: str,
    api_key_variable: str,
) -> HttpResponse:
    """POST *body* to *url*, reading the API key once for this call.

    A missing key is sent as an empty bearer token; the API rejects it and the
    rejection comes back as a regular error body.
    """
    api_key = secrets.get_variable(api_key_variable) or ''
    if not api_key:
        log.warning('%s is not set; sending an empty bearer token', api_key_variable)
    return transport.request(url, 'POST', data=body, headers=build_headers(api_key))


def normalize(response: HttpResponse, parser: Callable[[str], T]) -> T:
    """Run *parser* over the body; a bad body on a non-2xx status is a transport failure."""
    try:
        return parser(response.body)
    except MalformedResponseError as e:
        if not response.ok:
            raise TransportError(f'HTTP {response.status_code} without a readable error body') from e
        raise
