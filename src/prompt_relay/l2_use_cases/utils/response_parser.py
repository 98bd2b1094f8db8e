"""Pure functions that normalize raw API response bodies.

Both parsers check for a top-level ``error`` object first: when present its
message wins, whatever else the body carries.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from prompt_relay.l1_entities.api_payloads import ChatCompletionResponse, ModerationResponse
from prompt_relay.l1_entities.errors import MalformedResponseError, RemoteAPIError


def decode_body(raw: str) -> dict[str, Any]:
    """Decode a JSON object body, raising on API errors and undecodable text."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError('response body is not valid JSON') from e
    if not isinstance(data, dict):
        raise MalformedResponseError('response body is not a JSON object')
    if data.get('error') is not None:
        raise RemoteAPIError(_error_message(data['error']))
    return data


def _error_message(error: object) -> str:
    if isinstance(error, dict):
        message = error.get('message')
        if message is not None:
            return str(message)
        return json.dumps(error)
    return str(error)


def parse_chat_response(raw: str) -> str:
    """Return the first choice's message content."""
    data = decode_body(raw)
    try:
        response = ChatCompletionResponse.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError('chat response is missing choices[].message.content') from e
    if not response.choices:
        raise MalformedResponseError('chat response contained no choices')
    return response.choices[0].message.content or ''


def parse_moderation_response(raw: str) -> bool:
    """Return the first moderation result's ``flagged`` verdict."""
    data = decode_body(raw)
    try:
        response = ModerationResponse.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError('moderation response is missing results[].flagged') from e
    if not response.results:
        raise MalformedResponseError('moderation response contained no results')
    return response.results[0].flagged
