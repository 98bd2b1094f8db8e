"""Wire schemas for the chat completion and moderation endpoints.

Request models serialize every field, including ``None`` ones, so the key set
of a request body is fixed. Response models only describe the fields the
normalizers read; anything else the API sends is ignored.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, StrictBool

from prompt_relay.l1_entities.chat_message import ChatMessage


class ResponseFormat(BaseModel):
    type: Literal['json_object'] = 'json_object'


class ChatCompletionRequest(BaseModel):
    model: str
    messages: list[ChatMessage]
    max_tokens: int | None
    temperature: float | None
    top_p: float | None
    presence_penalty: float | None
    frequency_penalty: float | None
    response_format: ResponseFormat | None


class ModerationRequest(BaseModel):
    input: str


# --- Responses ---


class _Lenient(BaseModel):
    model_config = ConfigDict(extra='ignore')


class CompletionMessage(_Lenient):
    content: str | None


class CompletionChoice(_Lenient):
    message: CompletionMessage


class ChatCompletionResponse(_Lenient):
    choices: list[CompletionChoice]


class ModerationVerdict(_Lenient):
    flagged: StrictBool


class ModerationResponse(_Lenient):
    results: list[ModerationVerdict]
