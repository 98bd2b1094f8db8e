"""Caller-tunable generation options for a chat completion."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CompletionOptions(BaseModel):
    """Option set forwarded to the remote model.

    Only ``None`` means "not set": ``temperature=0`` is a real value and is
    sent as such. Ranges are not checked here; the API decides what it accepts.
    An unset ``model`` is resolved to the configured default when the request
    is built.
    """

    model_config = ConfigDict(frozen=True, extra='ignore', populate_by_name=True)

    model: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    json_mode: bool = Field(default=False, alias='json')

    @field_validator('model', mode='before')
    @classmethod
    def _blank_model_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator('json_mode', mode='before')
    @classmethod
    def _none_is_off(cls, value: object) -> object:
        return False if value is None else value
