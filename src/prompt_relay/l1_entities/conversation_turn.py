"""Conversation turn entity — one caller-supplied exchange unit."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, model_validator

from prompt_relay.l1_entities.chat_message import ChatMessage


class TurnKind(enum.Enum):
    ASSISTANT = 'assistant'
    USER = 'user'
    EXCHANGE = 'exchange'  # assistant reply followed by the next user message


class ConversationTurn(BaseModel):
    """A prior assistant message, a user message, or both."""

    model_config = ConfigDict(frozen=True, extra='ignore')

    assistant: str | None = None
    user: str | None = None

    @model_validator(mode='after')
    def _require_a_role(self) -> ConversationTurn:
        if self.assistant is None and self.user is None:
            raise ValueError("turn needs an 'assistant' or 'user' key")
        return self

    @property
    def kind(self) -> TurnKind:
        if self.assistant is not None and self.user is not None:
            return TurnKind.EXCHANGE
        if self.assistant is not None:
            return TurnKind.ASSISTANT
        return TurnKind.USER

    def to_messages(self) -> list[ChatMessage]:
        """Expand into wire messages, assistant before user."""
        kind = self.kind
        messages: list[ChatMessage] = []
        if kind in (TurnKind.ASSISTANT, TurnKind.EXCHANGE):
            messages.append(ChatMessage(role='assistant', content=self.assistant))
        if kind in (TurnKind.USER, TurnKind.EXCHANGE):
            messages.append(ChatMessage(role='user', content=self.user))
        return messages
