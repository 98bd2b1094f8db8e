"""L1 entity: known chat models."""

from __future__ import annotations

import enum


class ChatModel(enum.Enum):
    HEAVY = 'gpt-4o'
    FASTER = 'gpt-4o-mini'


heavy_model = ChatModel.HEAVY.value
faster_model = ChatModel.FASTER.value
