"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel


class ChatConfig(BaseModel):
    default_model: str


class AppConfig(BaseModel):
    chat: ChatConfig
