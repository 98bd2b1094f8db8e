"""Infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

import copy
import logging

from pydantic import BaseModel, Field, field_validator

from prompt_relay.l1_entities.chat_model import faster_model
from prompt_relay.l1_entities.config import AppConfig
from prompt_relay.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'chat': {
        'default_model': faster_model,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class OpenAIProviderConfig(BaseModel):
    api_key: str | None = None  # None → read api_key_env from the environment on every call
    api_key_env: str = 'OPENAI_KEY'
    base_url: str = 'https://api.openai.com/v1'
    timeout_seconds: float = Field(default=60.0, gt=0)


class LoggingConfig(BaseModel):
    level: str = 'WARNING'
    file: str | None = None  # None → stderr

    @field_validator('level')
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'unknown log level: {value!r}')
        return level


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    openai: OpenAIProviderConfig = Field(default_factory=OpenAIProviderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
