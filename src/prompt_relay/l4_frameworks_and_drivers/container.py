"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from prompt_relay.l1_entities.config import AppConfig
from prompt_relay.l2_use_cases.chat_completion_use_case import RunChatCompletionUseCase
from prompt_relay.l2_use_cases.moderation_use_case import CheckModerationUseCase
from prompt_relay.l2_use_cases.ports.http_transport import HttpTransport
from prompt_relay.l2_use_cases.ports.secret_provider import SecretProvider
from prompt_relay.l3_interface_adapters.gateways.env_secret_provider import EnvSecretProvider
from prompt_relay.l3_interface_adapters.gateways.httpx_transport import HttpxTransport
from prompt_relay.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        infra: InfraConfig | None = None,
        *,
        transport: HttpTransport | None = None,
        secrets: SecretProvider | None = None,
    ) -> None:
        self.config = config
        self.infra = infra or InfraConfig()

        openai_cfg = self.infra.openai
        overrides = {openai_cfg.api_key_env: openai_cfg.api_key} if openai_cfg.api_key else None
        self.secrets: SecretProvider = secrets or EnvSecretProvider(overrides)
        self.transport: HttpTransport = transport or HttpxTransport(timeout_seconds=openai_cfg.timeout_seconds)

        self.chat_completion = RunChatCompletionUseCase(
            self.transport,
            self.secrets,
            base_url=openai_cfg.base_url,
            api_key_variable=openai_cfg.api_key_env,
            default_model=config.chat.default_model,
        )
        self.moderation = CheckModerationUseCase(
            self.transport,
            self.secrets,
            base_url=openai_cfg.base_url,
            api_key_variable=openai_cfg.api_key_env,
        )
