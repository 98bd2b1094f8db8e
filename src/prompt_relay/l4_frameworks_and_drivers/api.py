"""Public entry points: ``openai_completion`` and ``is_prompt_safe``.

Both return a ``RelayResult``; test ``result.error`` before reading
``result.data``. Neither raises for API, transport, input or config failures.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache

from pydantic import ValidationError

from prompt_relay.l1_entities.completion_options import CompletionOptions
from prompt_relay.l1_entities.errors import ConfigurationError
from prompt_relay.l1_entities.result import RelayResult
from prompt_relay.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from prompt_relay.l4_frameworks_and_drivers.container import DependencyContainer
from prompt_relay.l4_frameworks_and_drivers.infra_config import InfraConfig, build_app_config
from prompt_relay.l4_frameworks_and_drivers.logging_setup import setup_logging

log = logging.getLogger('prelay.api')


@lru_cache(maxsize=1)
def default_container() -> DependencyContainer:
    """Build the container from the user config file once; read-only afterwards.

    Raises ConfigurationError when the file cannot be parsed or validated.
    """
    raw = YamlConfigLoader().load_raw()
    try:
        infra = InfraConfig.model_validate(raw)
        config = build_app_config(raw)
        setup_logging(infra.logging)
    except ValidationError as e:
        raise ConfigurationError(f'invalid config: {e.error_count()} invalid field(s)') from e
    except OSError as e:
        raise ConfigurationError(f'cannot open log file: {e}') from e
    return DependencyContainer(config, infra)


def _resolve(container: DependencyContainer | None) -> DependencyContainer:
    return container or default_container()


def openai_completion(
    system_message: str,
    turns: list[Mapping[str, str]],
    options: Mapping | CompletionOptions | None = None,
    *,
    container: DependencyContainer | None = None,
) -> RelayResult[str]:
    """Complete a conversation.

    *turns* is a list of ``{'assistant': ..., 'user': ...}`` mappings; each
    needs at least one of the two keys. *options* may set ``model``,
    ``max_tokens``, ``temperature``, ``top_p``, ``presence_penalty``,
    ``frequency_penalty`` and ``json``.
    """
    try:
        relay = _resolve(container)
    except ConfigurationError as e:
        log.warning('Chat request not sent (%s): %s', e.kind.value, e.message)
        return RelayResult.failure(e)
    return relay.chat_completion.execute(system_message, turns, options)


def is_prompt_safe(prompt: str, *, container: DependencyContainer | None = None) -> RelayResult[bool]:
    """Run *prompt* through the moderation endpoint.

    ``result.data`` is the moderation ``flagged`` verdict: True means the
    prompt violates policy.
    """
    try:
        relay = _resolve(container)
    except ConfigurationError as e:
        log.warning('Moderation request not sent (%s): %s', e.kind.value, e.message)
        return RelayResult.failure(e)
    return relay.moderation.execute(prompt)
