"""Use case: run one chat completion against the API."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from prompt_relay.l1_entities.chat_model import faster_model
from prompt_relay.l1_entities.completion_options import CompletionOptions
from prompt_relay.l1_entities.errors import RelayError
from prompt_relay.l1_entities.result import RelayResult
from prompt_relay.l2_use_cases.ports.http_transport import HttpTransport
from prompt_relay.l2_use_cases.ports.secret_provider import SecretProvider
from prompt_relay.l2_use_cases.utils.dispatch import normalize, post_json
from prompt_relay.l2_use_cases.utils.request_builder import build_chat_request, encode_request
from prompt_relay.l2_use_cases.utils.response_parser import parse_chat_response

log = logging.getLogger('prelay.api')

CHAT_COMPLETIONS_PATH = '/chat/completions'


class RunChatCompletionUseCase:
    """Builds the request, sends it, and returns the first choice's text."""

    def __init__(
        self,
        transport: HttpTransport,
        secrets: SecretProvider,
        *,
        base_url: str,
        api_key_variable: str = 'OPENAI_KEY',
        default_model: str = faster_model,
    ) -> None:
        self._transport = transport
        self._secrets = secrets
        self._url = base_url.rstrip('/') + CHAT_COMPLETIONS_PATH
        self._api_key_variable = api_key_variable
        self._default_model = default_model

    def execute(
        self,
        system_message: object,
        turns: object,
        options: Mapping | CompletionOptions | None = None,
    ) -> RelayResult[str]:
        """Run a completion. Never raises for relay failures; check ``result.error``."""
        try:
            request = build_chat_request(system_message, turns, options, default_model=self._default_model)
            log.info('Chat request: model=%s, messages=%d', request.model, len(request.messages))
            response = post_json(
                self._transport,
                self._secrets,
                url=self._url,
                body=encode_request(request),
                api_key_variable=self._api_key_variable,
            )
            content = normalize(response, parse_chat_response)
        except RelayError as e:
            log.warning('Chat request failed (%s): %s', e.kind.value, e.message)
            return RelayResult.failure(e)

        log.info('Chat request succeeded (%d chars)', len(content))
        return RelayResult.success(content)
