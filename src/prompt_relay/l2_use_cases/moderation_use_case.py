"""Use case: ask the moderation endpoint whether a prompt is flagged."""

from __future__ import annotations

import logging

from prompt_relay.l1_entities.errors import RelayError
from prompt_relay.l1_entities.result import RelayResult
from prompt_relay.l2_use_cases.ports.http_transport import HttpTransport
from prompt_relay.l2_use_cases.ports.secret_provider import SecretProvider
from prompt_relay.l2_use_cases.utils.dispatch import normalize, post_json
from prompt_relay.l2_use_cases.utils.request_builder import build_moderation_request, encode_request
from prompt_relay.l2_use_cases.utils.response_parser import parse_moderation_response

log = logging.getLogger('prelay.api')

MODERATIONS_PATH = '/moderations'


class CheckModerationUseCase:
    """Returns the moderation verdict: ``data`` is True when the prompt is flagged."""

    def __init__(
        self,
        transport: HttpTransport,
        secrets: SecretProvider,
        *,
        base_url: str,
        api_key_variable: str = 'OPENAI_KEY',
    ) -> None:
        self._transport = transport
        self._secrets = secrets
        self._url = base_url.rstrip('/') + MODERATIONS_PATH
        self._api_key_variable = api_key_variable

    def execute(self, prompt: object) -> RelayResult[bool]:
        try:
            request = build_moderation_request(prompt)
            response = post_json(
                self._transport,
                self._secrets,
                url=self._url,
                body=encode_request(request),
                api_key_variable=self._api_key_variable,
            )
            flagged = normalize(response, parse_moderation_response)
        except RelayError as e:
            log.warning('Moderation request failed (%s): %s', e.kind.value, e.message)
            return RelayResult.failure(e)

        log.info('Moderation verdict: flagged=%s', flagged)
        return RelayResult.success(flagged)
