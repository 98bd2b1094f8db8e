"""Tests for CheckModerationUseCase — uses FakeTransport and FakeSecretProvider."""

from __future__ import annotations

from prompt_relay.l1_entities.errors import ErrorKind
from prompt_relay.l2_use_cases.moderation_use_case import CheckModerationUseCase
from tests.conftest import FakeSecretProvider, FakeTransport, moderation_body

BASE_URL = 'https://api.openai.com/v1'


class TestCheckModeration:
    def test_flagged(self, fake_secrets):
        transport = FakeTransport(moderation_body(flagged=True))
        result = CheckModerationUseCase(transport, fake_secrets, base_url=BASE_URL).execute('something nasty')

        assert result.ok
        assert result.data is True

    def test_not_flagged(self, fake_secrets):
        transport = FakeTransport(moderation_body(flagged=False))
        result = CheckModerationUseCase(transport, fake_secrets, base_url=BASE_URL).execute('hello')

        assert result.ok
        assert result.data is False

    def test_request_shape(self, fake_secrets):
        transport = FakeTransport(moderation_body())
        CheckModerationUseCase(transport, fake_secrets, base_url=BASE_URL).execute('hello')

        url, method, _, headers = transport.calls[0]
        assert url == 'https://api.openai.com/v1/moderations'
        assert method == 'POST'
        assert headers['Authorization'] == 'Bearer sk-test'
        assert headers['Content-Type'] == 'application/json'
        assert transport.last_payload == {'input': 'hello'}

    def test_non_string_prompt_skips_transport(self, fake_secrets):
        transport = FakeTransport(moderation_body())
        result = CheckModerationUseCase(transport, fake_secrets, base_url=BASE_URL).execute(None)

        assert result.error == 'prompt must be a string'
        assert result.kind == ErrorKind.INVALID_INPUT
        assert transport.calls == []

    def test_remote_error(self, fake_secrets):
        transport = FakeTransport({'error': {'message': 'You exceeded your current quota'}}, status_code=429)
        result = CheckModerationUseCase(transport, fake_secrets, base_url=BASE_URL).execute('hello')

        assert result.error == 'You exceeded your current quota'
        assert result.kind == ErrorKind.REMOTE_API_ERROR

    def test_empty_results(self, fake_secrets):
        transport = FakeTransport({'results': []})
        result = CheckModerationUseCase(transport, fake_secrets, base_url=BASE_URL).execute('hello')
        assert result.kind == ErrorKind.MALFORMED_RESPONSE

    def test_transport_error(self, broken_transport):
        result = CheckModerationUseCase(broken_transport, FakeSecretProvider(), base_url=BASE_URL).execute('hello')
        assert result.kind == ErrorKind.TRANSPORT_FAILURE
        assert result.data is None
