"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

import pytest

from prompt_relay.l1_entities.errors import TransportError
from prompt_relay.l2_use_cases.ports.http_transport import HttpResponse
from prompt_relay.l4_frameworks_and_drivers.container import DependencyContainer
from prompt_relay.l4_frameworks_and_drivers.infra_config import InfraConfig, build_app_config

# --- Protocol-conforming Fakes ---


class FakeTransport:
    """Fake HTTP transport for use case tests."""

    def __init__(self, body: object = None, status_code: int = 200):
        self._response = HttpResponse(status_code=status_code, body=_as_text(body))
        self._error: Exception | None = None
        self.calls: list[tuple[str, str, str, dict[str, str]]] = []

    def request(self, url: str, method: str, *, data: str, headers: Mapping[str, str]) -> HttpResponse:
        self.calls.append((url, method, data, dict(headers)))
        if self._error is not None:
            raise self._error
        return self._response

    def set_response(self, body: object, status_code: int = 200) -> None:
        self._response = HttpResponse(status_code=status_code, body=_as_text(body))

    def set_error(self, error: Exception) -> None:
        self._error = error

    @property
    def last_payload(self) -> dict:
        return json.loads(self.calls[-1][2])


class FakeSecretProvider:
    """Fake secret provider backed by a plain dict."""

    def __init__(self, values: dict[str, str] | None = None):
        self._values = dict(values or {})
        self.lookups: list[str] = []

    def get_variable(self, name: str) -> str | None:
        self.lookups.append(name)
        return self._values.get(name)


def _as_text(body: object) -> str:
    if body is None:
        return ''
    if isinstance(body, str):
        return body
    return json.dumps(body)


def chat_body(content: str | None = 'Fake completion') -> dict:
    return {
        'id': 'chatcmpl-1',
        'object': 'chat.completion',
        'choices': [{'index': 0, 'message': {'role': 'assistant', 'content': content}, 'finish_reason': 'stop'}],
        'usage': {'prompt_tokens': 10, 'completion_tokens': 2, 'total_tokens': 12},
    }


def moderation_body(flagged: bool = False) -> dict:
    return {'id': 'modr-1', 'model': 'omni-moderation-latest', 'results': [{'flagged': flagged, 'categories': {}}]}


# --- Standard Fixtures ---


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport(chat_body())


@pytest.fixture
def fake_secrets() -> FakeSecretProvider:
    return FakeSecretProvider({'OPENAI_KEY': 'sk-test'})


@pytest.fixture
def container(fake_transport: FakeTransport, fake_secrets: FakeSecretProvider) -> DependencyContainer:
    return DependencyContainer(
        build_app_config({}),
        InfraConfig(),
        transport=fake_transport,
        secrets=fake_secrets,
    )


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
chat:
  default_model: "gpt-4o"
openai:
  base_url: "https://proxy.example.com/v1"
  api_key_env: "MY_OPENAI_KEY"
  timeout_seconds: 12.5
logging:
  level: "debug"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def broken_transport() -> FakeTransport:
    t = FakeTransport()
    t.set_error(TransportError('request to https://api.openai.com/v1/chat/completions failed: ConnectError'))
    return t
