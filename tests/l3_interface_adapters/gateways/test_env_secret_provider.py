"""Tests for the environment secret provider gateway."""

from prompt_relay.l3_interface_adapters.gateways.env_secret_provider import EnvSecretProvider


class TestEnvSecretProvider:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv('OPENAI_KEY', 'sk-env')
        assert EnvSecretProvider().get_variable('OPENAI_KEY') == 'sk-env'

    def test_missing_is_none(self, monkeypatch):
        monkeypatch.delenv('OPENAI_KEY', raising=False)
        assert EnvSecretProvider().get_variable('OPENAI_KEY') is None

    def test_read_at_call_time(self, monkeypatch):
        provider = EnvSecretProvider()
        monkeypatch.setenv('OPENAI_KEY', 'sk-first')
        assert provider.get_variable('OPENAI_KEY') == 'sk-first'
        monkeypatch.setenv('OPENAI_KEY', 'sk-second')
        assert provider.get_variable('OPENAI_KEY') == 'sk-second'

    def test_override_wins(self, monkeypatch):
        monkeypatch.setenv('OPENAI_KEY', 'sk-env')
        provider = EnvSecretProvider({'OPENAI_KEY': 'sk-config'})
        assert provider.get_variable('OPENAI_KEY') == 'sk-config'
