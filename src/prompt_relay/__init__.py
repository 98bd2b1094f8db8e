"""prompt-relay: chat completion and moderation calls against the OpenAI HTTP API."""

__version__ = '0.1.0'
