"""Gateway: process environment lookup — implements SecretProvider port."""

from __future__ import annotations

import os
from collections.abc import Mapping


class EnvSecretProvider:
    """Reads variables from the environment at call time.

    *overrides* (e.g. an API key set in the config file) take precedence.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._overrides = dict(overrides or {})

    def get_variable(self, name: str) -> str | None:
        if name in self._overrides:
            return self._overrides[name]
        return os.environ.get(name)
