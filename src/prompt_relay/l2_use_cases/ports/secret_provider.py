"""Port: secret/environment variable lookup."""

from __future__ import annotations

from typing import Protocol


class SecretProvider(Protocol):
    """Abstract read-only variable source."""

    def get_variable(self, name: str) -> str | None:
        """Return the variable's value, or None when it is not set."""
        ...
