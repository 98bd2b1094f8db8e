"""Uniform result returned by both relay operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from prompt_relay.l1_entities.errors import ErrorKind, RelayError

T = TypeVar('T')


@dataclass(frozen=True)
class RelayResult(Generic[T]):
    """Either a payload or an error message. Check ``error`` before reading ``data``."""

    data: T | None = None
    error: str | None = None
    kind: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: T) -> RelayResult[T]:
        return cls(data=data)

    @classmethod
    def failure(cls, exc: RelayError) -> RelayResult[T]:
        return cls(error=exc.message, kind=exc.kind)
