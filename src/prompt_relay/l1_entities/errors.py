"""Domain error types.

Each failure a relay call can hit is a ``RelayError`` subclass tagged with its
``ErrorKind``. Use cases catch them at their boundary and hand the caller a
failed ``RelayResult`` instead of an exception.
"""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    INVALID_INPUT = 'invalid_input'
    REMOTE_API_ERROR = 'remote_api_error'
    MALFORMED_RESPONSE = 'malformed_response'
    TRANSPORT_FAILURE = 'transport_failure'
    CONFIGURATION_ERROR = 'configuration_error'


class RelayError(Exception):
    """Base error for a failed relay call."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(RelayError):
    """Raised when caller input does not match the request contract."""

    kind = ErrorKind.INVALID_INPUT


class RemoteAPIError(RelayError):
    """Raised when the API answered with a structured ``error`` object."""

    kind = ErrorKind.REMOTE_API_ERROR


class MalformedResponseError(RelayError):
    """Raised when a response body cannot be decoded or lacks expected fields."""

    kind = ErrorKind.MALFORMED_RESPONSE


class TransportError(RelayError):
    """Raised when the HTTP round trip itself fails."""

    kind = ErrorKind.TRANSPORT_FAILURE


class ConfigurationError(RelayError):
    """Raised when the user config file cannot be read or validated."""

    kind = ErrorKind.CONFIGURATION_ERROR
