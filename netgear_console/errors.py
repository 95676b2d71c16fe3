"""Exception hierarchy for the Netgear switch console client.

Every error carries a *kind* (authentication, network, parsing, model,
operation), a human readable message and, where one exists, the underlying
library exception as ``cause``.
"""

from __future__ import annotations


class NetgearError(Exception):
    """Base exception for all client errors."""

    kind = "netgear"
    default_message = "unexpected error"

    def __init__(self, message: str = "", cause: BaseException | None = None) -> None:
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.kind} error: {self.message}: {self.cause}"
        return f"{self.kind} error: {self.message}"


class AuthenticationError(NetgearError):
    kind = "authentication"
    default_message = "authentication failed"


class NotAuthenticated(AuthenticationError):
    default_message = "not authenticated"


class InvalidCredentials(AuthenticationError):
    default_message = "invalid credentials"


class SessionExpired(AuthenticationError):
    default_message = "session expired"


class AutoLoginError(AuthenticationError):
    """Raised by the client constructor when a resolved password is rejected."""

    default_message = "automatic login failed"


class TokenStoreError(AuthenticationError):
    default_message = "token store failure"


class TokenNotFound(TokenStoreError):
    default_message = "token not found"


class StaleTokenError(TokenStoreError):
    default_message = "token file is empty, please log in again"


class CorruptTokenError(TokenStoreError):
    default_message = "malformed token file"


class NetworkError(NetgearError):
    kind = "network"
    default_message = "network failure"


class ParsingError(NetgearError):
    kind = "parsing"
    default_message = "invalid response format"


class SeedNotFound(ParsingError):
    default_message = "seed value not found"


class ModelError(NetgearError):
    kind = "model"
    default_message = "model error"


class ModelNotDetected(ModelError):
    default_message = "could not detect switch model"


class ModelNotSupported(ModelError):
    default_message = "model not supported"


class OperationError(NetgearError):
    kind = "operation"
    default_message = "operation failed"
