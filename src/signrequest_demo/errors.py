"""
signrequest_demo.errors

Failure taxonomy for signing-session orchestration.

Responsibilities:
- Distinguish configuration, transport, status and data-shape failures.
- Carry upstream diagnostics (status code, raw body) alongside the message.
"""

from __future__ import annotations


class SigningSessionError(Exception):
    """
    Base class for every expected orchestration failure.
    The API layer maps all of them to the same 400 error body.
    """

    kind: str = "unknown"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(SigningSessionError):
    kind = "configuration"


class ProviderTransportError(SigningSessionError):
    # The provider could not be reached or the connection broke mid-request.
    kind = "transport"


class ProviderStatusError(SigningSessionError):
    kind = "status"

    def __init__(self, message: str, *, status_code: int, body: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ProviderResponseError(SigningSessionError):
    # 2xx from the provider, but the payload is unusable.
    kind = "data_shape"


class MissingEmbedUrlError(ProviderResponseError):
    """
    The signing request was created but its first signer has no embed URL.
    Almost always a template without a signer placeholder.
    """


# --- Module Notes -----------------------------------------------------------
# Unexpected exceptions (bugs) are not part of this hierarchy and
# propagate as server errors.
