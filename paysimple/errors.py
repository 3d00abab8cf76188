"""
Exception hierarchy for the PaySimple SDK.

Everything the SDK raises derives from PaySimpleError so callers can catch
a single type. Transport-level failures (TransportError, RemoteError) count
toward the retry budget; ConfigurationError and ValidationFailed never do.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from paysimple.models.common import ErrorResult


@dataclass(frozen=True)
class ValidationError:
    """A single field-level violation found before a request is sent."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class PaySimpleError(Exception):
    """Base exception for all SDK errors."""


class ConfigurationError(PaySimpleError):
    """Missing or invalid credentials/settings. Never retried."""


class ValidationFailed(PaySimpleError):
    """A payload failed client-side validation; carries every violation."""

    def __init__(self, errors: list[ValidationError]):
        self.errors = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors) or "Validation failed")


class TransportError(PaySimpleError):
    """Network-level failure (connection refused, timeout, TLS handshake)."""

    def __init__(self, message: str, method: str = "", url: str = ""):
        super().__init__(message)
        self.method = method
        self.url = url


class DeserializationError(PaySimpleError):
    """A response body could not be parsed into the expected type."""

    def __init__(self, target: str, body: str, reason: str = ""):
        super().__init__(f"Could not deserialize {target}: {reason}" if reason else f"Could not deserialize {target}")
        self.target = target
        self.body = body


class RemoteError(PaySimpleError):
    """
    Non-success HTTP response from the PaySimple API.

    When the error body parses, ``error_result`` holds it. Otherwise
    ``error_result`` is None, ``raw_body`` holds the unparsed text and the
    DeserializationError is chained as ``__cause__``.
    """

    def __init__(
        self,
        status_code: int,
        error_result: Optional["ErrorResult"] = None,
        raw_body: str = "",
    ):
        self.status_code = status_code
        self.error_result = error_result
        self.raw_body = raw_body
        if error_result is not None:
            detail = "; ".join(self.messages) or "no error messages"
        else:
            detail = f"error deserializing response: {raw_body[:200]}"
        super().__init__(f"PaySimple API error ({status_code}): {detail}")

    @property
    def messages(self) -> list[str]:
        if self.error_result is None:
            return []
        return self.error_result.messages


class AggregateFailure(PaySimpleError):
    """Every attempt of a retried call failed; ``errors`` keeps them in order."""

    def __init__(self, errors: list[PaySimpleError]):
        self.errors = list(errors)
        super().__init__(
            f"All {len(self.errors)} attempts failed; last error: {self.errors[-1] if self.errors else 'none'}"
        )

    @property
    def last(self) -> Optional[PaySimpleError]:
        return self.errors[-1] if self.errors else None
