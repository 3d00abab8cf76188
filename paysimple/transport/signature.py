"""
Authorization header generation.

PaySimple authenticates each request with an HMAC-SHA256 of the current UTC
timestamp, keyed by the account's API key:

    PSSERVER accessid=<username>; timestamp=<iso8601>; signature=<base64 hmac>

The timestamp is part of the signed message, so a header must be generated
fresh for every attempt.
"""

import base64
import hashlib
import hmac
from datetime import datetime, timezone
from typing import Callable, Optional

from paysimple.config import Settings
from paysimple.errors import ConfigurationError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SignatureGenerator:
    def __init__(self, settings: Settings, clock: Optional[Callable[[], datetime]] = None):
        self._username = settings.username
        self._api_key = settings.api_key
        self._clock = clock or _utcnow

    def generate_signature(self) -> str:
        """
        Build the Authorization header value for one request.

        Raises:
            ConfigurationError: Username or API key is not configured.
        """
        if not self._username:
            raise ConfigurationError("PaySimple username is not configured (PAYSIMPLE_USERNAME)")
        if not self._api_key:
            raise ConfigurationError("PaySimple API key is not configured (PAYSIMPLE_API_KEY)")

        timestamp = self._clock().strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
        digest = hmac.new(
            self._api_key.encode("utf-8"),
            timestamp.encode("utf-8"),
            hashlib.sha256,
        ).digest()
        signature = base64.b64encode(digest).decode("ascii")

        return f"PSSERVER accessid={self._username}; timestamp={timestamp}; signature={signature}"
