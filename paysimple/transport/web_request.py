"""
HTTP transport for the PaySimple API.

Every attempt opens its own httpx.AsyncClient and closes it before
returning, so nothing is shared between attempts or between concurrent
calls except the read-only settings, serializer and SSL context.
"""

import asyncio
import logging
import ssl
from typing import Any, Optional, TypeVar

import httpx

from paysimple.config import Settings
from paysimple.config import settings as default_settings
from paysimple.errors import ConfigurationError, DeserializationError, RemoteError, TransportError
from paysimple.models.common import ErrorResult
from paysimple.transport.retry import Sleep, with_retry
from paysimple.transport.serialization import Serializer
from paysimple.transport.signature import SignatureGenerator

logger = logging.getLogger("paysimple.transport")

T = TypeVar("T")

JSON_MEDIA_TYPE = "application/json"


class WebServiceRequest:
    """
    Signed, retried JSON requests against the PaySimple API.

    Args:
        settings: Credentials, retry budget, timeout and TLS floor.
        serializer: JSON codec for bodies and responses.
        signature_generator: Produces the Authorization header per attempt.
        transport: Optional httpx transport handed to every client, e.g.
            ``httpx.MockTransport`` to run without a network. httpx ignores
            ``verify`` when a transport is given, so an injected transport
            must enforce its own TLS floor (build it with ``ssl_context``).
        sleep: Awaitable used for the delay between attempts.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        serializer: Optional[Serializer] = None,
        signature_generator: Optional[SignatureGenerator] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self._settings = settings or default_settings
        self._serializer = serializer or Serializer()
        self._signature_generator = signature_generator or SignatureGenerator(self._settings)
        self._transport = transport
        self._sleep = sleep

        self._ssl_context = ssl.create_default_context()
        self._ssl_context.minimum_version = self._settings.tls_version

    @property
    def ssl_context(self) -> ssl.SSLContext:
        return self._ssl_context

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    async def send(self, method: str, url: str, body: Any = None) -> httpx.Response:
        """
        Send one logical request and return the raw 2xx response.

        Raises:
            ConfigurationError: Credentials are missing or the URL is malformed.
            RemoteError, TransportError: Single-attempt budget and the call failed.
            AggregateFailure: Multi-attempt budget exhausted.
        """
        content = self._serializer.serialize(body) if body is not None else None
        return await with_retry(
            self._do_request,
            method.upper(),
            url,
            content,
            attempts=self._settings.retry_count,
            delay=self._settings.retry_delay,
            sleep=self._sleep,
        )

    async def send_typed(
        self,
        method: str,
        url: str,
        response_type: type[T],
        body: Any = None,
    ) -> T:
        """
        Send a request and parse the response body as ``response_type``.

        A body that does not parse raises DeserializationError; the request
        already succeeded, so it is not retried.
        """
        response = await self.send(method, url, body)
        return self._serializer.deserialize(response.content, response_type)

    async def get(self, url: str) -> httpx.Response:
        return await self.send("GET", url)

    async def get_deserialized(self, url: str, response_type: type[T]) -> T:
        return await self.send_typed("GET", url, response_type)

    async def put(self, url: str, body: Any = None) -> httpx.Response:
        return await self.send("PUT", url, body)

    async def put_deserialized(self, url: str, response_type: type[T], body: Any = None) -> T:
        return await self.send_typed("PUT", url, response_type, body)

    async def post(self, url: str, body: Any) -> httpx.Response:
        return await self.send("POST", url, body)

    async def post_deserialized(self, url: str, response_type: type[T], body: Any) -> T:
        return await self.send_typed("POST", url, response_type, body)

    async def delete(self, url: str) -> httpx.Response:
        return await self.send("DELETE", url)

    async def _do_request(self, method: str, url: str, content: Optional[str]) -> httpx.Response:
        headers = {
            "Authorization": self._signature_generator.generate_signature(),
            "Accept": JSON_MEDIA_TYPE,
        }
        if content is not None:
            headers["Content-Type"] = JSON_MEDIA_TYPE

        logger.debug("%s %s", method, url)

        try:
            async with httpx.AsyncClient(
                timeout=self._settings.timeout,
                verify=self._ssl_context,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, content=content, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e!r}", method=method, url=url) from e
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid request URL {url!r}: {e}") from e

        if response.is_success:
            return response

        self._raise_remote_error(response)

    def _raise_remote_error(self, response: httpx.Response) -> None:
        body = response.text
        try:
            error_result = self._serializer.deserialize(body, ErrorResult)
        except DeserializationError as e:
            raise RemoteError(response.status_code, raw_body=body) from e
        raise RemoteError(response.status_code, error_result, raw_body=body)
