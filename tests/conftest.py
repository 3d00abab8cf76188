"""Shared test fixtures."""

from typing import Callable, Union

import httpx
import pytest

from paysimple.config import Settings
from paysimple.transport.web_request import WebServiceRequest

Reply = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


class FakeApi:
    """
    Stand-in for the PaySimple API behind an httpx.MockTransport.

    Replies are consumed in order; the last one repeats once the queue is
    down to a single entry. Every request is recorded.
    """

    def __init__(self, *replies: Reply):
        self.replies = list(replies) or [httpx.Response(200, json={})]
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        if callable(reply) and not isinstance(reply, httpx.Response):
            return reply(request)
        return reply

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class FakeSleep:
    def __init__(self):
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        username="apiuser",
        api_key="secret-key",
        base_url="https://api.test",
        retry_count=1,
        retry_delay=1.0,
        _env_file=None,
    )


@pytest.fixture
def sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def make_request(settings: Settings, sleep: FakeSleep):
    """Build a WebServiceRequest wired to a FakeApi, optionally overriding settings."""

    def factory(api: FakeApi, **overrides) -> WebServiceRequest:
        cfg = settings.model_copy(update=overrides) if overrides else settings
        return WebServiceRequest(cfg, transport=api.transport, sleep=sleep)

    return factory


def envelope(response, status_code: int = 200) -> dict:
    return {
        "Meta": {"Errors": None, "HttpStatus": "OK", "HttpStatusCode": status_code, "PagingDetails": None},
        "Response": response,
    }


def error_body(*messages: tuple[str, str], code: str = "InvalidInput", status: int = 400) -> dict:
    return {
        "Meta": {
            "Errors": {
                "ErrorCode": code,
                "ErrorMessages": [{"Field": f, "Message": m} for f, m in messages],
                "TraceCode": "trace-123",
            },
            "HttpStatus": "BadRequest",
            "HttpStatusCode": status,
            "PagingDetails": None,
        },
        "Response": None,
    }
