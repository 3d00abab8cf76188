"""Shared plumbing for the domain services: endpoints and query strings."""

from datetime import date
from typing import Any, Iterable, Optional
from urllib.parse import urlencode

from paysimple.config import Settings
from paysimple.config import settings as default_settings
from paysimple.transport.web_request import WebServiceRequest
from paysimple.validation.validator import ValidationService


class Endpoints:
    CUSTOMER = "customer"
    ACH_ACCOUNT = "account/ach"
    CREDIT_CARD_ACCOUNT = "account/creditcard"
    PAYMENT = "payment"
    RECURRING_PAYMENT = "recurringpayment"
    PAYMENT_PLAN = "paymentplan"
    PAYMENT_SCHEDULE = "paymentschedule"
    GLOBAL_SEARCH = "globalsearch"


DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 200


def format_date(value: Optional[date]) -> Optional[str]:
    return value.strftime("%Y-%m-%d") if value is not None else None


def format_bool(value: bool) -> str:
    return "true" if value else "false"


class ListQuery:
    """
    Builds a listing query string, leaving out parameters at their defaults.

    ``lite`` is always sent; everything else only when it differs from what
    the API would assume anyway.
    """

    def __init__(self, lite: bool = False):
        self._params: list[tuple[str, str]] = [("lite", format_bool(lite))]

    def add(self, name: str, value: Any, default: Any = None) -> "ListQuery":
        if value is None or value == default:
            return self
        self._params.append((name, getattr(value, "value", value)))
        return self

    def add_date(self, name: str, value: Optional[date]) -> "ListQuery":
        return self.add(name, format_date(value))

    def add_list(self, name: str, values: Optional[Iterable[Any]]) -> "ListQuery":
        if values is None:
            return self
        return self.add(name, ",".join(str(getattr(v, "value", v)) for v in values))

    def paging(self, page: int, page_size: int) -> "ListQuery":
        return self.add("page", page, DEFAULT_PAGE).add("pagesize", page_size, DEFAULT_PAGE_SIZE)

    def encode(self) -> str:
        return urlencode(self._params)


class ServiceBase:
    """
    Base for domain services.

    Services can share a transport and validation service (see
    PaySimpleClient); when none are given they are built from settings.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        validation_service: Optional[ValidationService] = None,
        web_request: Optional[WebServiceRequest] = None,
    ):
        self.settings = settings or default_settings
        self.validation_service = validation_service or ValidationService(
            policy=self.settings.validation_policy
        )
        self.web_request = web_request or WebServiceRequest(self.settings)

    def endpoint(self, resource: str, *parts: Any, query: Optional[ListQuery] = None) -> str:
        url = "/".join([self.settings.endpoint_root, resource, *(str(p) for p in parts)])
        if query is not None:
            url = f"{url}?{query.encode()}"
        return url
