"""Shared wire models: the response envelope, errors and addresses."""

from decimal import Decimal
from typing import Annotated, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_pascal

T = TypeVar("T")

# Currency amounts stay exact in Python and go over the wire as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class PaySimpleModel(BaseModel):
    """Base for every wire model: snake_case attributes, PascalCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
    )


class Address(PaySimpleModel):
    street_address1: Optional[str] = None
    street_address2: Optional[str] = None
    city: Optional[str] = None
    state_code: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class PagingDetails(PaySimpleModel):
    total_items: int = 0
    page: int = 1
    items_per_page: int = 200


class ErrorMessage(PaySimpleModel):
    field: Optional[str] = None
    message: str = ""


class Errors(PaySimpleModel):
    error_code: Optional[str] = None
    error_messages: list[ErrorMessage] = Field(default_factory=list)
    trace_code: Optional[str] = None


class Meta(PaySimpleModel):
    errors: Optional[Errors] = None
    http_status: Optional[str] = None
    http_status_code: Optional[int] = None
    paging_details: Optional[PagingDetails] = None


class ErrorResult(PaySimpleModel):
    """Body returned by the API alongside a non-success status code."""

    meta: Meta

    @property
    def messages(self) -> list[str]:
        if not self.meta.errors:
            return []
        return [
            f"{m.field}: {m.message}" if m.field else m.message
            for m in self.meta.errors.error_messages
        ]


class Result(PaySimpleModel, Generic[T]):
    """Success envelope: metadata plus the typed payload."""

    meta: Optional[Meta] = None
    response: Optional[T] = None


class SearchResults(PaySimpleModel):
    customers: list[dict] = Field(default_factory=list)
    payments: list[dict] = Field(default_factory=list)
    payment_schedules: list[dict] = Field(default_factory=list)
