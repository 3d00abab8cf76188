"""JSON wire serialization backed by pydantic."""

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from paysimple.errors import DeserializationError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", None) or repr(type_)


class Serializer:
    """Converts models to and from the API's JSON representation."""

    def serialize(self, obj: Any) -> str:
        # Unset optionals are left out so the API applies its own defaults
        if isinstance(obj, BaseModel):
            return obj.model_dump_json(by_alias=True, exclude_none=True)
        return _adapter(type(obj)).dump_json(obj, by_alias=True, exclude_none=True).decode("utf-8")

    def deserialize(self, text: str | bytes, type_: type[T]) -> T:
        """
        Parse JSON text into ``type_``.

        Raises:
            DeserializationError: Malformed JSON or a shape that does not fit.
        """
        try:
            return _adapter(type_).validate_json(text)
        except ValidationError as e:
            body = text.decode("utf-8", errors="replace") if isinstance(text, bytes) else text
            raise DeserializationError(_type_name(type_), body, reason=str(e.errors()[0]["msg"])) from e
