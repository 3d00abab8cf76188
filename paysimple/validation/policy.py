"""Acceptance policy for sensitive account fields."""

from enum import Enum


class ValidationPolicy(str, Enum):
    """
    Which rule generation to apply to account fields.

    STRICT accepts raw digit strings only and the US/CA postal formats.
    PERMISSIVE additionally accepts masked values (``****1111``) as returned
    by the API for stored accounts, and any postal code up to 10 characters.
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"
