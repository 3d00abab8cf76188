"""Customer records."""

from datetime import datetime
from typing import Optional

from paysimple.models.common import Address, PaySimpleModel


class Customer(PaySimpleModel):
    id: int = 0
    first_name: str = ""
    middle_name: Optional[str] = None
    last_name: str = ""
    company: Optional[str] = None
    email: Optional[str] = None
    alt_email: Optional[str] = None
    phone: Optional[str] = None
    alt_phone: Optional[str] = None
    mobile_phone: Optional[str] = None
    fax: Optional[str] = None
    website: Optional[str] = None
    customer_account: Optional[str] = None
    notes: Optional[str] = None
    billing_address: Optional[Address] = None
    shipping_same_as_billing: bool = True
    shipping_address: Optional[Address] = None
    created_on: Optional[datetime] = None
    last_modified: Optional[datetime] = None
