"""One-off payments."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from paysimple.models.common import Money, PaySimpleModel
from paysimple.models.enums import PaymentStatus, PaymentType


class Payment(PaySimpleModel):
    id: int = 0
    account_id: int = 0
    customer_id: int = 0
    customer_first_name: Optional[str] = None
    customer_last_name: Optional[str] = None
    customer_company: Optional[str] = None
    amount: Money = Decimal("0")
    payment_date: Optional[datetime] = None
    status: Optional[PaymentStatus] = None
    payment_type: Optional[PaymentType] = None
    invoice_number: Optional[str] = None
    purchase_order_number: Optional[str] = None
    order_id: Optional[str] = None
    description: Optional[str] = None
    cvv: Optional[str] = None
    is_debit: bool = False
    recurring_schedule_id: int = 0
    reference_id: int = 0
    provider_auth_code: Optional[str] = None
    trace_number: Optional[str] = None
    failure_data: Optional[dict] = None
    created_on: Optional[datetime] = None
    last_modified: Optional[datetime] = None
