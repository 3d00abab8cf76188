"""
Payment schedules.

A RecurringPayment charges a fixed amount on a frequency until an optional
end date. A PaymentPlan is a recurring payment that works down a fixed total
over a fixed number of payments; the API fills in the progress fields.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from paysimple.models.common import Money, PaySimpleModel
from paysimple.models.enums import ExecutionFrequency, PaymentType, ScheduleStatus


class RecurringPayment(PaySimpleModel):
    id: int = 0
    customer_id: int = 0
    customer_first_name: Optional[str] = None
    customer_last_name: Optional[str] = None
    customer_company: Optional[str] = None
    account_id: int = 0
    payment_amount: Money = Decimal("0")
    first_payment_amount: Optional[Money] = None
    first_payment_date: Optional[datetime] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    next_schedule_payment_date: Optional[datetime] = None
    pause_until_date: Optional[datetime] = None
    execution_frequency_type: Optional[ExecutionFrequency] = None
    execution_frequency_parameter: Optional[int] = None
    schedule_status: Optional[ScheduleStatus] = None
    payment_type: Optional[PaymentType] = None
    invoice_number: Optional[str] = None
    order_id: Optional[str] = None
    description: Optional[str] = None
    has_schedule_ended: bool = False
    date_of_last_payment_made: Optional[datetime] = None
    created_on: Optional[datetime] = None
    last_modified: Optional[datetime] = None


class PaymentPlan(RecurringPayment):
    total_due_amount: Money = Decimal("0")
    total_number_of_payments: int = 0
    balance_remaining: Money = Decimal("0")
    number_of_payments_made: int = 0
    number_of_payments_remaining: int = 0


class PaymentScheduleList(PaySimpleModel):
    recurring_payments: list[RecurringPayment] = Field(default_factory=list)
    payment_plans: list[PaymentPlan] = Field(default_factory=list)
