from paysimple.models.account import Account, AccountList, Ach, CreditCard
from paysimple.models.common import (
    Address,
    ErrorMessage,
    ErrorResult,
    Meta,
    PagingDetails,
    PaySimpleModel,
    Result,
    SearchResults,
)
from paysimple.models.customer import Customer
from paysimple.models.enums import (
    CustomerSort,
    ExecutionFrequency,
    Issuer,
    PaymentSort,
    PaymentStatus,
    PaymentType,
    ScheduleSort,
    ScheduleStatus,
    SortDirection,
)
from paysimple.models.payment import Payment
from paysimple.models.schedule import PaymentPlan, PaymentScheduleList, RecurringPayment

__all__ = [
    "Account",
    "AccountList",
    "Ach",
    "Address",
    "CreditCard",
    "Customer",
    "CustomerSort",
    "ErrorMessage",
    "ErrorResult",
    "ExecutionFrequency",
    "Issuer",
    "Meta",
    "PagingDetails",
    "PaySimpleModel",
    "Payment",
    "PaymentPlan",
    "PaymentScheduleList",
    "PaymentSort",
    "PaymentStatus",
    "PaymentType",
    "RecurringPayment",
    "Result",
    "ScheduleSort",
    "ScheduleStatus",
    "SearchResults",
    "SortDirection",
]
