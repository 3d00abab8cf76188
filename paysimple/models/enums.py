"""Enumerations for the PaySimple domain model."""

from enum import Enum, IntEnum


class Issuer(IntEnum):
    """Credit card networks, as numbered by the API."""

    UNKNOWN = 0
    VISA = 12
    MASTER = 13
    AMEX = 14
    DISCOVER = 15


class PaymentStatus(str, Enum):
    """Lifecycle states for a payment."""

    PENDING = "Pending"
    POSTED = "Posted"
    SETTLED = "Settled"
    FAILED = "Failed"
    VOIDED = "Voided"
    REVERSED = "Reversed"
    REVERSE_POSTED = "ReversePosted"
    CHARGEBACK = "ChargeBack"
    AUTHORIZED = "Authorized"
    RETURNED = "Returned"
    REVERSE_NSF = "ReverseNsf"
    REFUND_SETTLED = "RefundSettled"


class PaymentType(str, Enum):
    CREDIT_CARD = "CC"
    ACH = "ACH"


class ScheduleStatus(str, Enum):
    """Lifecycle states for a payment schedule."""

    ACTIVE = "Active"
    PAUSE_UNTIL = "PauseUntil"
    EXPIRED = "Expired"
    SUSPENDED = "Suspended"


class ExecutionFrequency(IntEnum):
    """How often a recurring payment or payment plan executes."""

    DAILY = 1
    WEEKLY = 2
    BI_WEEKLY = 3
    FIRST_OF_MONTH = 4
    SPECIFIC_DAY_OF_MONTH = 5
    LAST_OF_MONTH = 6
    QUARTERLY = 7
    SEMI_ANNUALLY = 8
    ANNUALLY = 9


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class CustomerSort(str, Enum):
    LAST_NAME = "lastname"
    FIRST_NAME = "firstname"
    COMPANY = "company"
    CUSTOMER_ID = "customerid"
    EMAIL = "email"


class PaymentSort(str, Enum):
    PAYMENT_ID = "paymentid"
    PAYMENT_DATE = "paymentdate"
    AMOUNT = "amount"
    STATUS = "status"
    CUSTOMER_LAST_NAME = "lastname"
    INVOICE_NUMBER = "invoicenumber"


class ScheduleSort(str, Enum):
    ID = "id"
    START_DATE = "startdate"
    NEXT_PAYMENT_DATE = "nextscheduledate"
    PAYMENT_AMOUNT = "paymentamount"
    SCHEDULE_STATUS = "schedulestatus"
    PAYMENT_SCHEDULE_TYPE = "paymentscheduletype"
