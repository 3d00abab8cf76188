from paysimple.services.accounts import AccountService
from paysimple.services.base import Endpoints, ListQuery, ServiceBase
from paysimple.services.customers import CustomerService
from paysimple.services.payments import PaymentService
from paysimple.services.schedules import PaymentScheduleService

__all__ = [
    "AccountService",
    "CustomerService",
    "Endpoints",
    "ListQuery",
    "PaymentScheduleService",
    "PaymentService",
    "ServiceBase",
]
