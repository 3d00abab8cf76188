"""
PaySimple API client.

Bundles the domain services over one transport and one validation service:

    client = PaySimpleClient(Settings(username="...", api_key="..."))
    result = await client.customers.get_customer(42)

Settings default to the environment (PAYSIMPLE_USERNAME, PAYSIMPLE_API_KEY, ...).
"""

import logging
from typing import Optional

import httpx

from paysimple.config import Settings
from paysimple.config import settings as default_settings
from paysimple.services.accounts import AccountService
from paysimple.services.customers import CustomerService
from paysimple.services.payments import PaymentService
from paysimple.services.schedules import PaymentScheduleService
from paysimple.transport.web_request import WebServiceRequest
from paysimple.validation.validator import ValidationService

logger = logging.getLogger("paysimple.client")


class PaySimpleClient:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or default_settings
        self.web_request = WebServiceRequest(self.settings, transport=transport)
        self.validation_service = ValidationService(policy=self.settings.validation_policy)

        shared = dict(
            settings=self.settings,
            validation_service=self.validation_service,
            web_request=self.web_request,
        )
        self.customers = CustomerService(**shared)
        self.accounts = AccountService(**shared)
        self.payments = PaymentService(**shared)
        self.schedules = PaymentScheduleService(**shared)

        logger.debug(
            "PaySimple client ready: %s (attempts=%d, timeout=%.1fs, policy=%s)",
            self.settings.endpoint_root,
            self.settings.retry_count,
            self.settings.timeout,
            self.settings.validation_policy.value,
        )
