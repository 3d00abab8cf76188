"""Payment endpoints: create, look up, list, reverse and void."""

import logging
from datetime import date
from typing import Iterable, Optional

from paysimple.models.common import Result
from paysimple.models.enums import PaymentSort, PaymentStatus, SortDirection
from paysimple.models.payment import Payment
from paysimple.services.base import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, Endpoints, ListQuery, ServiceBase

logger = logging.getLogger("paysimple.services.payments")


class PaymentService(ServiceBase):
    async def create_payment(self, payment: Payment) -> Result[Payment]:
        self.validation_service.validate(payment)
        result = await self.web_request.post_deserialized(
            self.endpoint(Endpoints.PAYMENT), Result[Payment], payment
        )
        if result.response:
            logger.info(
                "Payment %s created on account %s: %.2f (%s)",
                result.response.id,
                payment.account_id,
                payment.amount,
                result.response.status.value if result.response.status else "unknown",
            )
        return result

    async def get_payment(self, payment_id: int) -> Result[Payment]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.PAYMENT, payment_id), Result[Payment]
        )

    async def get_payments(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[Iterable[PaymentStatus]] = None,
        sort_by: PaymentSort = PaymentSort.PAYMENT_ID,
        direction: SortDirection = SortDirection.DESC,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        lite: bool = False,
    ) -> Result[list[Payment]]:
        """List payments across all customers, newest first by default."""
        query = (
            ListQuery(lite)
            .add_date("startdate", start_date)
            .add_date("enddate", end_date)
            .add_list("status", status)
            .add("sortby", sort_by, PaymentSort.PAYMENT_ID)
            .add("direction", direction, SortDirection.ASC)
            .paging(page, page_size)
        )
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.PAYMENT, query=query), Result[list[Payment]]
        )

    async def reverse_payment(self, payment_id: int) -> Result[Payment]:
        """Refund a settled payment."""
        result = await self.web_request.put_deserialized(
            self.endpoint(Endpoints.PAYMENT, payment_id, "reverse"), Result[Payment]
        )
        logger.info("Reversed payment %s", payment_id)
        return result

    async def void_payment(self, payment_id: int) -> Result[Payment]:
        """Cancel a payment that has not settled yet."""
        result = await self.web_request.put_deserialized(
            self.endpoint(Endpoints.PAYMENT, payment_id, "void"), Result[Payment]
        )
        logger.info("Voided payment %s", payment_id)
        return result
