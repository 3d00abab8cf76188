"""
Recurring payment and payment plan endpoints.

Both schedule kinds share the same lifecycle actions (pause until a date,
suspend, resume, delete); only the resource path differs.
"""

import logging
from datetime import date
from typing import Optional

from paysimple.models.common import Result
from paysimple.models.enums import ScheduleSort, ScheduleStatus, SortDirection
from paysimple.models.schedule import PaymentPlan, PaymentScheduleList, RecurringPayment
from paysimple.services.base import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, Endpoints, ListQuery, ServiceBase, format_date

logger = logging.getLogger("paysimple.services.schedules")


class PaymentScheduleService(ServiceBase):
    async def create_recurring_payment(self, recurring_payment: RecurringPayment) -> Result[RecurringPayment]:
        self.validation_service.validate(recurring_payment)
        return await self.web_request.post_deserialized(
            self.endpoint(Endpoints.RECURRING_PAYMENT), Result[RecurringPayment], recurring_payment
        )

    async def create_payment_plan(self, payment_plan: PaymentPlan) -> Result[PaymentPlan]:
        self.validation_service.validate(payment_plan)
        return await self.web_request.post_deserialized(
            self.endpoint(Endpoints.PAYMENT_PLAN), Result[PaymentPlan], payment_plan
        )

    async def update_recurring_payment(self, recurring_payment: RecurringPayment) -> Result[RecurringPayment]:
        self.validation_service.validate(recurring_payment)
        return await self.web_request.put_deserialized(
            self.endpoint(Endpoints.RECURRING_PAYMENT), Result[RecurringPayment], recurring_payment
        )

    async def get_recurring_payment(self, schedule_id: int) -> Result[RecurringPayment]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.RECURRING_PAYMENT, schedule_id), Result[RecurringPayment]
        )

    async def get_payment_plan(self, schedule_id: int) -> Result[PaymentPlan]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.PAYMENT_PLAN, schedule_id), Result[PaymentPlan]
        )

    async def get_all_payment_schedules(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[ScheduleStatus] = None,
        sort_by: ScheduleSort = ScheduleSort.ID,
        direction: SortDirection = SortDirection.ASC,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        lite: bool = False,
    ) -> Result[PaymentScheduleList]:
        query = (
            ListQuery(lite)
            .add_date("startdate", start_date)
            .add_date("enddate", end_date)
            .add("status", status)
            .add("sortby", sort_by, ScheduleSort.ID)
            .add("direction", direction, SortDirection.ASC)
            .paging(page, page_size)
        )
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.PAYMENT_SCHEDULE, query=query), Result[PaymentScheduleList]
        )

    async def delete_recurring_payment(self, schedule_id: int) -> None:
        await self._delete(Endpoints.RECURRING_PAYMENT, schedule_id)

    async def delete_payment_plan(self, schedule_id: int) -> None:
        await self._delete(Endpoints.PAYMENT_PLAN, schedule_id)

    async def pause_recurring_payment(self, schedule_id: int, end_date: date) -> None:
        await self._pause(Endpoints.RECURRING_PAYMENT, schedule_id, end_date)

    async def pause_payment_plan(self, schedule_id: int, end_date: date) -> None:
        await self._pause(Endpoints.PAYMENT_PLAN, schedule_id, end_date)

    async def suspend_recurring_payment(self, schedule_id: int) -> None:
        await self._change_state(Endpoints.RECURRING_PAYMENT, schedule_id, "suspend")

    async def suspend_payment_plan(self, schedule_id: int) -> None:
        await self._change_state(Endpoints.PAYMENT_PLAN, schedule_id, "suspend")

    async def resume_recurring_payment(self, schedule_id: int) -> None:
        await self._change_state(Endpoints.RECURRING_PAYMENT, schedule_id, "resume")

    async def resume_payment_plan(self, schedule_id: int) -> None:
        await self._change_state(Endpoints.PAYMENT_PLAN, schedule_id, "resume")

    async def _delete(self, resource: str, schedule_id: int) -> None:
        await self.web_request.delete(self.endpoint(resource, schedule_id))
        logger.info("Deleted %s %s", resource, schedule_id)

    async def _pause(self, resource: str, schedule_id: int, end_date: date) -> None:
        url = f"{self.endpoint(resource, schedule_id, 'pause')}?enddate={format_date(end_date)}"
        await self.web_request.put(url)
        logger.info("Paused %s %s until %s", resource, schedule_id, format_date(end_date))

    async def _change_state(self, resource: str, schedule_id: int, action: str) -> None:
        await self.web_request.put(self.endpoint(resource, schedule_id, action))
        logger.info("%s %s %s", action.capitalize(), resource, schedule_id)
