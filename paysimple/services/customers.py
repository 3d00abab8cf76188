"""Customer endpoints, including per-customer account, payment and schedule listings."""

import logging
from datetime import date
from typing import Iterable, Optional
from urllib.parse import urlencode

from paysimple.models.account import AccountList, Ach, CreditCard
from paysimple.models.common import Result, SearchResults
from paysimple.models.customer import Customer
from paysimple.models.enums import CustomerSort, PaymentSort, PaymentStatus, ScheduleSort, ScheduleStatus, SortDirection
from paysimple.models.payment import Payment
from paysimple.models.schedule import PaymentPlan, PaymentScheduleList, RecurringPayment
from paysimple.services.base import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, Endpoints, ListQuery, ServiceBase

logger = logging.getLogger("paysimple.services.customers")


def _schedule_query(
    start_date: Optional[date],
    end_date: Optional[date],
    status: Optional[ScheduleStatus],
    sort_by: ScheduleSort,
    direction: SortDirection,
    page: int,
    page_size: int,
    lite: bool,
) -> ListQuery:
    return (
        ListQuery(lite)
        .add_date("startdate", start_date)
        .add_date("enddate", end_date)
        .add("status", status)
        .add("sortby", sort_by, ScheduleSort.ID)
        .add("direction", direction, SortDirection.ASC)
        .paging(page, page_size)
    )


class CustomerService(ServiceBase):
    async def create_customer(self, customer: Customer) -> Result[Customer]:
        self.validation_service.validate(customer)
        result = await self.web_request.post_deserialized(
            self.endpoint(Endpoints.CUSTOMER), Result[Customer], customer
        )
        logger.info("Created customer %s", result.response.id if result.response else "-")
        return result

    async def update_customer(self, customer: Customer) -> Result[Customer]:
        self.validation_service.validate(customer)
        return await self.web_request.put_deserialized(
            self.endpoint(Endpoints.CUSTOMER), Result[Customer], customer
        )

    async def delete_customer(self, customer_id: int) -> None:
        await self.web_request.delete(self.endpoint(Endpoints.CUSTOMER, customer_id))
        logger.info("Deleted customer %s", customer_id)

    async def get_customer(self, customer_id: int) -> Result[Customer]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CUSTOMER, customer_id), Result[Customer]
        )

    async def get_customers(
        self,
        sort_by: CustomerSort = CustomerSort.LAST_NAME,
        direction: SortDirection = SortDirection.ASC,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        lite: bool = False,
    ) -> Result[list[Customer]]:
        query = (
            ListQuery(lite)
            .add("sortby", sort_by, CustomerSort.LAST_NAME)
            .add("direction", direction, SortDirection.ASC)
            .paging(page, page_size)
        )
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CUSTOMER, query=query), Result[list[Customer]]
        )

    async def find_customer(self, query: str) -> Result[SearchResults]:
        """Free-text search across customers, payments and schedules."""
        url = f"{self.endpoint(Endpoints.GLOBAL_SEARCH)}?{urlencode({'Query': query})}"
        return await self.web_request.get_deserialized(url, Result[SearchResults])

    async def get_ach_accounts(self, customer_id: int) -> Result[list[Ach]]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CUSTOMER, customer_id, "achaccounts"), Result[list[Ach]]
        )

    async def get_credit_card_accounts(self, customer_id: int) -> Result[list[CreditCard]]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CUSTOMER, customer_id, "creditcardaccounts"), Result[list[CreditCard]]
        )

    async def get_all_accounts(self, customer_id: int) -> Result[AccountList]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CUSTOMER, customer_id, "accounts"), Result[AccountList]
        )

    async def get_default_ach_account(self, customer_id: int) -> Result[Ach]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CUSTOMER, customer_id, "defaultach"), Result[Ach]
        )

    async def get_default_credit_card_account(self, customer_id: int) -> Result[CreditCard]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CUSTOMER, customer_id, "defaultcreditcard"), Result[CreditCard]
        )

    async def set_default_account(self, customer_id: int, account_id: int) -> None:
        await self.web_request.put(self.endpoint(Endpoints.CUSTOMER, customer_id, account_id))

    async def get_payments(
        self,
        customer_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[Iterable[PaymentStatus]] = None,
        sort_by: PaymentSort = PaymentSort.PAYMENT_ID,
        direction: SortDirection = SortDirection.ASC,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        lite: bool = False,
    ) -> Result[list[Payment]]:
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
            self.endpoint(Endpoints.CUSTOMER, customer_id, "payments", query=query), Result[list[Payment]]
        )

    async def get_payment_schedules(
        self,
        customer_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[ScheduleStatus] = None,
        sort_by: ScheduleSort = ScheduleSort.ID,
        direction: SortDirection = SortDirection.ASC,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        lite: bool = False,
    ) -> Result[PaymentScheduleList]:
        query = _schedule_query(start_date, end_date, status, sort_by, direction, page, page_size, lite)
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CUSTOMER, customer_id, "paymentschedules", query=query),
            Result[PaymentScheduleList],
        )

    async def get_recurring_payment_schedules(
        self,
        customer_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[ScheduleStatus] = None,
        sort_by: ScheduleSort = ScheduleSort.ID,
        direction: SortDirection = SortDirection.ASC,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        lite: bool = False,
    ) -> Result[list[RecurringPayment]]:
        query = _schedule_query(start_date, end_date, status, sort_by, direction, page, page_size, lite)
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CUSTOMER, customer_id, "recurringpayments", query=query),
            Result[list[RecurringPayment]],
        )

    async def get_payment_plans(
        self,
        customer_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[ScheduleStatus] = None,
        sort_by: ScheduleSort = ScheduleSort.ID,
        direction: SortDirection = SortDirection.ASC,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        lite: bool = False,
    ) -> Result[list[PaymentPlan]]:
        # Payment plans have a single schedule type, so sorting by it is meaningless
        if sort_by is ScheduleSort.PAYMENT_SCHEDULE_TYPE:
            sort_by = ScheduleSort.ID
        query = _schedule_query(start_date, end_date, status, sort_by, direction, page, page_size, lite)
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CUSTOMER, customer_id, "paymentplans", query=query),
            Result[list[PaymentPlan]],
        )
