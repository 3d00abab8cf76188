"""ACH and credit card account endpoints."""

import logging

from paysimple.models.account import Ach, CreditCard
from paysimple.models.common import Result
from paysimple.services.base import Endpoints, ServiceBase

logger = logging.getLogger("paysimple.services.accounts")


class AccountService(ServiceBase):
    async def create_ach_account(self, account: Ach) -> Result[Ach]:
        self.validation_service.validate(account)
        result = await self.web_request.post_deserialized(
            self.endpoint(Endpoints.ACH_ACCOUNT), Result[Ach], account
        )
        logger.info("Created ACH account for customer %s", account.customer_id)
        return result

    async def create_credit_card_account(self, account: CreditCard) -> Result[CreditCard]:
        self.validation_service.validate(account)
        result = await self.web_request.post_deserialized(
            self.endpoint(Endpoints.CREDIT_CARD_ACCOUNT), Result[CreditCard], account
        )
        logger.info("Created credit card account for customer %s", account.customer_id)
        return result

    async def update_ach_account(self, account: Ach) -> Result[Ach]:
        self.validation_service.validate(account)
        return await self.web_request.put_deserialized(
            self.endpoint(Endpoints.ACH_ACCOUNT), Result[Ach], account
        )

    async def update_credit_card_account(self, account: CreditCard) -> Result[CreditCard]:
        self.validation_service.validate(account)
        return await self.web_request.put_deserialized(
            self.endpoint(Endpoints.CREDIT_CARD_ACCOUNT), Result[CreditCard], account
        )

    async def get_ach_account(self, account_id: int) -> Result[Ach]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.ACH_ACCOUNT, account_id), Result[Ach]
        )

    async def get_credit_card_account(self, account_id: int) -> Result[CreditCard]:
        return await self.web_request.get_deserialized(
            self.endpoint(Endpoints.CREDIT_CARD_ACCOUNT, account_id), Result[CreditCard]
        )

    async def delete_ach_account(self, account_id: int) -> None:
        await self.web_request.delete(self.endpoint(Endpoints.ACH_ACCOUNT, account_id))

    async def delete_credit_card_account(self, account_id: int) -> None:
        await self.web_request.delete(self.endpoint(Endpoints.CREDIT_CARD_ACCOUNT, account_id))
