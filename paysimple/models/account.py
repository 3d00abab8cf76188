"""Payment accounts: ACH bank accounts and credit cards."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from paysimple.models.common import PaySimpleModel
from paysimple.models.enums import Issuer


class Account(PaySimpleModel):
    """Fields shared by every account type."""

    id: int = 0
    customer_id: int = 0
    is_default: bool = False
    created_on: Optional[datetime] = None
    last_modified: Optional[datetime] = None


class Ach(Account):
    """
    A bank account debited through ACH.

    ``account_number`` may come back masked (``*****6789``) when the record
    is read from the API.
    """

    account_number: str = ""
    routing_number: str = ""
    bank_name: str = ""
    is_checking_account: bool = True


class CreditCard(Account):
    credit_card_number: str = ""
    expiration_date: str = ""  # MM/YYYY
    issuer: Issuer = Issuer.UNKNOWN
    billing_zip_code: Optional[str] = None


class AccountList(PaySimpleModel):
    ach_accounts: list[Ach] = Field(default_factory=list)
    credit_card_accounts: list[CreditCard] = Field(default_factory=list)
