"""
Rule sets per payload type.

Each concrete model maps to the rules that are specific to it; rules for a
base class (e.g. Account) apply to every subclass through the validator's
MRO walk, so they are declared once here and never repeated.

Two generations of account rules exist. STRICT mirrors the documented API
contract (raw digits, US/CA postal codes). PERMISSIVE also accepts masked
values the API hands back for stored accounts, and relaxes postal codes to
any value of at most 10 characters.
"""

from paysimple.models.account import Account, Ach, CreditCard
from paysimple.models.customer import Customer
from paysimple.models.payment import Payment
from paysimple.models.schedule import PaymentPlan, RecurringPayment
from paysimple.validation.policy import ValidationPolicy
from paysimple.validation.rules import (
    ACCOUNT_NUMBER,
    CREDIT_CARD_NUMBER,
    CVV,
    EMAIL,
    EXPIRATION_DATE,
    MASKED_ACCOUNT_NUMBER,
    MASKED_CREDIT_CARD_NUMBER,
    MAX_POSTAL_CODE_LENGTH,
    ROUTING_NUMBER,
    US_CA_POSTAL_CODE,
    FieldRule,
    RuleSet,
    matches,
    max_length,
    nested,
    not_empty,
    optional,
    positive,
)

ACCOUNT_NUMBER_MESSAGE = "AccountNumber must be numeric string and must be between 4 and 100 digits"
ROUTING_NUMBER_MESSAGE = "RoutingNumber must be a 9 digit number"
CREDIT_CARD_REQUIRED_MESSAGE = "CreditCardNumber is required"
CREDIT_CARD_INVALID_MESSAGE = "CreditCardNumber is invalid"
EXPIRATION_REQUIRED_MESSAGE = "ExpirationDate is required"
EXPIRATION_FORMAT_MESSAGE = 'ExpirationDate must be in a "MM/YYYY" format'
STRICT_POSTAL_CODE_MESSAGE = (
    "BillingZipCode must be a valid US or CA postal code, "
    "acceptable formats are 11111, 11111-1111, A1A1A1, or A1A 1A1"
)
PERMISSIVE_POSTAL_CODE_MESSAGE = "BillingZipCode cannot exceed 10 characters"
CUSTOMER_STRICT_POSTAL_CODE_MESSAGE = (
    "BillingAddress.ZipCode must be a valid US or CA postal code, "
    "acceptable formats are 11111, 11111-1111, A1A1A1, or A1A 1A1"
)
CUSTOMER_PERMISSIVE_POSTAL_CODE_MESSAGE = "BillingAddress.ZipCode cannot exceed 10 characters"


def _account_rules() -> RuleSet:
    return (FieldRule("customer_id", positive, "CustomerId is required"),)


def _ach_rules(policy: ValidationPolicy) -> RuleSet:
    if policy is ValidationPolicy.PERMISSIVE:
        account_number = matches(ACCOUNT_NUMBER, MASKED_ACCOUNT_NUMBER)
    else:
        account_number = matches(ACCOUNT_NUMBER)

    return (
        FieldRule("account_number", account_number, ACCOUNT_NUMBER_MESSAGE),
        FieldRule("bank_name", not_empty, "BankName is required"),
        FieldRule("bank_name", max_length(100), "BankName cannot exceed 100 characters"),
        FieldRule("routing_number", matches(ROUTING_NUMBER), ROUTING_NUMBER_MESSAGE),
    )


def _credit_card_rules(policy: ValidationPolicy) -> RuleSet:
    if policy is ValidationPolicy.PERMISSIVE:
        card_number = matches(CREDIT_CARD_NUMBER, MASKED_CREDIT_CARD_NUMBER)
        postal_code = FieldRule(
            "billing_zip_code", max_length(MAX_POSTAL_CODE_LENGTH), PERMISSIVE_POSTAL_CODE_MESSAGE
        )
    else:
        card_number = matches(CREDIT_CARD_NUMBER)
        postal_code = FieldRule(
            "billing_zip_code", optional(matches(US_CA_POSTAL_CODE)), STRICT_POSTAL_CODE_MESSAGE
        )

    return (
        FieldRule("credit_card_number", not_empty, CREDIT_CARD_REQUIRED_MESSAGE),
        FieldRule("credit_card_number", card_number, CREDIT_CARD_INVALID_MESSAGE),
        FieldRule("expiration_date", not_empty, EXPIRATION_REQUIRED_MESSAGE),
        FieldRule("expiration_date", matches(EXPIRATION_DATE), EXPIRATION_FORMAT_MESSAGE),
        postal_code,
    )


def _customer_rules(policy: ValidationPolicy) -> RuleSet:
    if policy is ValidationPolicy.PERMISSIVE:
        zip_code = nested("zip_code", max_length(MAX_POSTAL_CODE_LENGTH))
        zip_message = CUSTOMER_PERMISSIVE_POSTAL_CODE_MESSAGE
    else:
        zip_code = nested("zip_code", optional(matches(US_CA_POSTAL_CODE)))
        zip_message = CUSTOMER_STRICT_POSTAL_CODE_MESSAGE

    return (
        FieldRule("first_name", not_empty, "FirstName is required"),
        FieldRule("first_name", max_length(100), "FirstName cannot exceed 100 characters"),
        FieldRule("last_name", not_empty, "LastName is required"),
        FieldRule("last_name", max_length(100), "LastName cannot exceed 100 characters"),
        FieldRule("email", max_length(100), "Email cannot exceed 100 characters"),
        FieldRule("email", optional(matches(EMAIL)), "Email is not a valid email address"),
        FieldRule("company", max_length(50), "Company cannot exceed 50 characters"),
        FieldRule("billing_address", zip_code, zip_message),
    )


def _payment_rules() -> RuleSet:
    return (
        FieldRule("account_id", positive, "AccountId is required"),
        FieldRule("amount", positive, "Amount must be greater than zero"),
        FieldRule("invoice_number", max_length(50), "InvoiceNumber cannot exceed 50 characters"),
        FieldRule("purchase_order_number", max_length(50), "PurchaseOrderNumber cannot exceed 50 characters"),
        FieldRule("description", max_length(2048), "Description cannot exceed 2048 characters"),
        FieldRule("cvv", optional(matches(CVV)), "Cvv must be 3 or 4 digits"),
    )


def _recurring_payment_rules() -> RuleSet:
    return (
        FieldRule("account_id", positive, "AccountId is required"),
        FieldRule("payment_amount", positive, "PaymentAmount must be greater than zero"),
        FieldRule("start_date", not_empty, "StartDate is required"),
        FieldRule("execution_frequency_type", not_empty, "ExecutionFrequencyType is required"),
        FieldRule("invoice_number", max_length(50), "InvoiceNumber cannot exceed 50 characters"),
        FieldRule("description", max_length(2048), "Description cannot exceed 2048 characters"),
    )


def _payment_plan_rules() -> RuleSet:
    return (
        FieldRule("total_due_amount", positive, "TotalDueAmount must be greater than zero"),
        FieldRule("total_number_of_payments", positive, "TotalNumberOfPayments must be greater than zero"),
    )


def build_rule_sets(policy: ValidationPolicy) -> dict[type, RuleSet]:
    """Return the type -> rules registry for one account-field policy."""
    return {
        Account: _account_rules(),
        Ach: _ach_rules(policy),
        CreditCard: _credit_card_rules(policy),
        Customer: _customer_rules(policy),
        Payment: _payment_rules(),
        RecurringPayment: _recurring_payment_rules(),
        PaymentPlan: _payment_plan_rules(),
    }


RULE_SETS: dict[ValidationPolicy, dict[type, RuleSet]] = {
    policy: build_rule_sets(policy) for policy in ValidationPolicy
}
