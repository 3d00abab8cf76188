"""Tests for client-side payload validation."""

from datetime import datetime, timezone

import pytest

from paysimple.errors import ValidationFailed
from paysimple.models import Account, Ach, Address, CreditCard, Customer, ExecutionFrequency, Payment, PaymentPlan
from paysimple.validation import ValidationPolicy, ValidationService, Validator
from paysimple.validation.rule_sets import (
    ACCOUNT_NUMBER_MESSAGE,
    CREDIT_CARD_INVALID_MESSAGE,
    CREDIT_CARD_REQUIRED_MESSAGE,
    CUSTOMER_PERMISSIVE_POSTAL_CODE_MESSAGE,
    CUSTOMER_STRICT_POSTAL_CODE_MESSAGE,
    EXPIRATION_FORMAT_MESSAGE,
    PERMISSIVE_POSTAL_CODE_MESSAGE,
    ROUTING_NUMBER_MESSAGE,
    STRICT_POSTAL_CODE_MESSAGE,
)

permissive = Validator(ValidationPolicy.PERMISSIVE)
strict = Validator(ValidationPolicy.STRICT)


def messages(validator: Validator, payload) -> list[str]:
    return [e.message for e in validator.validate(payload)]


class TestCustomerId:
    @pytest.mark.parametrize("customer_id", [0, -1])
    def test_non_positive_is_required(self, customer_id):
        assert "CustomerId is required" in messages(permissive, Account(customer_id=customer_id))

    @pytest.mark.parametrize("customer_id", [1, 42])
    def test_positive_is_valid(self, customer_id):
        assert "CustomerId is required" not in messages(permissive, Account(customer_id=customer_id))

    def test_applies_to_subtypes(self):
        assert "CustomerId is required" in messages(permissive, Ach(customer_id=0))
        assert "CustomerId is required" in messages(permissive, CreditCard(customer_id=0))


class TestAccountNumber:
    @pytest.mark.parametrize("number", ["", "1", "111", "1" * 101, "12a4", "1234 "])
    def test_invalid(self, number):
        assert ACCOUNT_NUMBER_MESSAGE in messages(permissive, Ach(account_number=number))

    @pytest.mark.parametrize("number", ["1111", "1" * 100, "000123456789"])
    def test_valid(self, number):
        assert ACCOUNT_NUMBER_MESSAGE not in messages(permissive, Ach(account_number=number))

    @pytest.mark.parametrize("number", ["*1234", "*****6789", "*" * 96 + "1234"])
    def test_masked_accepted_when_permissive(self, number):
        assert ACCOUNT_NUMBER_MESSAGE not in messages(permissive, Ach(account_number=number))

    @pytest.mark.parametrize("number", ["*****6789", "*" * 97 + "1234", "****123", "1234****"])
    def test_masked_rejected_when_strict_or_malformed(self, number):
        assert ACCOUNT_NUMBER_MESSAGE in messages(strict, Ach(account_number=number))

    def test_overlong_mask_rejected_when_permissive(self):
        assert ACCOUNT_NUMBER_MESSAGE in messages(permissive, Ach(account_number="*" * 97 + "1234"))


class TestRoutingNumber:
    @pytest.mark.parametrize("number", ["", "12345678", "1234567890", "12345678A"])
    def test_invalid(self, number):
        assert ROUTING_NUMBER_MESSAGE in messages(permissive, Ach(routing_number=number))

    def test_nine_digits_valid(self):
        assert ROUTING_NUMBER_MESSAGE not in messages(permissive, Ach(routing_number="123456789"))


class TestBankName:
    def test_empty_is_required(self):
        assert "BankName is required" in messages(permissive, Ach(bank_name=""))

    def test_101_characters_too_long(self):
        assert "BankName cannot exceed 100 characters" in messages(permissive, Ach(bank_name="b" * 101))

    @pytest.mark.parametrize("name", ["b", "b" * 100])
    def test_within_limit(self, name):
        result = messages(permissive, Ach(bank_name=name))
        assert "BankName is required" not in result
        assert "BankName cannot exceed 100 characters" not in result


class TestCreditCardNumber:
    def test_empty_is_required_and_invalid(self):
        result = messages(permissive, CreditCard(credit_card_number=""))
        assert CREDIT_CARD_REQUIRED_MESSAGE in result
        assert CREDIT_CARD_INVALID_MESSAGE in result

    @pytest.mark.parametrize("number", ["40037366561778", "40037366561778601", "1234567890123456", "4003-7366-5617-7860"])
    def test_invalid(self, number):
        assert CREDIT_CARD_INVALID_MESSAGE in messages(permissive, CreditCard(credit_card_number=number))

    @pytest.mark.parametrize(
        "number",
        [
            "4003736656177860",  # Visa 16
            "4222222222222",  # Visa 13
            "5555555555554444",  # MasterCard
            "378282246310005",  # Amex
            "341111111111111",  # Amex
            "6011111111111117",  # Discover
            "6500000000000002",  # Discover 65
        ],
    )
    def test_valid(self, number):
        assert CREDIT_CARD_INVALID_MESSAGE not in messages(permissive, CreditCard(credit_card_number=number))

    @pytest.mark.parametrize("number", ["***********1111", "************1111"])
    def test_masked_accepted_when_permissive(self, number):
        assert CREDIT_CARD_INVALID_MESSAGE not in messages(permissive, CreditCard(credit_card_number=number))

    @pytest.mark.parametrize("number", ["***********1111", "************1111"])
    def test_masked_rejected_when_strict(self, number):
        assert CREDIT_CARD_INVALID_MESSAGE in messages(strict, CreditCard(credit_card_number=number))

    @pytest.mark.parametrize("number", ["**********1111", "*************1111", "***********111"])
    def test_malformed_mask_rejected(self, number):
        assert CREDIT_CARD_INVALID_MESSAGE in messages(permissive, CreditCard(credit_card_number=number))


class TestExpirationDate:
    @pytest.mark.parametrize("value", ["", "102015", "13/2015", "00/2015", "10/1999", "1/2015", "10/15"])
    def test_invalid(self, value):
        assert EXPIRATION_FORMAT_MESSAGE in messages(permissive, CreditCard(expiration_date=value))

    @pytest.mark.parametrize("value", ["10/2015", "01/2030", "12/2099"])
    def test_valid(self, value):
        assert EXPIRATION_FORMAT_MESSAGE not in messages(permissive, CreditCard(expiration_date=value))

    def test_empty_is_also_required(self):
        assert "ExpirationDate is required" in messages(permissive, CreditCard(expiration_date=""))


class TestBillingZipCode:
    @pytest.mark.parametrize("value", ["84101", "84101-7331", "L4L 9C8", "L4L9C8", None])
    def test_strict_accepts_us_and_ca(self, value):
        assert STRICT_POSTAL_CODE_MESSAGE not in messages(strict, CreditCard(billing_zip_code=value))

    @pytest.mark.parametrize("value", ["789456", "8410", "SW1A 1AA"])
    def test_strict_rejects_other_formats(self, value):
        assert STRICT_POSTAL_CODE_MESSAGE in messages(strict, CreditCard(billing_zip_code=value))

    @pytest.mark.parametrize("value", ["789456", "SW1A 1AA", "1234567890", None])
    def test_permissive_accepts_up_to_ten_characters(self, value):
        assert PERMISSIVE_POSTAL_CODE_MESSAGE not in messages(permissive, CreditCard(billing_zip_code=value))

    def test_permissive_rejects_eleven_characters(self):
        assert PERMISSIVE_POSTAL_CODE_MESSAGE in messages(permissive, CreditCard(billing_zip_code="12345678901"))


class TestCollectsAllViolations:
    def test_every_failing_rule_is_reported(self):
        errors = permissive.validate(Ach(customer_id=0, account_number="1", bank_name="", routing_number="1"))
        assert [e.field for e in errors] == ["customer_id", "account_number", "bank_name", "routing_number"]

    def test_base_rules_listed_before_subtype_rules(self):
        errors = permissive.validate(CreditCard())
        assert errors[0].field == "customer_id"

    def test_valid_ach_has_no_errors(self):
        ach = Ach(customer_id=7, account_number="000123456789", bank_name="First Bank", routing_number="123456789")
        assert permissive.validate(ach) == []

    def test_valid_credit_card_has_no_errors(self):
        card = CreditCard(customer_id=7, credit_card_number="4111111111111111", expiration_date="12/2030", billing_zip_code="84101")
        assert strict.validate(card) == []

    def test_unregistered_type_has_no_rules(self):
        assert permissive.validate(object()) == []


class TestOtherPayloads:
    def test_customer_names_required(self):
        result = messages(permissive, Customer())
        assert "FirstName is required" in result
        assert "LastName is required" in result

    def test_customer_bad_email(self):
        result = messages(permissive, Customer(first_name="Ada", last_name="Lovelace", email="not-an-email"))
        assert result == ["Email is not a valid email address"]

    def test_customer_permissive_zip_too_long(self):
        customer = Customer(first_name="Ada", last_name="L", billing_address=Address(zip_code="12345678901"))
        assert messages(permissive, customer) == [CUSTOMER_PERMISSIVE_POSTAL_CODE_MESSAGE]

    def test_customer_permissive_accepts_any_short_zip(self):
        customer = Customer(first_name="Ada", last_name="L", billing_address=Address(zip_code="ABCDE"))
        assert messages(permissive, customer) == []

    @pytest.mark.parametrize("zip_code", ["ABCDE", "1234", "12345-12"])
    def test_customer_strict_rejects_bad_zip(self, zip_code):
        customer = Customer(first_name="Ada", last_name="L", billing_address=Address(zip_code=zip_code))
        assert messages(strict, customer) == [CUSTOMER_STRICT_POSTAL_CODE_MESSAGE]

    @pytest.mark.parametrize("zip_code", ["84101", "84101-1234", "K1A 0B1", None])
    def test_customer_strict_accepts_us_ca_zip(self, zip_code):
        customer = Customer(first_name="Ada", last_name="L", billing_address=Address(zip_code=zip_code))
        assert messages(strict, customer) == []

    def test_customer_without_billing_address(self):
        assert messages(strict, Customer(first_name="Ada", last_name="L")) == []

    def test_payment_requires_account_and_amount(self):
        result = messages(permissive, Payment(account_id=0, amount=0))
        assert "AccountId is required" in result
        assert "Amount must be greater than zero" in result

    def test_payment_plan_inherits_recurring_rules(self):
        plan = PaymentPlan(
            account_id=3,
            payment_amount=25.0,
            start_date=datetime(2030, 1, 1, tzinfo=timezone.utc),
            execution_frequency_type=ExecutionFrequency.FIRST_OF_MONTH,
        )
        result = messages(permissive, plan)
        assert result == [
            "TotalDueAmount must be greater than zero",
            "TotalNumberOfPayments must be greater than zero",
        ]

    def test_payment_plan_missing_recurring_fields(self):
        result = messages(permissive, PaymentPlan(total_due_amount=100.0, total_number_of_payments=4))
        assert "StartDate is required" in result
        assert "ExecutionFrequencyType is required" in result


class TestValidationService:
    def test_raises_with_every_error(self):
        service = ValidationService(policy=ValidationPolicy.PERMISSIVE)
        with pytest.raises(ValidationFailed) as exc_info:
            service.validate(Payment())
        assert {e.field for e in exc_info.value.errors} == {"account_id", "amount"}

    def test_valid_payload_passes(self):
        service = ValidationService(policy=ValidationPolicy.STRICT)
        service.validate(Payment(account_id=1, amount=10.0))
