"""Tests for the JSON serializer."""

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from paysimple.errors import DeserializationError
from paysimple.models import (
    Ach,
    Address,
    CreditCard,
    Customer,
    ErrorResult,
    ExecutionFrequency,
    Issuer,
    Payment,
    PaymentPlan,
    PaymentStatus,
    Result,
)
from paysimple.transport.serialization import Serializer

serializer = Serializer()


class TestSerialize:
    def test_uses_pascal_case_keys(self):
        body = json.loads(serializer.serialize(Ach(customer_id=5, account_number="1234", routing_number="123456789")))
        assert body["CustomerId"] == 5
        assert body["AccountNumber"] == "1234"
        assert body["RoutingNumber"] == "123456789"
        assert "customer_id" not in body

    def test_omits_unset_optionals(self):
        body = json.loads(serializer.serialize(Payment(account_id=1, amount=9.5)))
        assert "InvoiceNumber" not in body
        assert body["Amount"] == 9.5

    def test_money_is_a_json_number(self):
        body = json.loads(serializer.serialize(Payment(account_id=1, amount=Decimal("12.25"))))
        assert body["Amount"] == 12.25

    def test_enums_use_wire_values(self):
        body = json.loads(serializer.serialize(CreditCard(issuer=Issuer.VISA)))
        assert body["Issuer"] == 12


class TestDeserialize:
    def test_result_envelope(self):
        text = json.dumps({
            "Meta": {"HttpStatus": "OK", "HttpStatusCode": 200},
            "Response": {"Id": 12, "FirstName": "Ada", "LastName": "Lovelace", "UnknownField": True},
        })
        result = serializer.deserialize(text, Result[Customer])
        assert result.meta.http_status_code == 200
        assert result.response.id == 12
        assert result.response.first_name == "Ada"

    def test_list_payload(self):
        text = json.dumps({"Response": [{"Id": 1, "Status": "Settled"}, {"Id": 2, "Status": "Pending"}]})
        result = serializer.deserialize(text, Result[list[Payment]])
        assert [p.status for p in result.response] == [PaymentStatus.SETTLED, PaymentStatus.PENDING]

    def test_money_is_decimal(self):
        text = json.dumps({"Response": {"Id": 1, "Amount": 10.25, "TotalDueAmount": 300, "BalanceRemaining": 0}})
        payment = serializer.deserialize(text, Result[Payment]).response
        plan = serializer.deserialize(text, Result[PaymentPlan]).response
        assert payment.amount == Decimal("10.25")
        assert isinstance(payment.amount, Decimal)
        assert plan.total_due_amount == Decimal("300")

    def test_error_result_messages(self):
        text = json.dumps({
            "Meta": {
                "Errors": {
                    "ErrorCode": "InvalidInput",
                    "ErrorMessages": [{"Field": "Amount", "Message": "Amount is invalid"}, {"Message": "General"}],
                },
                "HttpStatusCode": 400,
            }
        })
        error = serializer.deserialize(text, ErrorResult)
        assert error.messages == ["Amount: Amount is invalid", "General"]

    @pytest.mark.parametrize("text", ["", "not json", "{\"Response\": {\"Id\": \"abc\"}}"])
    def test_malformed_raises(self, text):
        with pytest.raises(DeserializationError) as exc_info:
            serializer.deserialize(text, Result[Customer])
        assert exc_info.value.body == text

    def test_error_result_requires_meta(self):
        with pytest.raises(DeserializationError):
            serializer.deserialize("{}", ErrorResult)


class TestRoundTrip:
    @pytest.mark.parametrize(
        "model",
        [
            Customer(
                id=3,
                first_name="Ada",
                last_name="Lovelace",
                email="ada@example.com",
                billing_address=Address(street_address1="1 Main St", city="Salt Lake City", state_code="UT", zip_code="84101"),
                shipping_same_as_billing=True,
            ),
            Ach(id=4, customer_id=3, account_number="*****6789", routing_number="123456789", bank_name="First Bank"),
            CreditCard(id=5, customer_id=3, credit_card_number="4111111111111111", expiration_date="12/2030", issuer=Issuer.VISA),
            Payment(id=6, account_id=5, amount=Decimal("19.50"), status=PaymentStatus.POSTED, payment_date=datetime(2024, 5, 1, tzinfo=timezone.utc)),
            PaymentPlan(
                id=7,
                account_id=5,
                payment_amount=Decimal("25.00"),
                start_date=datetime(2024, 6, 1, tzinfo=timezone.utc),
                execution_frequency_type=ExecutionFrequency.FIRST_OF_MONTH,
                total_due_amount=Decimal("100.00"),
                total_number_of_payments=4,
            ),
        ],
        ids=lambda m: type(m).__name__,
    )
    def test_model_survives_round_trip(self, model):
        restored = serializer.deserialize(serializer.serialize(model), type(model))
        assert restored.model_dump() == model.model_dump()
