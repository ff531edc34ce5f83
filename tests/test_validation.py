from uuid import UUID

import pytest
from pydantic import BaseModel, ValidationError, field_validator

from tests.routes import TransferRequest
from txproxy.errors.classifier import classify
from txproxy.errors.formatter import format_error
from txproxy.errors.validation import field_failures
from txproxy.exceptions import FieldFailure, ValidationFailure


class PaymentRequest(BaseModel):
    payment_id: UUID
    amount: int = 1

    @field_validator("amount")
    @classmethod
    def amount_is_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("amount: must be positive")
        return value


def _failures(**payload: object) -> list[FieldFailure]:
    with pytest.raises(ValidationError) as exc_info:
        TransferRequest.model_validate(payload)
    return field_failures(exc_info.value.errors())


def _payment_failures(**payload: object) -> list[FieldFailure]:
    with pytest.raises(ValidationError) as exc_info:
        PaymentRequest.model_validate(payload)
    return field_failures(exc_info.value.errors())


def test_missing_field_is_b001() -> None:
    [failure] = _failures()
    assert failure.field == "account"
    assert failure.descriptor is not None
    assert failure.descriptor.startswith("B001:")


def test_empty_required_string_is_b001() -> None:
    [failure] = _failures(account="")
    assert failure.descriptor is not None
    assert failure.descriptor.startswith("B001:")


def test_too_long_is_b002() -> None:
    [failure] = _failures(account="123456789")
    assert failure.descriptor is not None
    assert failure.descriptor.startswith("B002:")


def test_coded_error_keeps_its_descriptor() -> None:
    [failure] = _failures(account="12345678", currency="XAU")
    assert failure == FieldFailure(field="currency", descriptor="B003:unsupported currency")


def test_failures_keep_model_field_order() -> None:
    failures = _failures(account="123456789", reference="r" * 17)
    assert [failure.field for failure in failures] == ["account", "reference"]


@pytest.mark.parametrize(
    "loc, field",
    [
        (("body", "account"), "account"),
        (("query", "limit"), "limit"),
        (("body", "payer", "iban"), "payer.iban"),
        (("body", "items", 0, "amount"), "items.0.amount"),
        (("account",), "account"),
    ],
)
def test_field_name_drops_request_part(loc: tuple[object, ...], field: str) -> None:
    [failure] = field_failures([{"loc": loc, "type": "value_error", "msg": "bad"}])
    assert failure.field == field
    assert failure.descriptor == "B001:bad"


@pytest.mark.parametrize(
    "payload, field",
    [
        ({"payment_id": "x"}, "payment_id"),
        ({"payment_id": "00000000-0000-0000-0000-000000000001", "amount": 0}, "amount"),
    ],
    ids=["invalid_uuid", "value_error_with_separator"],
)
def test_uncoded_pydantic_message_resolves_to_b001(payload: dict[str, object], field: str) -> None:
    failures = _payment_failures(**payload)

    body = format_error(classify(ValidationFailure(failures)))

    assert body.code == "B001"
    [failure] = failures
    assert failure.field == field
    assert failure.descriptor is not None
    assert body.message == failure.descriptor.removeprefix("B001:")


def test_missing_message_stays_absent() -> None:
    [failure] = field_failures([{"loc": ("body", "account"), "type": "value_error"}])
    assert failure.descriptor is None
