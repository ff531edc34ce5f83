"""Routes standing in for the proxy endpoints in HTTP-level tests."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_validator

from txproxy.errors.validation import coded_error
from txproxy.exceptions import (
    BusinessRuleFailure,
    InternalCommunicationFailure,
    TransactionFailure,
)

router = APIRouter()


class TransferRequest(BaseModel):
    account: str = Field(min_length=1, max_length=8)
    reference: str = Field(default="", max_length=16)
    currency: str = "EUR"

    @field_validator("currency")
    @classmethod
    def currency_is_known(cls, value: str) -> str:
        if value not in {"EUR", "USD"}:
            raise coded_error("B003", "unsupported currency")
        return value


@router.post("/transfers", status_code=201)
async def create_transfer(payload: TransferRequest) -> dict[str, str]:
    return {"account": payload.account}


@router.get("/fail/transaction")
async def fail_transaction() -> None:
    raise TransactionFailure("TXN42", "ledger locked")


@router.get("/fail/business")
async def fail_business() -> None:
    raise BusinessRuleFailure("R010", "limit exceeded")


@router.get("/fail/communication")
async def fail_communication() -> None:
    raise InternalCommunicationFailure("connect timeout to 10.0.0.12:3000")


@router.get("/fail/conflict")
async def fail_conflict() -> None:
    raise HTTPException(status_code=409, detail="transfer already submitted")


@router.get("/fail/unexpected")
async def fail_unexpected() -> None:
    raise RuntimeError("NoneType has no attribute 'commarea'")
