from typing import Any

from pydantic import BaseModel, Field

from src.domain.entities import Account, format_currency


# --- Accounts ---
class AccountResponse(BaseModel):
    account_number: str
    full_name: str
    address: str
    phone: str
    balance_pence: int
    balance_display: str

    @classmethod
    def from_account(cls, account: Account, currency_symbol: str = "£") -> "AccountResponse":
        return cls(
            account_number=account.account_number,
            full_name=account.full_name,
            address=account.address,
            phone=account.phone,
            balance_pence=account.balance_pence,
            balance_display=format_currency(account.balance_pence, currency_symbol),
        )


class AccountListResponse(BaseModel):
    accounts: list[AccountResponse]
    count: int


# --- Profile ---
class ProfileUpdateRequest(BaseModel):
    full_name: str = Field(..., description="New full name")
    address: str = Field(..., description="New address")


# --- Transfers ---
class TransferRequest(BaseModel):
    from_account: str
    to_account: str
    amount: str = Field(..., description="Amount in pounds, e.g. '10.50'")


class TransferResponse(BaseModel):
    amount_pence: int
    amount_display: str
    from_account: AccountResponse
    to_account: AccountResponse


# --- Amount dry run ---
class AmountParseRequest(BaseModel):
    amount: str


class AmountParseResponse(BaseModel):
    valid: bool
    amount_pence: int | None = None
    amount_display: str | None = None
    error_code: str | None = None
    message: str | None = None


# --- Errors ---
class ErrorResponse(BaseModel):
    errors: list[dict[str, Any]]
