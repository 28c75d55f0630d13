"""
Banking component - Data models.

Inputs, outputs and error codes for profile updates and transfers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from src.components.amounts import AmountConfig, MonetaryAmount
from src.domain.entities import ADDRESS_CAPACITY, FULL_NAME_CAPACITY, Account

# --- Errors ---


class BankingErrorCode(str, Enum):
    """Reason a banking operation was rejected."""

    INVALID_AMOUNT = "invalid_amount"
    INVALID_FIELD = "invalid_field"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    SELF_TRANSFER = "self_transfer"


@dataclass(frozen=True)
class BankingError:
    """
    Banking operation error.

    `reason` carries the underlying validator code for invalid_amount and
    invalid_field errors.
    """

    code: BankingErrorCode
    message: str
    field: str | None = None
    reason: str | None = None


# --- Configuration ---


@dataclass(frozen=True)
class BankingConfig:
    """Limits applied by the banking service."""

    amounts: AmountConfig = field(default_factory=AmountConfig)
    full_name_capacity: int = FULL_NAME_CAPACITY
    address_capacity: int = ADDRESS_CAPACITY
    currency_symbol: str = "£"


# --- Input Models ---


@dataclass(frozen=True)
class UpdateProfileInput:
    """Input for replacing an account's name and address."""

    account_number: str
    new_name: str
    new_address: str


@dataclass(frozen=True)
class TransferInput:
    """Input for moving money between two accounts."""

    from_account: str
    to_account: str
    amount: str


@dataclass(frozen=True)
class GetAccountInput:
    """Input for getting an account."""

    account_number: str


# --- Output Models ---


@dataclass(frozen=True)
class ProfileUpdateOutput:
    """Output from a profile update."""

    account: Account | None
    errors: tuple[BankingError, ...]
    success: bool


@dataclass(frozen=True)
class TransferOutput:
    """Output from a transfer."""

    amount: MonetaryAmount | None
    from_account: Account | None
    to_account: Account | None
    errors: tuple[BankingError, ...]
    success: bool


@dataclass(frozen=True)
class AccountOutput:
    """Output from an account lookup."""

    account: Account | None
    errors: tuple[BankingError, ...]
    success: bool


@dataclass(frozen=True)
class AccountListOutput:
    """Output from listing accounts."""

    accounts: tuple[Account, ...]
    total: int
