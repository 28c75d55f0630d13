"""
BankingService - Profile updates and transfers over an account store.

Every value is validated before the store is touched; a rejected request
leaves every account exactly as it was.

Functional Core - validation and decision logic; the store does the I/O.
"""

from __future__ import annotations

import logging

from src.components.amounts import parse_transaction_amount
from src.components.fields import validate_field
from src.core.ports.events import emit_event
from src.domain.entities import Account, bounded_copy, format_currency

from .models import (
    BankingConfig,
    BankingError,
    BankingErrorCode,
    ProfileUpdateOutput,
    TransferOutput,
)
from .ports import AccountStorePort, SecurityEventPort

logger = logging.getLogger(__name__)

PROFILE_UPDATE_FAILED = "Profile update failed"
TRANSFER_FAILED = "Transfer failed"
TRANSFER_REJECTED = "Transfer rejected"
TRANSFER_BLOCKED = "Transfer blocked"


def _transfer_failure(error: BankingError) -> TransferOutput:
    return TransferOutput(
        amount=None,
        from_account=None,
        to_account=None,
        errors=(error,),
        success=False,
    )


class BankingService:
    """Validated profile updates and transfers."""

    def __init__(
        self,
        store: AccountStorePort,
        events: SecurityEventPort | None = None,
        config: BankingConfig | None = None,
    ) -> None:
        self._store = store
        self._events = events
        self._config = config or BankingConfig()

    @property
    def config(self) -> BankingConfig:
        return self._config

    def get_account(self, account_number: str) -> Account | None:
        return self._store.get(account_number)

    def list_accounts(self) -> list[Account]:
        return self._store.list_all()

    def format_amount(self, pence: int) -> str:
        return format_currency(pence, self._config.currency_symbol)

    def validate_profile(self, new_name: str, new_address: str) -> list[BankingError]:
        """Validate both profile fields, reporting every failure."""
        errors: list[BankingError] = []

        checks = (
            (new_name, self._config.full_name_capacity, "full_name"),
            (new_address, self._config.address_capacity, "address"),
        )
        for raw, capacity, field_name in checks:
            result = validate_field(raw, capacity, field_name, self._events)
            if result.error is not None:
                errors.append(
                    BankingError(
                        code=BankingErrorCode.INVALID_FIELD,
                        message=f"{field_name} {result.error.message}",
                        field=field_name,
                        reason=result.error.code.value,
                    )
                )

        return errors

    def update_profile(
        self, account_number: str, new_name: str, new_address: str
    ) -> ProfileUpdateOutput:
        """Replace name and address, or change nothing."""
        errors = self.validate_profile(new_name, new_address)
        if errors:
            return ProfileUpdateOutput(account=None, errors=tuple(errors), success=False)

        with self._store.locked():
            if self._store.get(account_number) is None:
                emit_event(
                    self._events, PROFILE_UPDATE_FAILED, f"Account not found: {account_number}"
                )
                return ProfileUpdateOutput(
                    account=None,
                    errors=(
                        BankingError(
                            code=BankingErrorCode.ACCOUNT_NOT_FOUND,
                            message=f"Account {account_number} not found",
                            field="account",
                        ),
                    ),
                    success=False,
                )

            account = self._store.update_profile(
                account_number,
                full_name=bounded_copy(new_name, self._config.full_name_capacity),
                address=bounded_copy(new_address, self._config.address_capacity),
            )

        logger.info("Profile updated successfully for account: %s", account_number)
        return ProfileUpdateOutput(account=account, errors=(), success=True)

    def transfer(self, from_account: str, to_account: str, raw_amount: str) -> TransferOutput:
        """Move a parsed amount between two distinct accounts, or change nothing."""
        parsed = parse_transaction_amount(raw_amount, self._config.amounts, self._events)
        if parsed.amount is None:
            assert parsed.error is not None
            return _transfer_failure(
                BankingError(
                    code=BankingErrorCode.INVALID_AMOUNT,
                    message=parsed.error.message,
                    field="amount",
                    reason=parsed.error.code.value,
                )
            )

        amount = parsed.amount

        with self._store.locked():
            source = self._store.get(from_account)
            destination = self._store.get(to_account)

            if source is None or destination is None:
                emit_event(
                    self._events,
                    TRANSFER_FAILED,
                    f"Invalid accounts: {from_account} -> {to_account}",
                )
                return _transfer_failure(
                    BankingError(
                        code=BankingErrorCode.ACCOUNT_NOT_FOUND,
                        message="One or both accounts not found",
                        field="from_account" if source is None else "to_account",
                    )
                )

            if source.balance_pence < amount.pence:
                emit_event(
                    self._events,
                    TRANSFER_REJECTED,
                    f"Insufficient funds: {from_account} attempted "
                    f"{self.format_amount(amount.pence)}",
                )
                return _transfer_failure(
                    BankingError(
                        code=BankingErrorCode.INSUFFICIENT_FUNDS,
                        message="Insufficient funds",
                        field="amount",
                    )
                )

            if from_account == to_account:
                emit_event(
                    self._events, TRANSFER_BLOCKED, f"Attempted self-transfer: {from_account}"
                )
                return _transfer_failure(
                    BankingError(
                        code=BankingErrorCode.SELF_TRANSFER,
                        message="Cannot transfer to the same account",
                        field="to_account",
                    )
                )

            debited, credited = self._store.apply_transfer(from_account, to_account, amount.pence)

        logger.info(
            "Secure transfer completed: %s from %s to %s",
            self.format_amount(amount.pence),
            from_account,
            to_account,
        )
        return TransferOutput(
            amount=amount,
            from_account=debited,
            to_account=credited,
            errors=(),
            success=True,
        )
