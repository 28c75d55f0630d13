"""
Banking component - Profile updates and transfers.

Shell Layer - maps input models onto BankingService calls.
"""

from __future__ import annotations

from ._impl import BankingService
from .models import (
    AccountListOutput,
    AccountOutput,
    BankingError,
    BankingErrorCode,
    GetAccountInput,
    ProfileUpdateOutput,
    TransferInput,
    TransferOutput,
    UpdateProfileInput,
)


def run_update_profile(
    input_data: UpdateProfileInput,
    service: BankingService,
) -> ProfileUpdateOutput:
    """Update an account's name and address."""
    return service.update_profile(
        input_data.account_number,
        input_data.new_name,
        input_data.new_address,
    )


def run_transfer(
    input_data: TransferInput,
    service: BankingService,
) -> TransferOutput:
    """Transfer money between accounts."""
    return service.transfer(
        input_data.from_account,
        input_data.to_account,
        input_data.amount,
    )


def run_get(
    input_data: GetAccountInput,
    service: BankingService,
) -> AccountOutput:
    """Get an account by number."""
    account = service.get_account(input_data.account_number)

    if account is None:
        return AccountOutput(
            account=None,
            errors=(
                BankingError(
                    code=BankingErrorCode.ACCOUNT_NOT_FOUND,
                    message=f"Account {input_data.account_number} not found",
                    field="account",
                ),
            ),
            success=False,
        )

    return AccountOutput(account=account, errors=(), success=True)


def run_list(service: BankingService) -> AccountListOutput:
    """List all accounts."""
    accounts = service.list_accounts()
    return AccountListOutput(accounts=tuple(accounts), total=len(accounts))
