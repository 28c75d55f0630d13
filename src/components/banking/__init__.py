"""
Banking component - Validated profile updates and transfers.

Composes the amounts and fields components with an account store.
"""

from ._impl import (
    PROFILE_UPDATE_FAILED,
    TRANSFER_BLOCKED,
    TRANSFER_FAILED,
    TRANSFER_REJECTED,
    BankingService,
)
from .component import (
    run_get,
    run_list,
    run_transfer,
    run_update_profile,
)
from .models import (
    AccountListOutput,
    AccountOutput,
    BankingConfig,
    BankingError,
    BankingErrorCode,
    GetAccountInput,
    ProfileUpdateOutput,
    TransferInput,
    TransferOutput,
    UpdateProfileInput,
)
from .ports import AccountStorePort, SecurityEventPort

__all__ = [
    # Entry points
    "run_update_profile",
    "run_transfer",
    "run_get",
    "run_list",
    # Service
    "BankingService",
    "BankingConfig",
    # Input models
    "UpdateProfileInput",
    "TransferInput",
    "GetAccountInput",
    # Output models
    "ProfileUpdateOutput",
    "TransferOutput",
    "AccountOutput",
    "AccountListOutput",
    "BankingError",
    "BankingErrorCode",
    # Event names
    "PROFILE_UPDATE_FAILED",
    "TRANSFER_BLOCKED",
    "TRANSFER_FAILED",
    "TRANSFER_REJECTED",
    # Ports
    "AccountStorePort",
    "SecurityEventPort",
]
