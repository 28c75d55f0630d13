"""
Accounts API Routes.

JSON endpoints for account lookup, profile updates and transfers.

Key behaviors:
- Validation and business rejections return 400 with detail.errors
- Unknown accounts on account routes return 404
- A rejected request never changes any balance or profile
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_banking_service, get_event_sink
from src.api.schemas import (
    AccountListResponse,
    AccountResponse,
    AmountParseRequest,
    AmountParseResponse,
    ErrorResponse,
    ProfileUpdateRequest,
    TransferRequest,
    TransferResponse,
)
from src.components.amounts import parse_transaction_amount
from src.components.banking import (
    BankingError,
    BankingErrorCode,
    BankingService,
    GetAccountInput,
    TransferInput,
    UpdateProfileInput,
    run_get,
    run_list,
    run_transfer,
    run_update_profile,
)
from src.core.ports.events import SecurityEventPort

router = APIRouter()


# --- Helper Functions ---


def _serialize_errors(errors: tuple[BankingError, ...]) -> list[dict[str, Any]]:
    """Serialize banking errors."""
    return [
        {
            "code": e.code.value,
            "message": e.message,
            "field": e.field,
            "reason": e.reason,
        }
        for e in errors
    ]


def _to_response(service: BankingService, account: Any) -> AccountResponse:
    return AccountResponse.from_account(account, service.config.currency_symbol)


# --- Routes ---


@router.get("/accounts", response_model=AccountListResponse)
def list_accounts(
    service: BankingService = Depends(get_banking_service),
) -> AccountListResponse:
    """List all accounts."""
    result = run_list(service)
    return AccountListResponse(
        accounts=[_to_response(service, a) for a in result.accounts],
        count=result.total,
    )


@router.get(
    "/accounts/{account_number}",
    response_model=AccountResponse,
    responses={404: {"description": "Account not found"}},
)
def get_account(
    account_number: str,
    service: BankingService = Depends(get_banking_service),
) -> AccountResponse:
    """Get an account by number."""
    result = run_get(GetAccountInput(account_number=account_number), service)
    if result.account is None:
        raise HTTPException(status_code=404, detail="Account not found")
    return _to_response(service, result.account)


@router.put(
    "/accounts/{account_number}/profile",
    response_model=AccountResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"description": "Account not found"},
    },
)
def update_profile(
    account_number: str,
    request: ProfileUpdateRequest,
    service: BankingService = Depends(get_banking_service),
) -> AccountResponse:
    """
    Replace an account's name and address.

    Both fields are validated before the account is looked up.
    """
    result = run_update_profile(
        UpdateProfileInput(
            account_number=account_number,
            new_name=request.full_name,
            new_address=request.address,
        ),
        service,
    )

    if not result.success:
        if any(e.code == BankingErrorCode.ACCOUNT_NOT_FOUND for e in result.errors):
            raise HTTPException(status_code=404, detail="Account not found")
        raise HTTPException(
            status_code=400,
            detail={"errors": _serialize_errors(result.errors)},
        )

    assert result.account is not None
    return _to_response(service, result.account)


@router.post(
    "/transfers",
    response_model=TransferResponse,
    responses={400: {"model": ErrorResponse}},
)
def create_transfer(
    request: TransferRequest,
    service: BankingService = Depends(get_banking_service),
) -> TransferResponse:
    """Transfer money between two accounts."""
    result = run_transfer(
        TransferInput(
            from_account=request.from_account,
            to_account=request.to_account,
            amount=request.amount,
        ),
        service,
    )

    if not result.success:
        raise HTTPException(
            status_code=400,
            detail={"errors": _serialize_errors(result.errors)},
        )

    assert result.amount is not None
    assert result.from_account is not None and result.to_account is not None
    return TransferResponse(
        amount_pence=result.amount.pence,
        amount_display=service.format_amount(result.amount.pence),
        from_account=_to_response(service, result.from_account),
        to_account=_to_response(service, result.to_account),
    )


@router.post("/amounts/parse", response_model=AmountParseResponse)
def parse_amount(
    request: AmountParseRequest,
    service: BankingService = Depends(get_banking_service),
    events: SecurityEventPort = Depends(get_event_sink),
) -> AmountParseResponse:
    """Dry-run the amount parser without touching any account."""
    result = parse_transaction_amount(request.amount, service.config.amounts, events)

    if result.amount is None:
        assert result.error is not None
        return AmountParseResponse(
            valid=False,
            error_code=result.error.code.value,
            message=result.error.message,
        )

    return AmountParseResponse(
        valid=True,
        amount_pence=result.amount.pence,
        amount_display=service.format_amount(result.amount.pence),
    )
