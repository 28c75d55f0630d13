"""
Banking Page Routes.

Server-rendered HTML for the browser demo: the banking page and the two
form handlers it posts to.

Key behaviors:
- Forms are read as application/x-www-form-urlencoded; missing fields are ""
- Every rejection answers 400 with a short message and a link home
- All account data rendered into HTML is escaped
"""

from __future__ import annotations

import html
from urllib.parse import parse_qs

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.api.deps import get_banking_service, get_rules
from src.components.banking import (
    BankingErrorCode,
    BankingService,
    TransferInput,
    UpdateProfileInput,
    run_list,
    run_transfer,
    run_update_profile,
)
from src.domain.entities import Account
from src.rules.models import Rules

router = APIRouter()

RETURN_LINK = "<a href='/'>Return to Banking</a>"

TRANSFER_MESSAGES: dict[BankingErrorCode, str] = {
    BankingErrorCode.INVALID_AMOUNT: (
        "Invalid transaction amount! Check format and range (£0.01 - £1,000,000)."
    ),
    BankingErrorCode.ACCOUNT_NOT_FOUND: "One or both accounts not found!",
    BankingErrorCode.INSUFFICIENT_FUNDS: "Insufficient funds!",
    BankingErrorCode.SELF_TRANSFER: "Cannot transfer to the same account!",
}

PROFILE_MESSAGES: dict[BankingErrorCode, str] = {
    BankingErrorCode.INVALID_FIELD: (
        "Input validation failed! Check field lengths and characters."
    ),
    BankingErrorCode.ACCOUNT_NOT_FOUND: "Account not found!",
}


# --- Rendering ---


def _escape_html(text: str) -> str:
    return html.escape(text, quote=True)


def render_message(message: str, status_code: int = 200) -> HTMLResponse:
    """Short reply page with a link back to the banking page."""
    return HTMLResponse(content=f"{message} {RETURN_LINK}", status_code=status_code)


def render_account_options(accounts: list[Account], placeholder: str) -> str:
    options = [f'<option value="">{_escape_html(placeholder)}</option>']
    for account in accounts:
        number = _escape_html(account.account_number)
        options.append(
            f'<option value="{number}">{number} - {_escape_html(account.full_name)}</option>'
        )
    return "\n                            ".join(options)


def render_customer_list(accounts: list[Account], service: BankingService) -> str:
    """Live balances for every account."""
    items = []
    for account in accounts:
        number = _escape_html(account.account_number)
        name = _escape_html(account.full_name)
        balance = _escape_html(service.format_amount(account.balance_pence))
        items.append(
            f"""            <div class="customer-item">
                <strong>{number} - {name}</strong><br>
                {_escape_html(account.address)}<br>
                Balance: <span class="balance">{balance}</span>
            </div>"""
        )
    body = "\n".join(items)
    return f"""<div class="customer-list">
            <h3>Current Customer Balances <small>(Live Data - Updates in Real Time)</small></h3>
{body}
        </div>"""


def render_banking_page(accounts: list[Account], service: BankingService, title: str) -> str:
    name_limit = service.config.full_name_capacity - 1
    address_limit = service.config.address_capacity - 1
    amount_limit = service.config.amounts.max_length
    safe_title = _escape_html(title)

    return f"""<!DOCTYPE html>
<html lang="en-GB">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{safe_title} - Online Banking</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 0; padding: 20px; background: #28a745; }}
        .container {{ max-width: 1200px; margin: 0 auto; background: white; padding: 30px; }}
        .features {{ display: grid; grid-template-columns: 1fr 1fr; gap: 30px; }}
        .feature-card {{ background: #f8fff8; padding: 25px; border-left: 5px solid #28a745; }}
        .form-group {{ margin-bottom: 15px; }}
        label {{ display: block; margin-bottom: 5px; font-weight: 600; }}
        input, select {{ width: 100%; padding: 12px; }}
        .customer-list {{ background: #f0f8f0; padding: 20px; margin-top: 30px; }}
        .customer-item {{ background: white; margin: 10px 0; padding: 15px; }}
        .balance {{ color: #28a745; font-weight: bold; }}
        .security-note {{ background: #d4edda; padding: 15px; margin-top: 30px; color: #155724; }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>{safe_title}</h1>
            <p class="subtitle">Secure by Design &amp; Validated by Default</p>
        </div>

        <div class="features">
            <div class="feature-card">
                <h3>Update Customer Profile</h3>
                <form action="/update-profile" method="POST">
                    <div class="form-group">
                        <label for="account">Account Number:</label>
                        <select name="account" id="account" required>
                            {render_account_options(accounts, "Select Account")}
                        </select>
                    </div>
                    <div class="form-group">
                        <label for="new_name">New Full Name (max {name_limit} chars):</label>
                        <input type="text" name="new_name" id="new_name"
                               maxlength="{name_limit}" required>
                    </div>
                    <div class="form-group">
                        <label for="new_address">New Address (max {address_limit} chars):</label>
                        <input type="text" name="new_address" id="new_address"
                               maxlength="{address_limit}" required>
                    </div>
                    <button type="submit" class="btn">Update Profile</button>
                </form>
            </div>

            <div class="feature-card">
                <h3>Transfer Money</h3>
                <form action="/transfer" method="POST">
                    <div class="form-group">
                        <label for="from_account">From Account:</label>
                        <select name="from_account" id="from_account" required>
                            {render_account_options(accounts, "Select From Account")}
                        </select>
                    </div>
                    <div class="form-group">
                        <label for="to_account">To Account:</label>
                        <select name="to_account" id="to_account" required>
                            {render_account_options(accounts, "Select To Account")}
                        </select>
                    </div>
                    <div class="form-group">
                        <label for="amount">Amount:</label>
                        <input type="text" name="amount" id="amount"
                               maxlength="{amount_limit}" required>
                    </div>
                    <button type="submit" class="btn">Transfer Money</button>
                </form>
            </div>
        </div>

        {render_customer_list(accounts, service)}

        <div class="security-note">
            <strong>Security Features Active:</strong>
            Every amount and profile field is validated and bounds-checked before any
            account is changed, and every rejection is logged.
        </div>
    </div>
</body>
</html>"""


# --- Form Parsing ---


async def read_form(request: Request) -> dict[str, str]:
    """Decode a urlencoded body, keeping the first value of each field."""
    body = (await request.body()).decode("utf-8", errors="replace")
    parsed = parse_qs(body, keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}


# --- Routes ---


@router.get("/", response_class=HTMLResponse)
def banking_page(
    service: BankingService = Depends(get_banking_service),
    rules: Rules = Depends(get_rules),
) -> HTMLResponse:
    """Main banking page with live balances."""
    accounts = list(run_list(service).accounts)
    page = render_banking_page(accounts, service, rules.server.title)
    return HTMLResponse(content=page, status_code=200)


@router.post("/update-profile", response_class=HTMLResponse)
async def update_profile_form(
    request: Request,
    service: BankingService = Depends(get_banking_service),
) -> HTMLResponse:
    """Handle the profile update form."""
    form = await read_form(request)
    result = run_update_profile(
        UpdateProfileInput(
            account_number=form.get("account", ""),
            new_name=form.get("new_name", ""),
            new_address=form.get("new_address", ""),
        ),
        service,
    )

    if not result.success:
        return render_message(PROFILE_MESSAGES[result.errors[0].code], status_code=400)

    return render_message("Profile updated successfully with security validation!")


@router.post("/transfer", response_class=HTMLResponse)
async def transfer_form(
    request: Request,
    service: BankingService = Depends(get_banking_service),
) -> HTMLResponse:
    """Handle the transfer form."""
    form = await read_form(request)
    result = run_transfer(
        TransferInput(
            from_account=form.get("from_account", ""),
            to_account=form.get("to_account", ""),
            amount=form.get("amount", ""),
        ),
        service,
    )

    if not result.success:
        return render_message(TRANSFER_MESSAGES[result.errors[0].code], status_code=400)

    assert result.amount is not None
    assert result.from_account is not None and result.to_account is not None
    message = (
        "Transfer successful with security validation!<br>"
        f"Transferred {_escape_html(service.format_amount(result.amount.pence))}"
        f" from {_escape_html(result.from_account.account_number)}"
        f" to {_escape_html(result.to_account.account_number)}<br>"
    )
    return render_message(message)
