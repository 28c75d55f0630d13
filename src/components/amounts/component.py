"""
Amounts component - Transaction amount parsing.

Pure functions turning a user-supplied decimal string into exact pence.

The string shape is checked before any numeric conversion, so every rejection
has its own error code and nothing depends on locale or float parsing.

Rules (first failure wins):
1. Non-empty and at most max_length characters
2. Only ASCII digits and at most one "." separator
3. At most two digits after the separator
4. Major-unit value within [min_amount, max_amount]
5. Converted to pence with round-half-up
6. Pence strictly positive and not above max_pence
"""

from __future__ import annotations

from decimal import Decimal

from src.core.ports.events import emit_event

from .models import (
    AmountConfig,
    AmountErrorCode,
    AmountParseError,
    MonetaryAmount,
    ParseAmountOutput,
    to_pence,
)
from .ports import SecurityEventPort

DECIMAL_SEPARATOR = "."
MAX_DECIMAL_PLACES = 2

TRANSACTION_VALIDATION_FAILED = "Transaction validation failed"

_ASCII_DIGITS = frozenset("0123456789")


def _reject(
    code: AmountErrorCode,
    message: str,
    raw: str,
    events: SecurityEventPort | None,
) -> ParseAmountOutput:
    emit_event(events, TRANSACTION_VALIDATION_FAILED, f"{message}: {raw}")
    return ParseAmountOutput(
        amount=None,
        error=AmountParseError(code=code, message=message, raw=raw),
    )


def parse_transaction_amount(
    raw: str,
    config: AmountConfig | None = None,
    events: SecurityEventPort | None = None,
) -> ParseAmountOutput:
    """
    Parse a transaction amount in major units into pence.

    Args:
        raw: Amount exactly as the user typed it (e.g. "10.50")
        config: Length and range limits
        events: Optional sink notified on every rejection

    Returns:
        ParseAmountOutput with either the amount or a tagged error
    """
    config = config or AmountConfig()

    if not raw:
        return _reject(AmountErrorCode.EMPTY_INPUT, "Amount cannot be empty", raw, events)

    if len(raw) > config.max_length:
        return _reject(
            AmountErrorCode.TOO_LONG,
            f"Amount exceeds maximum length ({config.max_length})",
            raw,
            events,
        )

    separator_pos: int | None = None
    for pos, char in enumerate(raw):
        if char == DECIMAL_SEPARATOR:
            if separator_pos is not None:
                return _reject(
                    AmountErrorCode.MULTIPLE_SEPARATORS, "Multiple decimal points", raw, events
                )
            separator_pos = pos
        elif char not in _ASCII_DIGITS:
            return _reject(
                AmountErrorCode.NON_NUMERIC_CHARACTER, "Non-numeric characters", raw, events
            )

    if separator_pos is not None and len(raw) - separator_pos - 1 > MAX_DECIMAL_PLACES:
        return _reject(
            AmountErrorCode.TOO_MANY_DECIMAL_PLACES, "Too many decimal places", raw, events
        )

    # A lone separator passes the character scan but carries no number.
    if len(raw) == 1 and separator_pos is not None:
        return _reject(AmountErrorCode.NON_NUMERIC_CHARACTER, "No digits in amount", raw, events)

    major = Decimal(raw)
    if major < config.min_amount or major > config.max_amount:
        return _reject(AmountErrorCode.OUT_OF_RANGE, "Amount outside valid range", raw, events)

    pence = to_pence(major)

    # Unreachable with the range check above; kept as an independent guard.
    if pence <= 0 or pence > config.max_pence:
        return _reject(
            AmountErrorCode.CONVERSION_OVERFLOW, "Amount conversion overflow", raw, events
        )

    return ParseAmountOutput(amount=MonetaryAmount(pence=pence))
