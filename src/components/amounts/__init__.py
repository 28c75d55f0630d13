"""
Amounts component - Transaction amount parsing.

Converts raw decimal strings into validated pence values.
"""

from .component import (
    DECIMAL_SEPARATOR,
    MAX_DECIMAL_PLACES,
    TRANSACTION_VALIDATION_FAILED,
    parse_transaction_amount,
)
from .models import (
    AmountConfig,
    AmountErrorCode,
    AmountParseError,
    MonetaryAmount,
    ParseAmountOutput,
    to_pence,
)
from .ports import SecurityEventPort

__all__ = [
    # Entry points
    "parse_transaction_amount",
    # Models
    "AmountConfig",
    "AmountErrorCode",
    "AmountParseError",
    "MonetaryAmount",
    "ParseAmountOutput",
    "to_pence",
    # Constants
    "DECIMAL_SEPARATOR",
    "MAX_DECIMAL_PLACES",
    "TRANSACTION_VALIDATION_FAILED",
    # Ports
    "SecurityEventPort",
]
