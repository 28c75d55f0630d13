"""
Amounts component - Data models.

Monetary values are held as integer pence; major-unit bounds are exact Decimals.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from src.domain.entities import PENCE_PER_POUND


class AmountErrorCode(str, Enum):
    """Reason an amount string was rejected."""

    EMPTY_INPUT = "empty_input"
    TOO_LONG = "too_long"
    MULTIPLE_SEPARATORS = "multiple_separators"
    NON_NUMERIC_CHARACTER = "non_numeric_character"
    TOO_MANY_DECIMAL_PLACES = "too_many_decimal_places"
    OUT_OF_RANGE = "out_of_range"
    CONVERSION_OVERFLOW = "conversion_overflow"


def to_pence(major: Decimal) -> int:
    """Convert major units to pence, rounding half-up."""
    return int((major * PENCE_PER_POUND).quantize(Decimal(1), rounding=ROUND_HALF_UP))


# --- Configuration ---


@dataclass(frozen=True)
class AmountConfig:
    """Parsing limits for transaction amounts."""

    max_length: int = 15
    min_amount: Decimal = Decimal("0.01")
    max_amount: Decimal = Decimal("1000000.00")

    @property
    def min_pence(self) -> int:
        return to_pence(self.min_amount)

    @property
    def max_pence(self) -> int:
        return to_pence(self.max_amount)


# --- Values ---


@dataclass(frozen=True)
class MonetaryAmount:
    """An exact, validated count of pence."""

    pence: int

    def to_major_string(self) -> str:
        """Render as major.minor with two decimals, e.g. 1000 -> '10.00'."""
        pounds, pence = divmod(self.pence, PENCE_PER_POUND)
        return f"{pounds}.{pence:02d}"


@dataclass(frozen=True)
class AmountParseError:
    """Tagged parse failure echoing the offending input."""

    code: AmountErrorCode
    message: str
    raw: str


# --- Output ---


@dataclass(frozen=True)
class ParseAmountOutput:
    """Either a parsed amount or the rule that rejected the input."""

    amount: MonetaryAmount | None
    error: AmountParseError | None = None

    @property
    def success(self) -> bool:
        return self.amount is not None
