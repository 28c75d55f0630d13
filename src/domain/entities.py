from decimal import Decimal

from pydantic import BaseModel, Field

# --- Storage budgets ---
# A field with capacity N holds at most N - 1 characters; the last slot is
# reserved for the terminator of the fixed-width record layout.
ACCOUNT_NUMBER_CAPACITY = 20
FULL_NAME_CAPACITY = 32
ADDRESS_CAPACITY = 64
PHONE_CAPACITY = 16

PENCE_PER_POUND = 100


def bounded_copy(value: str, capacity: int) -> str:
    """Copy at most capacity - 1 characters of value."""
    if capacity <= 0:
        return ""
    return value[: capacity - 1]


def format_currency(pence: int, symbol: str = "£") -> str:
    """Format a pence count as pounds, e.g. 250000 -> '£2500.00'."""
    pounds = Decimal(pence) / PENCE_PER_POUND
    return f"{symbol}{pounds:.2f}"


# --- Accounts ---


class Account(BaseModel):
    account_number: str
    full_name: str
    address: str
    balance_pence: int = Field(ge=0)
    phone: str = ""

    @classmethod
    def create(
        cls,
        account_number: str,
        full_name: str,
        address: str,
        balance_pence: int,
        phone: str = "",
    ) -> "Account":
        """Build an account with every text field bounded to its capacity."""
        return cls(
            account_number=bounded_copy(account_number, ACCOUNT_NUMBER_CAPACITY),
            full_name=bounded_copy(full_name, FULL_NAME_CAPACITY),
            address=bounded_copy(address, ADDRESS_CAPACITY),
            balance_pence=balance_pence,
            phone=bounded_copy(phone, PHONE_CAPACITY),
        )
