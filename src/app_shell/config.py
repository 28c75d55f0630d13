import logging

from src.adapters.memory_accounts import InMemoryAccountStore
from src.components.amounts import AmountConfig
from src.components.banking import BankingConfig
from src.components.fields import is_printable_ascii
from src.domain.entities import (
    ACCOUNT_NUMBER_CAPACITY,
    ADDRESS_CAPACITY,
    FULL_NAME_CAPACITY,
    PHONE_CAPACITY,
    Account,
)
from src.rules.models import Rules

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service and CLI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def validate_server_rules(rules: Rules) -> None:
    """
    Validate seed data before startup.
    Raises ValueError listing every problem found.
    """
    problems: list[str] = []
    seen: set[str] = set()

    capacities = (
        ("account_number", ACCOUNT_NUMBER_CAPACITY),
        ("full_name", FULL_NAME_CAPACITY),
        ("address", ADDRESS_CAPACITY),
        ("phone", PHONE_CAPACITY),
    )

    for seed in rules.accounts:
        if seed.account_number in seen:
            problems.append(f"Duplicate account number: {seed.account_number}")
        seen.add(seed.account_number)

        if not seed.account_number:
            problems.append("Account number cannot be empty")

        if seed.balance_pence < 0:
            problems.append(f"{seed.account_number}: balance cannot be negative")

        for field_name, capacity in capacities:
            value = getattr(seed, field_name)
            if len(value) >= capacity:
                problems.append(
                    f"{seed.account_number}: {field_name} exceeds capacity ({capacity})"
                )
            if not is_printable_ascii(value):
                problems.append(f"{seed.account_number}: {field_name} has invalid characters")

    if problems:
        raise ValueError("Invalid rules:\n" + "\n".join(f"- {p}" for p in problems))


def build_banking_config(rules: Rules) -> BankingConfig:
    """Map rules onto the banking component's config."""
    return BankingConfig(
        amounts=AmountConfig(
            max_length=rules.amounts.max_length,
            min_amount=rules.amounts.min_amount,
            max_amount=rules.amounts.max_amount,
        ),
        full_name_capacity=rules.fields.full_name_capacity,
        address_capacity=rules.fields.address_capacity,
        currency_symbol=rules.amounts.currency_symbol,
    )


def build_account_store(rules: Rules) -> InMemoryAccountStore:
    """Create a store seeded with the accounts listed in the rules."""
    return InMemoryAccountStore(
        Account.create(
            account_number=seed.account_number,
            full_name=seed.full_name,
            address=seed.address,
            balance_pence=seed.balance_pence,
            phone=seed.phone,
        )
        for seed in rules.accounts
    )
