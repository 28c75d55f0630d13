"""
Tests for app shell configuration helpers.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from src.app_shell.config import (
    build_account_store,
    build_banking_config,
    validate_server_rules,
)
from src.rules.loader import parse_rules
from src.rules.models import Rules, SeedAccount


def _rules_with(*accounts: SeedAccount) -> Rules:
    return Rules(accounts=list(accounts))


def _seed(number: str = "ACC001", **overrides: object) -> SeedAccount:
    values: dict[str, object] = {
        "account_number": number,
        "full_name": "Test Person",
        "address": "1 Test Street",
        "balance_pence": 100,
    }
    values.update(overrides)
    return SeedAccount.model_validate(values)


class TestValidateServerRules:
    def test_valid_rules_pass(self) -> None:
        validate_server_rules(_rules_with(_seed("A"), _seed("B")))

    def test_duplicate_account_numbers(self) -> None:
        with pytest.raises(ValueError, match="Duplicate account number: A"):
            validate_server_rules(_rules_with(_seed("A"), _seed("A")))

    def test_empty_account_number(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_server_rules(_rules_with(_seed("")))

    def test_negative_balance(self) -> None:
        with pytest.raises(ValueError, match="balance cannot be negative"):
            validate_server_rules(_rules_with(_seed(balance_pence=-1)))

    def test_name_over_capacity(self) -> None:
        with pytest.raises(ValueError, match="full_name exceeds capacity"):
            validate_server_rules(_rules_with(_seed(full_name="N" * 32)))

    def test_non_printable_address(self) -> None:
        with pytest.raises(ValueError, match="address has invalid characters"):
            validate_server_rules(_rules_with(_seed(address="Line\nBreak")))

    def test_reports_every_problem(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            validate_server_rules(
                _rules_with(_seed(balance_pence=-5, phone="0" * 16), _seed("ACC001"))
            )

        message = str(exc_info.value)
        assert "balance cannot be negative" in message
        assert "phone exceeds capacity" in message
        assert "Duplicate account number" in message


class TestBuilders:
    def test_banking_config_from_rules(self) -> None:
        rules = parse_rules(
            "amounts:\n"
            "  max_length: 9\n"
            '  min_amount: "1.00"\n'
            '  max_amount: "500"\n'
            '  currency_symbol: "$"\n'
            "fields:\n"
            "  full_name_capacity: 20\n"
        )

        config = build_banking_config(rules)

        assert config.amounts.max_length == 9
        assert config.amounts.min_amount == Decimal("1.00")
        assert config.amounts.max_pence == 50000
        assert config.full_name_capacity == 20
        assert config.address_capacity == 64
        assert config.currency_symbol == "$"

    def test_account_store_seeded(self) -> None:
        store = build_account_store(_rules_with(_seed("B"), _seed("A", balance_pence=7)))

        assert [a.account_number for a in store.list_all()] == ["A", "B"]
        assert store.get("A").balance_pence == 7  # type: ignore[union-attr]
