"""
Banking component unit tests.

Tests for validated profile updates and transfers.
"""

from __future__ import annotations

import pytest

from src.adapters.memory_accounts import InMemoryAccountStore
from src.components.amounts import AmountConfig
from src.components.banking import (
    PROFILE_UPDATE_FAILED,
    TRANSFER_BLOCKED,
    TRANSFER_FAILED,
    TRANSFER_REJECTED,
    BankingConfig,
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
from src.core.ports.events import SecurityEvent
from src.domain.entities import Account

# --- Mock Sink ---


class MockEventSink:
    """Collects emitted events."""

    def __init__(self) -> None:
        self.events: list[SecurityEvent] = []

    def emit(self, event: SecurityEvent) -> None:
        self.events.append(event)

    def names(self) -> list[str]:
        return [e.event for e in self.events]


# --- Fixtures ---


@pytest.fixture
def store() -> InMemoryAccountStore:
    return InMemoryAccountStore(
        [
            Account.create("ACC001", "James Smith", "1 High Street, London", 1000),
            Account.create("ACC002", "Sarah Jones", "2 Low Road, Leeds", 500),
        ]
    )


@pytest.fixture
def sink() -> MockEventSink:
    return MockEventSink()


@pytest.fixture
def service(store: InMemoryAccountStore, sink: MockEventSink) -> BankingService:
    return BankingService(store=store, events=sink)


def _balances(store: InMemoryAccountStore) -> dict[str, int]:
    return {a.account_number: a.balance_pence for a in store.list_all()}


# --- Transfers ---


class TestTransfer:
    """Transfer orchestration."""

    def test_full_balance_transfer_leaves_zero(
        self, service: BankingService, store: InMemoryAccountStore
    ) -> None:
        result = run_transfer(TransferInput("ACC001", "ACC002", "10.00"), service)

        assert result.success is True
        assert result.errors == ()
        assert result.amount is not None
        assert result.amount.pence == 1000
        assert _balances(store) == {"ACC001": 0, "ACC002": 1500}

    def test_returns_updated_accounts(self, service: BankingService) -> None:
        result = run_transfer(TransferInput("ACC001", "ACC002", "2.50"), service)

        assert result.from_account is not None
        assert result.to_account is not None
        assert result.from_account.balance_pence == 750
        assert result.to_account.balance_pence == 750

    def test_insufficient_funds_changes_nothing(
        self, service: BankingService, store: InMemoryAccountStore, sink: MockEventSink
    ) -> None:
        result = run_transfer(TransferInput("ACC001", "ACC002", "10.01"), service)

        assert result.success is False
        assert result.errors[0].code == BankingErrorCode.INSUFFICIENT_FUNDS
        assert _balances(store) == {"ACC001": 1000, "ACC002": 500}
        assert sink.names() == [TRANSFER_REJECTED]
        assert sink.events[0].detail == "Insufficient funds: ACC001 attempted £10.01"

    def test_self_transfer_rejected_with_sufficient_funds(
        self, service: BankingService, store: InMemoryAccountStore, sink: MockEventSink
    ) -> None:
        result = run_transfer(TransferInput("ACC001", "ACC001", "1.00"), service)

        assert result.success is False
        assert result.errors[0].code == BankingErrorCode.SELF_TRANSFER
        assert _balances(store)["ACC001"] == 1000
        assert sink.names() == [TRANSFER_BLOCKED]

    def test_insufficient_funds_checked_before_self_transfer(
        self, service: BankingService
    ) -> None:
        result = run_transfer(TransferInput("ACC002", "ACC002", "50.00"), service)

        assert result.errors[0].code == BankingErrorCode.INSUFFICIENT_FUNDS

    @pytest.mark.parametrize(
        "from_account,to_account",
        [("ACC999", "ACC002"), ("ACC001", "ACC999"), ("", "")],
    )
    def test_unknown_account(
        self,
        service: BankingService,
        store: InMemoryAccountStore,
        sink: MockEventSink,
        from_account: str,
        to_account: str,
    ) -> None:
        result = run_transfer(TransferInput(from_account, to_account, "1.00"), service)

        assert result.success is False
        assert result.errors[0].code == BankingErrorCode.ACCOUNT_NOT_FOUND
        assert _balances(store) == {"ACC001": 1000, "ACC002": 500}
        assert sink.names() == [TRANSFER_FAILED]
        assert sink.events[0].detail == f"Invalid accounts: {from_account} -> {to_account}"

    @pytest.mark.parametrize(
        "raw,reason",
        [
            ("", "empty_input"),
            ("abc", "non_numeric_character"),
            ("-5.00", "non_numeric_character"),
            ("1.001", "too_many_decimal_places"),
            ("1..0", "multiple_separators"),
            ("0.00", "out_of_range"),
        ],
    )
    def test_invalid_amount_rejected_before_lookup(
        self,
        service: BankingService,
        store: InMemoryAccountStore,
        raw: str,
        reason: str,
    ) -> None:
        # Unknown accounts too: the amount is checked first
        result = run_transfer(TransferInput("ACC999", "ACC998", raw), service)

        assert result.success is False
        assert len(result.errors) == 1
        assert result.errors[0].code == BankingErrorCode.INVALID_AMOUNT
        assert result.errors[0].reason == reason
        assert result.errors[0].field == "amount"
        assert _balances(store) == {"ACC001": 1000, "ACC002": 500}

    def test_invalid_amount_emits_parser_event(
        self, service: BankingService, sink: MockEventSink
    ) -> None:
        run_transfer(TransferInput("ACC001", "ACC002", "ten"), service)

        assert sink.names() == ["Transaction validation failed"]

    def test_successful_transfer_emits_no_event(
        self, service: BankingService, sink: MockEventSink
    ) -> None:
        run_transfer(TransferInput("ACC001", "ACC002", "1.00"), service)

        assert sink.events == []

    def test_successful_transfer_logged(
        self, service: BankingService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("INFO"):
            run_transfer(TransferInput("ACC001", "ACC002", "10.00"), service)

        assert "Secure transfer completed: £10.00 from ACC001 to ACC002" in caplog.text

    def test_custom_amount_limits(self, store: InMemoryAccountStore) -> None:
        config = BankingConfig(amounts=AmountConfig(max_length=4))
        service = BankingService(store=store, config=config)

        result = run_transfer(TransferInput("ACC001", "ACC002", "1.000"), service)

        assert result.errors[0].reason == "too_long"

    def test_works_without_event_sink(self, store: InMemoryAccountStore) -> None:
        service = BankingService(store=store)

        result = run_transfer(TransferInput("ACC001", "ACC001", "1.00"), service)

        assert result.errors[0].code == BankingErrorCode.SELF_TRANSFER


# --- Profile Updates ---


class TestUpdateProfile:
    """Profile update orchestration."""

    def test_updates_both_fields(
        self, service: BankingService, store: InMemoryAccountStore
    ) -> None:
        result = run_update_profile(
            UpdateProfileInput("ACC001", "James W Smith", "10 Downing Street"), service
        )

        assert result.success is True
        stored = store.get("ACC001")
        assert stored is not None
        assert stored.full_name == "James W Smith"
        assert stored.address == "10 Downing Street"
        assert stored.balance_pence == 1000

    def test_name_at_limit_accepted(self, service: BankingService) -> None:
        result = run_update_profile(UpdateProfileInput("ACC001", "N" * 31, "Addr"), service)

        assert result.success is True
        assert result.account is not None
        assert result.account.full_name == "N" * 31

    def test_name_too_long_changes_nothing(
        self, service: BankingService, store: InMemoryAccountStore
    ) -> None:
        result = run_update_profile(
            UpdateProfileInput("ACC001", "N" * 32, "New Address"), service
        )

        assert result.success is False
        assert result.errors[0].code == BankingErrorCode.INVALID_FIELD
        assert result.errors[0].field == "full_name"
        assert result.errors[0].reason == "field_too_long"
        stored = store.get("ACC001")
        assert stored is not None
        assert stored.address == "1 High Street, London"

    def test_invalid_address_keeps_old_name(
        self, service: BankingService, store: InMemoryAccountStore
    ) -> None:
        result = run_update_profile(
            UpdateProfileInput("ACC001", "Valid Name", "Line one\nLine two"), service
        )

        assert result.success is False
        assert result.errors[0].field == "address"
        assert result.errors[0].reason == "invalid_character"
        stored = store.get("ACC001")
        assert stored is not None
        assert stored.full_name == "James Smith"

    def test_reports_both_field_errors(self, service: BankingService) -> None:
        result = run_update_profile(UpdateProfileInput("ACC001", "", "A" * 64), service)

        assert [e.field for e in result.errors] == ["full_name", "address"]
        assert [e.reason for e in result.errors] == ["empty_field", "field_too_long"]

    def test_fields_validated_before_lookup(
        self, service: BankingService, sink: MockEventSink
    ) -> None:
        result = run_update_profile(UpdateProfileInput("ACC999", "", "Addr"), service)

        assert result.errors[0].code == BankingErrorCode.INVALID_FIELD
        assert PROFILE_UPDATE_FAILED not in sink.names()

    def test_unknown_account(self, service: BankingService, sink: MockEventSink) -> None:
        result = run_update_profile(UpdateProfileInput("ACC999", "Name", "Addr"), service)

        assert result.success is False
        assert result.errors[0].code == BankingErrorCode.ACCOUNT_NOT_FOUND
        assert sink.events == [SecurityEvent(PROFILE_UPDATE_FAILED, "Account not found: ACC999")]

    def test_field_rejection_emits_input_event(
        self, service: BankingService, sink: MockEventSink
    ) -> None:
        run_update_profile(UpdateProfileInput("ACC001", "Bad\tName", "Addr"), service)

        assert sink.names() == ["Input validation failed"]
        assert sink.events[0].detail == "full_name contains invalid characters"

    def test_smaller_capacity_from_config(self, store: InMemoryAccountStore) -> None:
        service = BankingService(store=store, config=BankingConfig(full_name_capacity=5))

        assert run_update_profile(UpdateProfileInput("ACC001", "Abcd", "A"), service).success
        result = run_update_profile(UpdateProfileInput("ACC001", "Abcde", "A"), service)
        assert result.errors[0].reason == "field_too_long"


# --- Lookups ---


class TestLookups:
    """Account lookups."""

    def test_get_existing(self, service: BankingService) -> None:
        result = run_get(GetAccountInput("ACC002"), service)

        assert result.success is True
        assert result.account is not None
        assert result.account.full_name == "Sarah Jones"

    def test_get_unknown(self, service: BankingService) -> None:
        result = run_get(GetAccountInput("NOPE"), service)

        assert result.success is False
        assert result.account is None
        assert result.errors[0].code == BankingErrorCode.ACCOUNT_NOT_FOUND

    def test_list_sorted(self, service: BankingService) -> None:
        result = run_list(service)

        assert result.total == 2
        assert [a.account_number for a in result.accounts] == ["ACC001", "ACC002"]

    def test_format_amount(self, service: BankingService) -> None:
        assert service.format_amount(250000) == "£2500.00"
        assert service.format_amount(5) == "£0.05"
