"""In-memory account store adapter.

This adapter implements AccountStorePort for the banking component.
State lives for the lifetime of the process; nothing is persisted.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from threading import RLock

from src.domain.entities import Account


class InMemoryAccountStore:
    """Lock-guarded account map - suitable for single-process deployments."""

    def __init__(self, accounts: Iterable[Account] = ()) -> None:
        self._accounts: dict[str, Account] = {}
        self._lock = RLock()
        for account in accounts:
            self._accounts[account.account_number] = account

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the store lock; re-entrant so mutations inside still work."""
        with self._lock:
            yield

    def get(self, account_number: str) -> Account | None:
        """Get account by number."""
        with self._lock:
            return self._accounts.get(account_number)

    def list_all(self) -> list[Account]:
        """List accounts ordered by account number."""
        with self._lock:
            return [self._accounts[key] for key in sorted(self._accounts)]

    def save(self, account: Account) -> Account:
        """Insert or replace an account."""
        with self._lock:
            self._accounts[account.account_number] = account
            return account

    def update_profile(self, account_number: str, full_name: str, address: str) -> Account:
        """Replace name and address. Raises KeyError for unknown accounts."""
        with self._lock:
            current = self._accounts[account_number]
            updated = current.model_copy(update={"full_name": full_name, "address": address})
            self._accounts[account_number] = updated
            return updated

    def apply_transfer(
        self, from_account: str, to_account: str, amount_pence: int
    ) -> tuple[Account, Account]:
        """
        Debit and credit in one step.

        Raises KeyError for unknown accounts and ValueError if the debit would
        go negative; callers check both before calling.
        """
        with self._lock:
            source = self._accounts[from_account]
            destination = self._accounts[to_account]
            if source.balance_pence < amount_pence:
                raise ValueError(f"Debit of {amount_pence} would overdraw {from_account}")

            debited = source.model_copy(
                update={"balance_pence": source.balance_pence - amount_pence}
            )
            credited = destination.model_copy(
                update={"balance_pence": destination.balance_pence + amount_pence}
            )
            self._accounts[from_account] = debited
            self._accounts[to_account] = credited
            return debited, credited

    def clear(self) -> None:
        """Clear all accounts - useful for testing."""
        with self._lock:
            self._accounts.clear()
