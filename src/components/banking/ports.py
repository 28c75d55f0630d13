"""
Banking component - Port interfaces.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from src.core.ports.events import SecurityEvent, SecurityEventPort
from src.domain.entities import Account


class AccountStorePort(Protocol):
    """
    Account store interface.

    Mutations are only issued for accounts the caller has looked up inside
    the same `locked()` block.
    """

    def get(self, account_number: str) -> Account | None:
        """Get account by number."""
        ...

    def list_all(self) -> list[Account]:
        """List all accounts ordered by account number."""
        ...

    def update_profile(self, account_number: str, full_name: str, address: str) -> Account:
        """Replace name and address in one write."""
        ...

    def apply_transfer(
        self, from_account: str, to_account: str, amount_pence: int
    ) -> tuple[Account, Account]:
        """Debit one account and credit another in one write."""
        ...

    def locked(self) -> AbstractContextManager[None]:
        """Hold exclusive access for a lookup-check-mutate sequence."""
        ...


__all__ = ["AccountStorePort", "SecurityEvent", "SecurityEventPort"]
