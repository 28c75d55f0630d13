import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.memory_accounts import InMemoryAccountStore
from src.adapters.security_events import LoggingSecurityEventSink
from src.app_shell.config import build_account_store, build_banking_config
from src.components.banking import BankingService
from src.core.ports.events import SecurityEventPort
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(os.environ.get("BANK_RULES_PATH", self.base_dir / "rules.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


# --- Adapters ---

# Account store singleton; balances live for the lifetime of the process.
_account_store_instance: InMemoryAccountStore | None = None


def get_account_store(rules: Rules = Depends(get_rules)) -> InMemoryAccountStore:
    """Get account store singleton, seeded from rules on first use."""
    global _account_store_instance
    if _account_store_instance is None:
        _account_store_instance = build_account_store(rules)
    return _account_store_instance


def reset_account_store() -> None:
    """Drop the store singleton so the next request reseeds it."""
    global _account_store_instance
    _account_store_instance = None


def get_event_sink(rules: Rules = Depends(get_rules)) -> SecurityEventPort:
    return LoggingSecurityEventSink(logger_name=rules.logging.security_logger)


# --- Component Services ---
def get_banking_service(
    store: InMemoryAccountStore = Depends(get_account_store),
    events: SecurityEventPort = Depends(get_event_sink),
    rules: Rules = Depends(get_rules),
) -> BankingService:
    """Get banking component service."""
    return BankingService(store=store, events=events, config=build_banking_config(rules))
