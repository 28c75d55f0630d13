import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.api.deps import get_settings
from src.app_shell.config import configure_logging, validate_server_rules
from src.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate seed data on startup (fail-fast)
    try:
        rules = load_rules(settings.rules_path)
        validate_server_rules(rules)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    configure_logging(rules.logging.level)
    app.title = rules.server.title
    logger.info(
        "Rules loaded from %s (%d accounts)", settings.rules_path, len(rules.accounts)
    )

    yield


app = FastAPI(
    title="Security Thinking Bank",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import accounts, pages  # noqa: E402

app.include_router(accounts.router, prefix="/api", tags=["Accounts"])
app.include_router(pages.router, prefix="", tags=["Pages"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "thinking-bank"}
