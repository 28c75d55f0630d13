import argparse
import logging
import sys
from pathlib import Path

from src.adapters.security_events import RecordingSecurityEventSink
from src.app_shell.config import (
    build_account_store,
    build_banking_config,
    configure_logging,
    validate_server_rules,
)
from src.components.amounts import parse_transaction_amount
from src.components.banking import BankingService
from src.components.fields import validate_field
from src.rules.loader import load_rules
from src.rules.models import Rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str) -> Rules:
    if not Path(path).exists():
        logger.error("Rules file %s not found.", path)
        sys.exit(1)
    return load_rules(Path(path))


def print_events(sink: RecordingSecurityEventSink) -> None:
    for event in sink.events:
        print(f"[SECURITY] {event.event}: {event.detail}", file=sys.stderr)


def handle_parse_amount(rules: Rules, args: argparse.Namespace) -> int:
    sink = RecordingSecurityEventSink()
    config = build_banking_config(rules)
    result = parse_transaction_amount(args.raw, config.amounts, sink)
    print_events(sink)

    if result.amount is None:
        assert result.error is not None
        print(f"{result.error.code.value}: {result.error.message}")
        return 1

    print(f"{result.amount.pence} ({result.amount.to_major_string()})")
    return 0


def handle_check_field(args: argparse.Namespace) -> int:
    sink = RecordingSecurityEventSink()
    result = validate_field(args.raw, args.max_length, args.field, sink)
    print_events(sink)

    if result.error is not None:
        print(f"{result.error.code.value}: {result.error.message}")
        return 1

    print("OK")
    return 0


def handle_accounts(rules: Rules) -> int:
    service = BankingService(
        store=build_account_store(rules), config=build_banking_config(rules)
    )
    for account in service.list_accounts():
        print(
            f"{account.account_number}  {account.full_name:<31}  "
            f"{service.format_amount(account.balance_pence):>14}"
        )
    return 0


def handle_serve(rules: Rules, args: argparse.Namespace) -> int:
    import uvicorn

    host = args.host or rules.server.host
    port = args.port or rules.server.port
    logger.info("Starting %s on http://%s:%d", rules.server.title, host, port)
    uvicorn.run("src.api.main:app", host=host, port=port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Security Thinking Bank CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the banking web service")
    serve_parser.add_argument("--host", help="Bind address (default from rules)")
    serve_parser.add_argument("--port", type=int, help="Port (default from rules)")

    # parse-amount
    amount_parser = subparsers.add_parser("parse-amount", help="Validate a transaction amount")
    amount_parser.add_argument("raw", help="Amount in pounds, e.g. 10.50")

    # check-field
    field_parser = subparsers.add_parser("check-field", help="Validate a text field")
    field_parser.add_argument("raw", help="Field value")
    field_parser.add_argument("--field", default="field", help="Field name for messages")
    field_parser.add_argument(
        "--max-length", type=int, required=True, help="Exclusive maximum length"
    )

    # accounts
    subparsers.add_parser("accounts", help="List seeded accounts")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "check-field":
        return handle_check_field(args)

    rules = get_rules(args.rules)
    configure_logging(rules.logging.level)

    try:
        validate_server_rules(rules)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    if args.command == "parse-amount":
        return handle_parse_amount(rules, args)
    if args.command == "accounts":
        return handle_accounts(rules)
    if args.command == "serve":
        return handle_serve(rules, args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
