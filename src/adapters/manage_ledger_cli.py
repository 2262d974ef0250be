"""CLI adapter creating and editing ledgers.

Commands:
    list
    create TITLE [--owner ID] [--member ID ...] [--participant NAME ...]
    add-participant LEDGER_ID NAME
    remove-participant LEDGER_ID PERSON_ID
    record-expense LEDGER_ID TITLE AMOUNT --payer PERSON_ID
        --participant PERSON_ID [--participant PERSON_ID ...] [--expense-id ID]
"""

import argparse
from decimal import Decimal

from src.application.use_cases.errors import (
    LedgerNotFoundError,
    ParticipantNotFoundError,
)
from src.application.use_cases.manage_ledgers import ManageLedgerUseCase
from src.domain.models.ledger import Ledger
from src.domain.services.formatting import format_amount
from src.infrastructure.container import build_manage_ledger_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="manage-ledger")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List ledgers and their participants")

    create = commands.add_parser("create", help="Create a ledger")
    create.add_argument("title")
    create.add_argument("--owner", default="")
    create.add_argument(
        "--member", action="append", default=[], dest="members"
    )
    create.add_argument(
        "--participant", action="append", default=[], dest="participants"
    )

    add = commands.add_parser("add-participant", help="Add a participant")
    add.add_argument("ledger_id")
    add.add_argument("name")

    remove = commands.add_parser(
        "remove-participant", help="Remove a participant without expenses"
    )
    remove.add_argument("ledger_id")
    remove.add_argument("person_id")

    record = commands.add_parser("record-expense", help="Add or edit an expense")
    record.add_argument("ledger_id")
    record.add_argument("title")
    record.add_argument("amount")
    record.add_argument("--payer", required=True)
    record.add_argument(
        "--participant",
        action="append",
        required=True,
        dest="participants",
    )
    record.add_argument("--expense-id", default=None)
    return parser


def _print_ledger(ledger: Ledger, settings: LedgerSettings) -> None:
    print(f"[{ledger.id}] {ledger.title}")
    if ledger.owner_id:
        accounts = ", ".join(ledger.all_member_ids)
        print(f"  {ledger.member_count} accounts: {accounts}")
    for person in ledger.participants:
        print(f"  {person.id}: {person.name}")
    total = sum((e.amount for e in ledger.expenses), Decimal("0"))
    amount = format_amount(
        total,
        settings.currency_symbol,
        settings.display_digits,
    )
    print(f"  {len(ledger.expenses)} expenses, total {amount}")


def _run(
    args: argparse.Namespace,
    use_case: ManageLedgerUseCase,
    settings: LedgerSettings,
) -> None:
    if args.command == "list":
        ledgers = use_case.list_ledgers()
        if not ledgers:
            print("No ledgers found.")
        for ledger in ledgers:
            _print_ledger(ledger, settings)
    elif args.command == "create":
        ledger = use_case.create_ledger(
            args.title,
            owner_id=args.owner,
            participant_names=args.participants,
            member_ids=args.members,
        )
        _print_ledger(ledger, settings)
    elif args.command == "add-participant":
        person = use_case.add_participant(args.ledger_id, args.name)
        print(f"Added {person.name} ({person.id})")
    elif args.command == "remove-participant":
        use_case.remove_participant(args.ledger_id, args.person_id)
        print(f"Removed {args.person_id}")
    elif args.command == "record-expense":
        expense = use_case.record_expense(
            args.ledger_id,
            args.title,
            args.amount,
            args.payer,
            args.participants,
            expense_id=args.expense_id,
        )
        amount = format_amount(
            expense.amount,
            settings.currency_symbol,
            settings.display_digits,
        )
        print(
            f"Recorded {expense.title}: {amount} "
            f"(paid by {expense.payer.name}) [{expense.id}]"
        )


def main(argv: list[str] | None = None) -> None:
    """Parse a command and apply it to the ledger store."""
    logger = get_app_logger()
    args = _build_parser().parse_args(argv)
    settings = LedgerSettings.from_env()
    use_case = build_manage_ledger_use_case()
    try:
        _run(args, use_case, settings)
    except (LedgerNotFoundError, ParticipantNotFoundError, ValueError) as exc:
        logger.error(str(exc))
        return
    get_usage_logger().info(f"Ledger command {args.command} completed")


if __name__ == "__main__":  # pragma: no cover
    main()
