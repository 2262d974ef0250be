"""SQLAlchemy-backed repository storing ledger snapshots."""

from collections import defaultdict
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Connection

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.ledger import Expense, Ledger, Person
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


CREATE_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS ledgers (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        owner_id TEXT NOT NULL DEFAULT ''
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS ledger_members (
        ledger_id TEXT NOT NULL,
        seq INTEGER NOT NULL,
        member_id TEXT NOT NULL,
        PRIMARY KEY (ledger_id, seq)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS ledger_participants (
        ledger_id TEXT NOT NULL,
        seq INTEGER NOT NULL,
        person_id TEXT NOT NULL,
        name TEXT NOT NULL,
        PRIMARY KEY (ledger_id, seq)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS expenses (
        ledger_id TEXT NOT NULL,
        seq INTEGER NOT NULL,
        id TEXT NOT NULL,
        title TEXT NOT NULL,
        amount TEXT NOT NULL,
        payer_id TEXT NOT NULL,
        payer_name TEXT NOT NULL,
        PRIMARY KEY (ledger_id, seq)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS expense_participants (
        ledger_id TEXT NOT NULL,
        expense_id TEXT NOT NULL,
        seq INTEGER NOT NULL,
        person_id TEXT NOT NULL,
        name TEXT NOT NULL,
        PRIMARY KEY (ledger_id, expense_id, seq)
    )
    """,
)

CHILD_TABLES = (
    "ledger_members",
    "ledger_participants",
    "expenses",
    "expense_participants",
)

SELECT_LEDGERS_SQL = text(
    """
    SELECT id, title, owner_id
    FROM ledgers
    ORDER BY title, id
    """
)

SELECT_LEDGER_SQL = text(
    """
    SELECT id, title, owner_id
    FROM ledgers
    WHERE id = :ledger_id
    """
)

SELECT_MEMBERS_SQL = text(
    """
    SELECT member_id
    FROM ledger_members
    WHERE ledger_id = :ledger_id
    ORDER BY seq
    """
)

SELECT_PARTICIPANTS_SQL = text(
    """
    SELECT person_id, name
    FROM ledger_participants
    WHERE ledger_id = :ledger_id
    ORDER BY seq
    """
)

SELECT_EXPENSES_SQL = text(
    """
    SELECT id, title, amount, payer_id, payer_name
    FROM expenses
    WHERE ledger_id = :ledger_id
    ORDER BY seq
    """
)

SELECT_EXPENSE_PARTICIPANTS_SQL = text(
    """
    SELECT expense_id, person_id, name
    FROM expense_participants
    WHERE ledger_id = :ledger_id
    ORDER BY expense_id, seq
    """
)

INSERT_LEDGER_SQL = text(
    """
    INSERT INTO ledgers (id, title, owner_id)
    VALUES (:id, :title, :owner_id)
    """
)

INSERT_MEMBER_SQL = text(
    """
    INSERT INTO ledger_members (ledger_id, seq, member_id)
    VALUES (:ledger_id, :seq, :member_id)
    """
)

INSERT_PARTICIPANT_SQL = text(
    """
    INSERT INTO ledger_participants (ledger_id, seq, person_id, name)
    VALUES (:ledger_id, :seq, :person_id, :name)
    """
)

INSERT_EXPENSE_SQL = text(
    """
    INSERT INTO expenses (
        ledger_id,
        seq,
        id,
        title,
        amount,
        payer_id,
        payer_name
    )
    VALUES (
        :ledger_id,
        :seq,
        :id,
        :title,
        :amount,
        :payer_id,
        :payer_name
    )
    """
)

INSERT_EXPENSE_PARTICIPANT_SQL = text(
    """
    INSERT INTO expense_participants (
        ledger_id,
        expense_id,
        seq,
        person_id,
        name
    )
    VALUES (:ledger_id, :expense_id, :seq, :person_id, :name)
    """
)

DELETE_LEDGER_SQL = text("DELETE FROM ledgers WHERE id = :ledger_id")


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository persisting ledgers through SQLAlchemy Core.

    Amounts are stored as text so decimals round-trip exactly. Each ledger
    is written as a whole snapshot inside one transaction.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def prepare_storage(self) -> None:
        """Create the ledger tables if they do not exist."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            for statement in CREATE_TABLES_SQL:
                conn.exec_driver_sql(statement)

    def list_ledgers(self) -> list[Ledger]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_LEDGERS_SQL).all()
            return [self._load_ledger(conn, row) for row in rows]

    def get_ledger(self, ledger_id: str) -> Ledger | None:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_LEDGER_SQL,
                {"ledger_id": ledger_id},
            ).first()
            if row is None:
                return None
            return self._load_ledger(conn, row)

    def save_ledger(self, ledger: Ledger) -> None:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            self._delete_rows(conn, ledger.id)
            conn.execute(
                INSERT_LEDGER_SQL,
                {
                    "id": ledger.id,
                    "title": ledger.title,
                    "owner_id": ledger.owner_id,
                },
            )
            self._insert_many(
                conn,
                INSERT_MEMBER_SQL,
                [
                    {"ledger_id": ledger.id, "seq": seq, "member_id": member}
                    for seq, member in enumerate(ledger.member_ids)
                ],
            )
            self._insert_many(
                conn,
                INSERT_PARTICIPANT_SQL,
                [
                    {
                        "ledger_id": ledger.id,
                        "seq": seq,
                        "person_id": person.id,
                        "name": person.name,
                    }
                    for seq, person in enumerate(ledger.participants)
                ],
            )
            self._insert_many(
                conn,
                INSERT_EXPENSE_SQL,
                [
                    {
                        "ledger_id": ledger.id,
                        "seq": seq,
                        "id": expense.id,
                        "title": expense.title,
                        "amount": str(expense.amount),
                        "payer_id": expense.payer.id,
                        "payer_name": expense.payer.name,
                    }
                    for seq, expense in enumerate(ledger.expenses)
                ],
            )
            self._insert_many(
                conn,
                INSERT_EXPENSE_PARTICIPANT_SQL,
                [
                    {
                        "ledger_id": ledger.id,
                        "expense_id": expense.id,
                        "seq": seq,
                        "person_id": person.id,
                        "name": person.name,
                    }
                    for expense in ledger.expenses
                    for seq, person in enumerate(expense.participants)
                ],
            )
        self._logger.info(
            f"Saved ledger {ledger.id} with {len(ledger.expenses)} expenses"
        )

    def delete_ledger(self, ledger_id: str) -> bool:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            deleted = self._delete_rows(conn, ledger_id)
        return deleted

    @staticmethod
    def _delete_rows(conn: Connection, ledger_id: str) -> bool:
        params = {"ledger_id": ledger_id}
        for table in CHILD_TABLES:
            conn.execute(
                text(f"DELETE FROM {table} WHERE ledger_id = :ledger_id"),
                params,
            )
        result = conn.execute(DELETE_LEDGER_SQL, params)
        return result.rowcount > 0

    @staticmethod
    def _insert_many(
        conn: Connection,
        statement,
        payload: list[dict[str, Any]],
    ) -> None:
        if payload:
            conn.execute(statement, payload)

    @staticmethod
    def _load_ledger(conn: Connection, row) -> Ledger:
        params = {"ledger_id": row.id}
        member_ids = tuple(
            member.member_id
            for member in conn.execute(SELECT_MEMBERS_SQL, params).all()
        )
        participants = tuple(
            Person(id=person.person_id, name=person.name)
            for person in conn.execute(SELECT_PARTICIPANTS_SQL, params).all()
        )
        shared_by: dict[str, list[Person]] = defaultdict(list)
        for person in conn.execute(
            SELECT_EXPENSE_PARTICIPANTS_SQL,
            params,
        ).all():
            shared_by[person.expense_id].append(
                Person(id=person.person_id, name=person.name)
            )
        expenses = tuple(
            Expense(
                id=expense.id,
                title=expense.title,
                amount=coerce_decimal(expense.amount),
                payer=Person(id=expense.payer_id, name=expense.payer_name),
                participants=tuple(shared_by.get(expense.id, ())),
            )
            for expense in conn.execute(SELECT_EXPENSES_SQL, params).all()
        )
        return Ledger(
            id=row.id,
            title=row.title,
            owner_id=row.owner_id,
            member_ids=member_ids,
            participants=participants,
            expenses=expenses,
        )


__all__ = [
    "SqlAlchemyLedgerRepository",
    "CREATE_TABLES_SQL",
]
