"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from urllib.parse import unquote, urlparse

import dotenv

from src.domain.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_DISPLAY_DIGITS
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

DEFAULT_DATABASE_NAME = "ledgers.db"
MAX_DISPLAY_DIGITS = 8


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for ledger storage and display.

    Attributes:
        database_url: SQLAlchemy URL of the ledger database.
        currency_symbol: Symbol placed before displayed amounts.
        display_digits: Maximum fraction digits shown for amounts.
    """

    database_url: str
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    display_digits: int = DEFAULT_DISPLAY_DIGITS

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and an optional .env.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_url = os.getenv("LEDGER_DB_URL")
        if raw_url:
            database_url = cls._normalize_url(raw_url.strip(), logger=logger)
        else:
            database_url = cls._default_database_url(logger=logger)
        symbol = os.getenv("LEDGER_CURRENCY_SYMBOL", "").strip()
        digits = cls._parse_digits(
            os.getenv("LEDGER_DISPLAY_DIGITS"),
            logger=logger,
        )
        return cls(
            database_url=database_url,
            currency_symbol=symbol or DEFAULT_CURRENCY_SYMBOL,
            display_digits=digits,
        )

    @staticmethod
    def _normalize_url(raw_url: str, logger) -> str:
        """Turn plain paths and file URIs into SQLite URLs.

        Args:
            raw_url: Raw URL or filesystem path.
            logger: Logger used for notices.

        Returns:
            str: SQLAlchemy database URL.
        """
        parsed = urlparse(raw_url)
        if parsed.scheme and parsed.scheme != "file":
            return raw_url
        raw_path = unquote(parsed.path) if parsed.scheme == "file" else raw_url
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.info(f"Ledger database will be created at {path}")
        return f"sqlite:///{path}"

    @staticmethod
    def _default_database_url(logger) -> str:
        """Return the SQLite URL of the database stored in data/.

        Args:
            logger: Logger used for warnings.

        Returns:
            str: URL of the single .db file in data/, or of data/ledgers.db.
        """
        data_dir = get_project_root() / "data"
        matches = sorted(data_dir.glob("*.db")) if data_dir.exists() else []
        if len(matches) == 1:
            return f"sqlite:///{matches[0].resolve()}"
        if len(matches) > 1:
            logger.warning(
                "Multiple .db files found in data/. "
                f"Set LEDGER_DB_URL to choose one; using {DEFAULT_DATABASE_NAME}."
            )
        return f"sqlite:///{(data_dir / DEFAULT_DATABASE_NAME).resolve()}"

    @staticmethod
    def _parse_digits(raw_digits: str | None, logger) -> int:
        if not raw_digits:
            return DEFAULT_DISPLAY_DIGITS
        try:
            digits = int(raw_digits)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_DISPLAY_DIGITS '{raw_digits}', "
                f"using {DEFAULT_DISPLAY_DIGITS}"
            )
            return DEFAULT_DISPLAY_DIGITS
        if not 0 <= digits <= MAX_DISPLAY_DIGITS:
            logger.warning(
                f"LEDGER_DISPLAY_DIGITS must be between 0 and "
                f"{MAX_DISPLAY_DIGITS}, using {DEFAULT_DISPLAY_DIGITS}"
            )
            return DEFAULT_DISPLAY_DIGITS
        return digits


__all__ = ["LedgerSettings"]
