"""CLI adapter writing the plain-text export of every ledger.

The export goes to stdout, or to the file named by LEDGER_EXPORT_FILE.
"""

import os
from pathlib import Path

from src.infrastructure.container import build_export_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Run the export use case."""
    logger = get_app_logger()
    text = build_export_use_case().execute()

    target = os.getenv("LEDGER_EXPORT_FILE")
    if not target:
        print(text, end="")
        return
    path = Path(target).expanduser()
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.error(f"Could not write export to {path}: {exc}")
        return
    get_usage_logger().info(f"Ledgers exported to {path}")
    print(f"Exported ledgers to {path}")


if __name__ == "__main__":  # pragma: no cover
    main()
