"""Logging setup shared by the API process and the scripts."""

import logging
from datetime import datetime
from pathlib import Path

from fireprotect.config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def setup_logging(log_name: str = "fireprotect") -> None:
    """Log to the console and to ``<LOG_DIR>/<log_name>-YYYY-MM-DD.log``.

    Only the first call attaches handlers, so importing the app from a
    script that already configured logging does not duplicate output.
    """
    global _configured
    if _configured:
        return

    logs_dir = Path(LOG_DIR) if LOG_DIR else Path(__file__).parent.parent.parent / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"{log_name}-{datetime.now().strftime('%Y-%m-%d')}.log"

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # ThingSpeak polling and SQL would otherwise flood the log
    for noisy in ("httpx", "httpcore", "uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _configured = True
