import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


LOG_FILE_NAME = "invoice_dashboard.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class ContextFormatter(logging.Formatter):
    """Append the ``extra=`` context of a record as ``key=value`` pairs.

    ``logger.info("delete_invoice.success", extra={"invoice_id": "42"})``
    renders as ``... [actions] delete_invoice.success invoice_id=42``.
    """

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        head, sep, tail = line.partition("\n")
        return f"{head} {pairs}{sep}{tail}"


def _log_level() -> int:
    return logging.DEBUG if os.getenv("DASH_DEBUG") == "1" else logging.INFO


def setup_logging(log_dir: Path | None = None) -> None:
    """Send application logs to stdout and a rotating file under ``log_dir``."""
    level = _log_level()
    root_logger = logging.getLogger()
    if getattr(root_logger, "_dash_logging_configured", False):
        root_logger.setLevel(level)
        return

    log_dir = log_dir or Path(os.getenv("DASH_LOG_DIR", "./data/logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = ContextFormatter()

    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stdout),
        RotatingFileHandler(log_dir / LOG_FILE_NAME, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT),
    ]
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    root_logger._dash_logging_configured = True
