"""JSON logging for feed builds.

Every line is one JSON object. Keyword arguments given to an
``ExecutionLogger`` call (``document_path``, ``action``, ``item_count``,
``metrics`` ...) become top-level keys of that object, next to the
execution id and component of the build that emitted it.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
}


class StructuredFormatter(logging.Formatter):
    """Formats a record and its build context as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES
        )

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class ExecutionLogger:
    """Logger bound to one build and one pipeline component."""

    def __init__(self, execution_id: str, component: str):
        self.execution_id = execution_id
        self.component = component
        self.logger = logging.getLogger(f"feed_builder.{component}")
        self.start_time: datetime | None = None

    def _log(self, level: int, message: str, **fields: Any) -> None:
        self.logger.log(
            level,
            message,
            extra={"execution_id": self.execution_id, "component": self.component, **fields},
        )

    def info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, **fields)

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, **fields)

    def log_execution_start(self, **fields: Any) -> None:
        self.start_time = datetime.now(UTC)
        self.info(f"Starting {self.component} execution", **fields)

    def log_execution_end(self, success: bool = True, **fields: Any) -> None:
        """Log the end of the build with its duration in seconds."""
        duration = None
        if self.start_time:
            duration = (datetime.now(UTC) - self.start_time).total_seconds()
        self.info(
            f"Completed {self.component} execution",
            duration_seconds=duration,
            success=success,
            **fields,
        )

    def log_document_processing(
        self, document_path: str, action: str, success: bool = True, **fields: Any
    ) -> None:
        """Log one step for one document; failures are logged at ERROR."""
        self._log(
            logging.INFO if success else logging.ERROR,
            f"Document {action}: {document_path}",
            document_path=document_path,
            action=action,
            success=success,
            **fields,
        )

    def log_metrics(self, metrics: dict[str, Any]) -> None:
        self.info("Execution metrics", metrics=metrics)


def setup_structured_logging(log_level: str = "INFO") -> None:
    """Send JSON log lines to stdout at the given level.

    Raises:
        ValueError: If log_level is not one of LOG_LEVELS
    """
    level_name = log_level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level {log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(level_name)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(console_handler)

    logging.getLogger("feed_builder").setLevel(level_name)


def create_execution_logger(
    component: str, execution_id: str | None = None
) -> ExecutionLogger:
    """Create a component logger, generating a build id when none is given."""
    if not execution_id:
        execution_id = f"build_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"

    return ExecutionLogger(execution_id, component)
