"""
Structured logging framework for the token ledger.

Provides structlog configuration, field redaction and operation timing.
The ENVIRONMENT variable picks the defaults: JSON records with redacted
addresses and amounts in production, coloured console output otherwise.

Ledger code logs through module-level loggers and passes ledger_id on
every call, so configure_logging() may run before or after ledgers exist.
"""

import logging
import os
import sys
import time
from typing import Any

import structlog


def is_production() -> bool:
    """
    Determine if running in production environment.

    Checks ENVIRONMENT environment variable. Returns True if 'production', False otherwise.
    """
    return os.getenv("ENVIRONMENT", "development").lower() == "production"


def configure_logging(
    *,
    json_output: bool | None = None,
    log_level: str | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        json_output: Render JSON instead of console output.
                    Defaults to is_production().
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                  Defaults to the LOG_LEVEL variable, then INFO.
    """
    production = is_production()
    if json_output is None:
        json_output = production
    level_name = log_level or os.getenv("LOG_LEVEL", "INFO")
    level = getattr(logging, level_name.upper())

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    # basicConfig is a no-op once handlers exist; the level must still apply
    logging.getLogger().setLevel(level)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_output:
        renderer: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    else:
        renderer = [
            structlog.processors.ExceptionRenderer(),
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Outside production a later configure_logging() call still takes effect
        cache_logger_on_first_use=production,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


# Account identities and token quantities are masked in production logs
REDACTED_FIELDS = {
    "creator",
    "owner",
    "spender",
    "from_address",
    "to_address",
    "amount",
    "initial_supply",
}


def redact_context(context: dict[str, Any]) -> dict[str, Any]:
    """
    Redact sensitive fields from log context.

    Args:
        context: Dictionary of log context

    Returns:
        New dictionary with sensitive fields redacted

    Example:
        >>> redact_context({"owner": "alice", "operation": "approve"})
        {'owner': '***REDACTED***', 'operation': 'approve'}
    """
    return {
        k: "***REDACTED***" if k in REDACTED_FIELDS else v
        for k, v in context.items()
    }


def loggable_context(context: dict[str, Any]) -> dict[str, Any]:
    """Redact context in production, pass it through in development."""
    if is_production():
        return redact_context(context)
    return dict(context)


class LogOperation:
    """
    Context manager that times a block of ledger work.

    Logs the start at DEBUG and the outcome at INFO (or ERROR when the
    block raises). When count is given, the completion record also
    carries the throughput in operations per second.

    Example:
        >>> with LogOperation(logger, "bulk_transfer", count=1000) as op:
        ...     run_transfers()
        >>> op.elapsed_seconds
    """

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        operation: str,
        *,
        count: int | None = None,
        **context: Any,
    ):
        self.logger = logger
        self.operation = operation
        self.count = count
        self.context = context
        self.start_time: float = 0.0
        self.elapsed_seconds: float = 0.0

    def ops_per_sec(self) -> float:
        """Throughput of the finished block, 0 when it cannot be computed"""
        if not self.count or self.elapsed_seconds <= 0:
            return 0.0
        return self.count / self.elapsed_seconds

    def __enter__(self) -> "LogOperation":
        self.logger.debug(
            f"{self.operation} started",
            operation=self.operation,
            **loggable_context(self.context),
        )
        self.start_time = time.perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.elapsed_seconds = time.perf_counter() - self.start_time
        fields = {
            "operation": self.operation,
            "duration_ms": round(self.elapsed_seconds * 1000, 2),
            **loggable_context(self.context),
        }
        if self.count is not None:
            fields["count"] = self.count
            fields["ops_per_sec"] = round(self.ops_per_sec())

        if exc_type is None:
            self.logger.info(f"{self.operation} completed", **fields)
        else:
            # Stack traces only in development
            self.logger.error(
                f"{self.operation} failed", exc_info=not is_production(), **fields
            )
