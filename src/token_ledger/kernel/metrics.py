"""
Prometheus metrics collection for the token ledger.

Counts accepted and rejected ledger operations and times them. Metrics are
registered in the default prometheus_client registry; exposing them is left
to the embedding application.
"""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from prometheus_client import Counter, Histogram

from token_ledger.kernel.errors import TokenError

# ============================================================================
# Ledger Operation Metrics
# ============================================================================

operations_total = Counter(
    "token_ledger_operations_total",
    "Total number of ledger operations",
    ["operation", "status"],  # status: success, rejected, failure
)

rejections_total = Counter(
    "token_ledger_rejections_total",
    "Total number of rejected ledger operations by error type",
    ["operation", "reason"],
)

operation_duration_seconds = Histogram(
    "token_ledger_operation_duration_seconds",
    "Duration of ledger operations in seconds",
    ["operation"],
    buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.1),
)

# ============================================================================
# Helper Functions
# ============================================================================

P = ParamSpec("P")
R = TypeVar("R")


def track_operation(operation: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator to count and time a ledger operation.

    A TokenError marks the call as rejected and is re-raised unchanged.

    Args:
        operation: Name of the ledger operation

    Returns:
        Decorated function that records metrics
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start = time.perf_counter()
            status = "success"
            try:
                return func(*args, **kwargs)
            except TokenError as exc:
                status = "rejected"
                rejections_total.labels(
                    operation=operation, reason=type(exc).__name__
                ).inc()
                raise
            except Exception:
                status = "failure"
                raise
            finally:
                duration = time.perf_counter() - start
                operation_duration_seconds.labels(operation=operation).observe(duration)
                operations_total.labels(operation=operation, status=status).inc()

        return wrapper

    return decorator
