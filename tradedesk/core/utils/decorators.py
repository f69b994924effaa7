"""
Utility decorators for trade logging.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger

_LOGGED_PARAMS = ("commodity", "side", "quantity", "price")

F = TypeVar("F", bound=Callable[..., Any])


def _serialize_parameter_value(value: Any) -> Any:
    """Serialize parameter value for logging."""
    if hasattr(value, "value"):
        return str(value.value)  # Handle enum values
    return value


def _extract_trading_context(bound_args: inspect.BoundArguments) -> dict[str, Any]:
    """Extract trading context from function arguments."""
    return {
        name: _serialize_parameter_value(value)
        for name, value in bound_args.arguments.items()
        if name in _LOGGED_PARAMS
    }


def _describe_result(result: Any) -> dict[str, Any]:
    """Summarize a call result for the completion log line."""
    if isinstance(result, bool | int | float | str):
        return {"result": result}
    outcome = getattr(result, "outcome", None)
    if outcome is not None:
        return {"result": _serialize_parameter_value(outcome)}
    return {"result_type": type(result).__name__}


def _setup_logging_context(
    func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> dict[str, Any]:
    """Setup logging context for trading operations."""
    sig = inspect.signature(func)
    try:
        bound_args = sig.bind(*args, **kwargs)
    except TypeError:
        # Let the call itself raise the argument error
        return {"correlation_id": str(uuid.uuid4())[:8]}
    bound_args.apply_defaults()

    return {
        "correlation_id": str(uuid.uuid4())[:8],
        **_extract_trading_context(bound_args),
    }


def log_trades(func: F) -> F:
    """Decorator to log trading operations with correlation IDs and timing."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        context = _setup_logging_context(func, args, kwargs)
        func_name = func.__name__
        log = logger.bind(**context)

        log.debug(f"Trading operation started: {func_name}")
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time_ms = round((time.perf_counter() - start_time) * 1000, 2)
            log.bind(execution_time_ms=execution_time_ms, error_type=type(e).__name__).error(
                f"Trading operation failed: {func_name}: {e}"
            )
            raise

        execution_time_ms = round((time.perf_counter() - start_time) * 1000, 2)
        log.bind(execution_time_ms=execution_time_ms, **_describe_result(result)).debug(
            f"Trading operation completed: {func_name}"
        )
        return result

    return wrapper  # type: ignore
