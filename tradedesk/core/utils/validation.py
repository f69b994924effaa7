"""
Validation utilities for core domain models.

Provides consistent validation across the application. Every failure is an
``InvalidArgumentError`` so ledger callers see a single error kind for bad
input.
"""

import math
import re
from typing import Any

from tradedesk.core.constants import MAX_COMMODITY_ID_LENGTH
from tradedesk.core.enums import TradeSide
from tradedesk.core.exceptions import InvalidArgumentError

_SESSION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{1,128}$")


def validate_commodity(commodity: Any, param_name: str = "commodity") -> str:
    """Validate a commodity identifier and return it stripped of whitespace.

    Args:
        commodity: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated identifier

    Raises:
        InvalidArgumentError: If commodity is not a non-empty string
    """
    if not isinstance(commodity, str):
        raise InvalidArgumentError(
            f"{param_name} must be a string, got {type(commodity).__name__}"
        )
    identifier = commodity.strip()
    if not identifier:
        raise InvalidArgumentError(f"{param_name} must not be empty")
    if len(identifier) > MAX_COMMODITY_ID_LENGTH:
        raise InvalidArgumentError(
            f"{param_name} too long: {len(identifier)} > {MAX_COMMODITY_ID_LENGTH}"
        )
    return identifier


def validate_side(side: Any, param_name: str = "side") -> TradeSide:
    """Validate a trade side, accepting enum members or their string values.

    Raises:
        InvalidArgumentError: If side is not buy or sell
    """
    if isinstance(side, TradeSide):
        return side
    if isinstance(side, str):
        try:
            return TradeSide.from_string(side)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e
    raise InvalidArgumentError(f"{param_name} must be 'buy' or 'sell', got {side!r}")


def validate_positive(value: Any, param_name: str) -> float:
    """Validate that a numeric value is finite and positive.

    Args:
        value: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated value as float

    Raises:
        InvalidArgumentError: If value is not a positive finite number
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidArgumentError(
            f"{param_name} must be a number, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{param_name} must be finite, got {value}")
    if value <= 0:
        raise InvalidArgumentError(f"{param_name} must be positive, got {value}")
    return float(value)


def validate_non_negative(value: Any, param_name: str) -> float:
    """Validate that a numeric value is finite and not negative.

    Raises:
        InvalidArgumentError: If value is negative or not a finite number
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidArgumentError(
            f"{param_name} must be a number, got {type(value).__name__}"
        )
    if not math.isfinite(value) or value < 0:
        raise InvalidArgumentError(f"{param_name} must be non-negative, got {value}")
    return float(value)


def validate_session_id(session_id: Any) -> str:
    """Validate a session id: 1-128 letters, digits, ``_``, ``-`` or ``.``.

    Raises:
        InvalidArgumentError: If the id is malformed
    """
    if not isinstance(session_id, str) or not _SESSION_ID_PATTERN.match(session_id):
        raise InvalidArgumentError(f"Invalid session id: {session_id!r}")
    if session_id.startswith("."):
        raise InvalidArgumentError(f"Session id must not start with '.': {session_id!r}")
    return session_id
