"""
Financial helpers for the simulated trading desk.

Ledger arithmetic is done on plain floats; these helpers keep rounding and
comparisons consistent at the edges (display, zero checks, persistence).

Precision considerations:
- Float64 provides ~15-16 significant decimal digits
- Stored cash, quantities and average prices are never rounded
- Rounding is applied only when presenting values
- Zero checks on quantities go through ``is_effectively_zero``
"""

from tradedesk.core.constants import QUANTITY_EPSILON

# Financial calculation precision (number of decimal places)
FINANCIAL_DECIMALS = 8
PERCENTAGE_DECIMALS = 4
PRICE_DECIMALS = 2

# Common financial values as float constants
ZERO = 0.0
HUNDRED = 100.0


def round_price(price: float) -> float:
    """Round price to display precision."""
    return round(price, PRICE_DECIMALS)


def round_amount(amount: float) -> float:
    """Round amount to display precision."""
    return round(amount, FINANCIAL_DECIMALS)


def round_percentage(percentage: float) -> float:
    """Round percentage to display precision."""
    return round(percentage, PERCENTAGE_DECIMALS)


def calculate_total(quantity: float, price: float) -> float:
    """Total value of a trade: ``price * quantity``."""
    return price * quantity


def calculate_weighted_average(
    existing_quantity: float,
    existing_average: float,
    added_quantity: float,
    added_total: float,
) -> float:
    """Quantity-weighted average cost after adding to a holding.

    A fresh holding is the ``existing_quantity == 0`` case and yields the
    purchase price.

    Args:
        existing_quantity: Quantity held before the purchase
        existing_average: Average cost of the held quantity
        added_quantity: Quantity bought
        added_total: Cash spent on the purchase

    Returns:
        New average cost per unit
    """
    new_quantity = existing_quantity + added_quantity
    if new_quantity <= ZERO:
        raise ValueError(f"Resulting quantity must be positive, got {new_quantity}")
    return (existing_quantity * existing_average + added_total) / new_quantity


def calculate_pnl(average_price: float, current_price: float, quantity: float) -> float:
    """Unrealized PnL of a long holding."""
    return (current_price - average_price) * quantity


def calculate_pnl_percent(average_price: float, current_price: float) -> float:
    """PnL relative to cost basis, in percent."""
    if average_price <= ZERO:
        return ZERO
    return (current_price - average_price) / average_price * HUNDRED


def safe_float_comparison(a: float, b: float, tolerance: float = 1e-9) -> bool:
    """Compare floats with tolerance for precision issues.

    Examples:
        >>> safe_float_comparison(0.1 + 0.2, 0.3)
        True
        >>> safe_float_comparison(1000000.1, 1000000.2, 0.01)
        False
    """
    return abs(a - b) < tolerance


def is_effectively_zero(quantity: float) -> bool:
    """Check whether a remaining quantity is float dust."""
    return abs(quantity) < QUANTITY_EPSILON
