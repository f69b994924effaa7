"""
Price alerts.

A session keeps at most one alert per commodity. Checking alerts against a
price map returns the triggered ones and drops them from the book.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from loguru import logger

from tradedesk.core.enums import AlertCondition
from tradedesk.core.exceptions import ValidationError
from tradedesk.core.utils.validation import validate_commodity, validate_positive


@dataclass(frozen=True)
class PriceAlert:
    """Target price for a commodity."""

    commodity: str
    target_price: float
    condition: AlertCondition = AlertCondition.ABOVE
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if self.target_price <= 0:
            raise ValidationError(f"Target price must be positive, got {self.target_price}")

    def is_triggered(self, current_price: float | None) -> bool:
        """Check the alert against a quote; missing or non-positive quotes never trigger."""
        if current_price is None or current_price <= 0:
            return False
        return self.condition.is_met(current_price, self.target_price)

    def to_dict(self) -> dict[str, Any]:
        return {
            "commodity": self.commodity,
            "target_price": self.target_price,
            "condition": self.condition.value,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PriceAlert":
        try:
            created_at = datetime.fromisoformat(data["created_at"])
            if created_at.tzinfo is None:
                created_at = created_at.replace(tzinfo=UTC)
            return cls(
                commodity=str(data["commodity"]),
                target_price=float(data["target_price"]),
                condition=AlertCondition(data.get("condition", AlertCondition.ABOVE.value)),
                created_at=created_at,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Invalid price alert record: {e}") from e


class AlertBook:
    """Per-session collection of price alerts keyed by commodity."""

    def __init__(self, alerts: list[PriceAlert] | None = None) -> None:
        self._alerts: dict[str, PriceAlert] = {}
        for alert in alerts or []:
            self._alerts[alert.commodity] = alert

    def __len__(self) -> int:
        return len(self._alerts)

    def set_alert(
        self,
        commodity: str,
        target_price: float,
        condition: AlertCondition | str = AlertCondition.ABOVE,
    ) -> PriceAlert:
        """Create an alert, replacing any existing alert for the commodity."""
        identifier = validate_commodity(commodity)
        target = validate_positive(target_price, "target_price")
        try:
            alert_condition = AlertCondition(condition)
        except ValueError as e:
            raise ValidationError(f"Unsupported alert condition: {condition}") from e

        alert = PriceAlert(commodity=identifier, target_price=target, condition=alert_condition)
        replaced = self._alerts.get(identifier)
        self._alerts[identifier] = alert
        if replaced is not None:
            logger.debug(f"Replaced alert for {identifier}: {replaced.target_price} -> {target}")
        return alert

    def remove_alert(self, commodity: str) -> bool:
        """Remove the alert for a commodity; no-op if absent."""
        return self._alerts.pop(validate_commodity(commodity), None) is not None

    def get_alert(self, commodity: str) -> PriceAlert | None:
        return self._alerts.get(commodity.strip())

    def alerts(self) -> list[PriceAlert]:
        return list(self._alerts.values())

    def check(self, current_prices: dict[str, float]) -> list[PriceAlert]:
        """Return alerts triggered by the given prices and drop them from the book."""
        triggered = [
            alert
            for alert in self._alerts.values()
            if alert.is_triggered(current_prices.get(alert.commodity))
        ]
        for alert in triggered:
            del self._alerts[alert.commodity]
            logger.info(
                f"Price alert triggered: {alert.commodity} {alert.condition.value} "
                f"{alert.target_price} (price={current_prices[alert.commodity]})"
            )
        return triggered

    def to_records(self) -> list[dict[str, Any]]:
        return [alert.to_dict() for alert in self._alerts.values()]

    @classmethod
    def from_records(cls, records: list[dict[str, Any]]) -> "AlertBook":
        return cls([PriceAlert.from_dict(record) for record in records])
