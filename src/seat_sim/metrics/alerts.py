"""Alert state machine for sustained static pressure."""

import logging
from enum import Enum
from typing import Union

from seat_sim.core.constants import CRITICAL_ZONE_COUNT
from seat_sim.core.types import Alert, AlertType

logger = logging.getLogger(__name__)


class AlertState(str, Enum):
    """States of the critical alert machine."""

    CLEAR = "clear"
    CRITICAL_ACTIVE = "critical_active"


def critical_message(critical_count: int) -> str:
    """Message for a new critical alert."""
    return f"Static High Pressure Detected in {critical_count} zones! Reposition Required."


class AlertStateMachine:
    """Raises and retires critical alerts from sustained pressure counts.

    A critical alert is raised when more than ``zone_count`` cells have been
    sustained above the critical threshold and none is active yet. It is
    retired only once the sustained count returns to zero. While active, the
    alert is never rewritten with a new count.

    Attributes:
        zone_count: Sustained cells that must be exceeded to raise an alert
    """

    def __init__(self, zone_count: int = CRITICAL_ZONE_COUNT):
        """Initialize alert state machine.

        Args:
            zone_count: Sustained cell count that must be exceeded
        """
        self.zone_count = zone_count
        self._alerts: list[Alert] = []

    @property
    def alerts(self) -> list[Alert]:
        """Active alerts, newest first."""
        return self._alerts.copy()

    @property
    def state(self) -> AlertState:
        """Current machine state."""
        if self.has_critical:
            return AlertState.CRITICAL_ACTIVE
        return AlertState.CLEAR

    @property
    def has_critical(self) -> bool:
        """Whether a critical alert is active."""
        return any(a.alert_type is AlertType.CRITICAL for a in self._alerts)

    def evaluate(self, critical_count: int, now: int) -> list[Alert]:
        """Apply one cycle of sustained pressure input.

        Args:
            critical_count: Cells sustained past the time limit
            now: Current time in epoch milliseconds

        Returns:
            Active alerts after the transition
        """
        if critical_count == 0:
            if self.has_critical:
                self._alerts = [
                    a for a in self._alerts if a.alert_type is not AlertType.CRITICAL
                ]
                logger.info("Static pressure relieved, critical alert cleared")
            return self.alerts

        if critical_count > self.zone_count and not self.has_critical:
            alert = Alert(
                id=f"crit-{now}",
                alert_type=AlertType.CRITICAL,
                message=critical_message(critical_count),
                timestamp=now,
            )
            self._alerts.insert(0, alert)
            logger.info("Critical alert raised: %d sustained zones", critical_count)

        return self.alerts

    def post(
        self,
        alert_type: Union[AlertType, str],
        message: str,
        now: int,
    ) -> Alert:
        """Add a host-supplied alert.

        Args:
            alert_type: Severity class (info or warning)
            message: Alert text
            now: Current time in epoch milliseconds

        Returns:
            The new alert

        Raises:
            ValueError: If a critical alert is posted directly
        """
        alert_type = AlertType(alert_type)
        if alert_type is AlertType.CRITICAL:
            raise ValueError("Critical alerts are derived from sustained pressure only")

        alert = Alert(
            id=f"{alert_type.value}-{now}",
            alert_type=alert_type,
            message=message,
            timestamp=now,
        )
        self._alerts.insert(0, alert)
        return alert

    def clear(self) -> None:
        """Drop all alerts."""
        self._alerts.clear()
