"""Alert rule registry: ordered threshold checks applied to a sensor reading."""

from collections.abc import Callable
from dataclasses import dataclass

from fireprotect.config import FLAME_SENTINEL, GAS_THRESHOLD, TEMPERATURE_THRESHOLD
from fireprotect.schemas.sensor import SensorReading


@dataclass(frozen=True)
class AlertThresholds:
    """Per-deployment limits the rules compare readings against."""

    gas_threshold: float = GAS_THRESHOLD  # ppm, strictly above breaches
    temperature_threshold: float = TEMPERATURE_THRESHOLD  # °C, strictly above breaches
    flame_sentinel: str = FLAME_SENTINEL  # flame flag value meaning "flame detected"


@dataclass(frozen=True)
class AlertRule:
    """Alert type and severity produced when ``breached`` holds."""

    alert_type: str
    severity: str
    breached: Callable[[SensorReading, AlertThresholds], bool]


def _flame_detected(reading: SensorReading, thresholds: AlertThresholds) -> bool:
    return reading.flame == thresholds.flame_sentinel


def _gas_above_threshold(reading: SensorReading, thresholds: AlertThresholds) -> bool:
    return reading.gas > thresholds.gas_threshold


def _temperature_above_threshold(reading: SensorReading, thresholds: AlertThresholds) -> bool:
    return reading.temperature > thresholds.temperature_threshold


# Priority order; the first breached rule decides the alert
ALERT_RULES: tuple[AlertRule, ...] = (
    AlertRule(alert_type="fire", severity="critical", breached=_flame_detected),
    AlertRule(alert_type="gas_leak", severity="critical", breached=_gas_above_threshold),
    AlertRule(alert_type="temperature", severity="critical", breached=_temperature_above_threshold),
)


def classify_reading(
    reading: SensorReading,
    thresholds: AlertThresholds,
    rules: tuple[AlertRule, ...] = ALERT_RULES,
) -> AlertRule | None:
    """Return the highest-priority rule the reading breaches, or None."""
    for rule in rules:
        if rule.breached(reading, thresholds):
            return rule
    return None
