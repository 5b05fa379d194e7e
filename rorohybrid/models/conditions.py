"""
Operating condition snapshot for the hybrid propulsion advisor.

One immutable record per evaluation. Produced by the input layer (API, CLI,
preset catalogue) or by the simulation's hourly condition generator.
"""

import math
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict

from rorohybrid.errors import DomainError


KNOTS_TO_MS = 0.514444

SEA_STATE_MIN = 1
SEA_STATE_MAX = 7

# Douglas sea scale labels shown next to the sea-state input
SEA_STATE_DESCRIPTIONS = {
    1: "Calm",
    2: "Light",
    3: "Slight",
    4: "Moderate",
    5: "Rough",
    6: "Very Rough",
    7: "High",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity.

    Python's round() uses banker's rounding; percentages and kW figures are
    reported with half-up rounding.
    """
    return int(math.floor(value + 0.5))


def round_fixed(value: float, places: int = 2) -> float:
    """Round to `places` decimals with ties away from zero.

    Works on the exact binary value, so 1.125 becomes 1.13 while 1.005
    (stored as 1.00499...) stays 1.0.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def require_finite(field: str, value: float) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise DomainError(field, value, "must be a number")
    if not math.isfinite(value):
        raise DomainError(field, value, "must be finite")


def _require_percent(field: str, value: float) -> None:
    require_finite(field, value)
    if not 0.0 <= value <= 100.0:
        raise DomainError(field, value, "must be between 0 and 100")


@dataclass(frozen=True)
class OperatingConditions:
    """Vessel operating conditions for a single evaluation."""

    speed: float  # Speed through water (knots)
    sea_state: int  # Douglas scale (1-7)
    cargo: float  # Cargo load (% of capacity)
    wind: float  # Wind speed (m/s)
    wave: float  # Significant wave height (m)
    battery: float  # Battery state of charge (%)

    def __post_init__(self):
        require_finite("speed", self.speed)
        if self.speed <= 0:
            raise DomainError("speed", self.speed, "must be greater than 0")

        require_finite("sea_state", self.sea_state)
        if float(self.sea_state) != int(self.sea_state):
            raise DomainError("sea_state", self.sea_state, "must be an integer")
        if not SEA_STATE_MIN <= self.sea_state <= SEA_STATE_MAX:
            raise DomainError(
                "sea_state", self.sea_state,
                f"must be between {SEA_STATE_MIN} and {SEA_STATE_MAX}",
            )

        _require_percent("cargo", self.cargo)

        for name in ("wind", "wave"):
            value = getattr(self, name)
            require_finite(name, value)
            if value < 0:
                raise DomainError(name, value, "must not be negative")

        _require_percent("battery", self.battery)

    @property
    def speed_ms(self) -> float:
        """Speed through water in m/s."""
        return self.speed * KNOTS_TO_MS

    @property
    def sea_state_description(self) -> str:
        return SEA_STATE_DESCRIPTIONS[int(self.sea_state)]

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
