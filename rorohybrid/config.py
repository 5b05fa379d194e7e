"""
Advisor engine configuration.

Settings come from environment variables; a .env file in the project root
is loaded first when present.

Usage:
    from rorohybrid.config import settings

    settings.configure_logging()
    print(settings.sim_initial_soc)
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


def get_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    try:
        return float(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default


def get_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    try:
        return int(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default


def get_optional_int(key: str) -> Optional[int]:
    """Get int from environment variable, None when unset or invalid."""
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass
class Settings:
    """Engine settings loaded from environment."""

    # Simulation
    sim_hours: int = field(default_factory=lambda: get_int("SIM_HOURS", 24))
    sim_initial_soc: float = field(default_factory=lambda: get_float("SIM_INITIAL_SOC", 50.0))
    sim_seed: Optional[int] = field(default_factory=lambda: get_optional_int("SIM_SEED"))

    # Comparison economics
    fuel_price_usd_per_ton: float = field(
        default_factory=lambda: get_float("FUEL_PRICE_USD_PER_TON", 700.0)
    )
    voyage_days_per_year: int = field(
        default_factory=lambda: get_int("VOYAGE_DAYS_PER_YEAR", 48)
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = field(
        default_factory=lambda: os.getenv(
            "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.sim_hours < 1:
            logging.warning(f"SIM_HOURS {self.sim_hours} must be positive, using 24")
            self.sim_hours = 24

        # Battery operating window is 20-90%
        if not 20.0 <= self.sim_initial_soc <= 90.0:
            logging.warning(
                f"Initial SoC {self.sim_initial_soc} outside operating window "
                f"[20, 90], using 50"
            )
            self.sim_initial_soc = 50.0

        if self.sim_seed is not None and self.sim_seed < 0:
            logging.warning(f"SIM_SEED {self.sim_seed} is negative, running unseeded")
            self.sim_seed = None

        if self.fuel_price_usd_per_ton < 0:
            logging.warning(
                f"Fuel price {self.fuel_price_usd_per_ton} is negative, using 700"
            )
            self.fuel_price_usd_per_ton = 700.0

        if self.voyage_days_per_year < 0:
            logging.warning(
                f"Voyage days {self.voyage_days_per_year} is negative, using 48"
            )
            self.voyage_days_per_year = 48

    def configure_logging(self):
        """Configure logging based on settings."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        logging.basicConfig(level=level, format=self.log_format)


# Singleton instance
settings = Settings()


def get_settings() -> Settings:
    """Get the settings instance (useful for dependency injection)."""
    return settings
