"""
Shared pytest fixtures for the hybrid advisor tests.
"""

import os

import pytest

# Keep simulation defaults independent of the developer's environment
for _key in ("SIM_HOURS", "SIM_INITIAL_SOC", "SIM_SEED",
             "FUEL_PRICE_USD_PER_TON", "VOYAGE_DAYS_PER_YEAR"):
    os.environ.pop(_key, None)
os.environ.setdefault("ENVIRONMENT", "development")

from rorohybrid.advisor.decision import DecisionEngine  # noqa: E402
from rorohybrid.models.conditions import OperatingConditions  # noqa: E402


@pytest.fixture
def cruise():
    """Open-sea transit at service speed."""
    return OperatingConditions(
        speed=17.0, sea_state=3, cargo=75.0, wind=8.0, wave=1.5, battery=50.0,
    )


@pytest.fixture
def engine():
    return DecisionEngine()


def make_conditions(**overrides) -> OperatingConditions:
    """Mid-range snapshot that matches no decision rule unless overridden."""
    values = dict(speed=16.0, sea_state=4, cargo=50.0, wind=6.0, wave=1.0, battery=50.0)
    values.update(overrides)
    return OperatingConditions(**values)


@pytest.fixture
def conditions_factory():
    return make_conditions


@pytest.fixture
def client():
    """FastAPI TestClient for the advisor API."""
    from fastapi.testclient import TestClient

    from rorohybrid_api.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
