"""
Unit tests for engine and API configuration.
"""

import pytest

from rorohybrid.config import Settings, get_float, get_int, get_optional_int
from rorohybrid_api.config import Settings as ApiSettings


class TestEnvHelpers:

    def test_get_float(self, monkeypatch):
        monkeypatch.setenv("TEST_FLOAT", "2.5")
        assert get_float("TEST_FLOAT", 1.0) == 2.5

    def test_get_float_invalid(self, monkeypatch):
        monkeypatch.setenv("TEST_FLOAT", "lots")
        assert get_float("TEST_FLOAT", 1.0) == 1.0

    def test_get_int_default(self, monkeypatch):
        monkeypatch.delenv("TEST_INT", raising=False)
        assert get_int("TEST_INT", 7) == 7

    @pytest.mark.parametrize("raw,expected", [("42", 42), ("", None), ("x", None)])
    def test_get_optional_int(self, monkeypatch, raw, expected):
        monkeypatch.setenv("TEST_SEED", raw)
        assert get_optional_int("TEST_SEED") == expected

    def test_get_optional_int_unset(self, monkeypatch):
        monkeypatch.delenv("TEST_SEED", raising=False)
        assert get_optional_int("TEST_SEED") is None


class TestEngineSettings:

    def test_defaults(self):
        s = Settings()
        assert s.sim_hours == 24
        assert s.sim_initial_soc == 50.0
        assert s.sim_seed is None
        assert s.fuel_price_usd_per_ton == 700.0
        assert s.voyage_days_per_year == 48

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SIM_SEED", "11")
        monkeypatch.setenv("SIM_INITIAL_SOC", "80")
        monkeypatch.setenv("FUEL_PRICE_USD_PER_TON", "650")
        s = Settings()
        assert s.sim_seed == 11
        assert s.sim_initial_soc == 80.0
        assert s.fuel_price_usd_per_ton == 650.0

    @pytest.mark.parametrize("key,value,attr,fallback", [
        ("SIM_SEED", "-5", "sim_seed", None),
        ("SIM_HOURS", "0", "sim_hours", 24),
        ("SIM_INITIAL_SOC", "95", "sim_initial_soc", 50.0),
        ("SIM_INITIAL_SOC", "5", "sim_initial_soc", 50.0),
        ("FUEL_PRICE_USD_PER_TON", "-1", "fuel_price_usd_per_ton", 700.0),
        ("VOYAGE_DAYS_PER_YEAR", "-3", "voyage_days_per_year", 48),
    ])
    def test_invalid_values_fall_back(self, monkeypatch, key, value, attr, fallback):
        monkeypatch.setenv(key, value)
        assert getattr(Settings(), attr) == fallback


class TestApiSettings:

    def test_cors_origins_list(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")
        assert ApiSettings().cors_origins_list == ["http://a.example", "http://b.example"]

    def test_environment_flags(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")
        s = ApiSettings()
        assert s.is_production
        assert not s.is_development
