"""
Tests for the 24-hour voyage simulation.

Covers:
- Frame count and battery operating window
- Fuel accumulation and the CO2 summary
- Reproducibility from a seed and an injected random source
- State-of-charge update policy
"""

import numpy as np
import pytest

from rorohybrid.advisor.decision import PowerMode, Recommendation
from rorohybrid.advisor.simulation import SimulationEngine, run_seeded_simulation
from rorohybrid.errors import DomainError


class FixedRng:
    """Random source that always draws the upper sea-state increment."""

    def integers(self, low, high):
        return high - 1


def _recommendation(mode, total, diesel, electric):
    return Recommendation(
        mode=mode,
        rule="test",
        total_power_kw=total,
        diesel_power_kw=diesel,
        electric_power_kw=electric,
        diesel_ratio=mode.diesel_ratio,
        electric_ratio=mode.electric_ratio,
        fuel_tons_per_hour=round(diesel * 180 / 1e6, 2),
        sfoc_g_per_kwh=180.0,
        engine_load_percent=0,
        fuel_savings_percent=0,
        battery_utilization_percent=0,
        system_efficiency_percent=0,
    )


@pytest.fixture
def result():
    return run_seeded_simulation(42)


class TestSimulationRun:

    def test_twenty_four_frames(self, result):
        assert len(result.frames) == 24
        assert [f.hour for f in result.frames] == list(range(24))

    def test_soc_stays_in_window(self, result):
        for frame in result.frames:
            assert 20.0 <= frame.battery_soc <= 90.0

    def test_soc_never_rises(self, result):
        """Charging needs diesel above required power, which no rule assigns."""
        socs = [50.0] + [f.battery_soc for f in result.frames]
        assert all(b <= a for a, b in zip(socs, socs[1:]))

    def test_low_battery_forces_diesel(self, result):
        """Draining below 30% switches the cascade to diesel only."""
        assert any(f.mode is PowerMode.DIESEL_ONLY for f in result.frames)
        assert result.frames[-1].mode is PowerMode.DIESEL_ONLY

    def test_first_hour_discharges(self, result):
        first = result.frames[0]
        assert first.mode is PowerMode.HYBRID_50_50
        expected = 50.0 - first.electric_power_kw / 4000.0 * 10.0
        assert first.battery_soc == pytest.approx(expected)

    def test_fuel_accumulates(self, result):
        cumulative = [f.cumulative_fuel_tons for f in result.frames]
        assert all(b >= a for a, b in zip(cumulative, cumulative[1:]))
        assert result.summary.total_fuel_tons == pytest.approx(
            sum(f.fuel_tons for f in result.frames)
        )
        assert cumulative[-1] == pytest.approx(result.summary.total_fuel_tons)

    def test_summary(self, result):
        summary = result.summary
        assert summary.average_battery_soc == pytest.approx(
            np.mean([f.battery_soc for f in result.frames])
        )
        assert summary.co2_reduction_kg == pytest.approx(summary.total_fuel_tons * 3170.0)

    def test_profile(self, result):
        for frame in result.frames:
            c = frame.conditions
            assert 16.5 <= c.speed <= 17.5
            assert c.sea_state in (3, 4)
            assert c.cargo == 75.0
            assert 6.0 <= c.wind <= 10.0
            assert 1.0 <= c.wave <= 2.0

    def test_frame_to_dict(self, result):
        data = result.frames[0].to_dict()
        assert data["hour"] == 0
        assert data["mode"] == "Hybrid 50-50"
        assert data["conditions"]["cargo"] == 75.0


class TestReproducibility:

    def test_same_seed_same_trace(self):
        a = run_seeded_simulation(7)
        b = run_seeded_simulation(7)
        assert [f.to_dict() for f in a.frames] == [f.to_dict() for f in b.frames]
        assert a.summary == b.summary

    def test_injected_rng(self):
        result = SimulationEngine(rng=FixedRng()).run()
        assert all(f.conditions.sea_state == 4 for f in result.frames)

    def test_negative_seed_rejected(self):
        with pytest.raises(DomainError, match="seed"):
            SimulationEngine.seeded(-1)

    def test_custom_length(self):
        result = SimulationEngine.seeded(3, hours=6).run()
        assert len(result.frames) == 6

    def test_initial_soc(self):
        result = SimulationEngine.seeded(3, initial_soc=25.0).run()
        # Below 30% from the start, so the battery is never used
        assert all(f.mode is PowerMode.DIESEL_ONLY for f in result.frames)
        assert all(f.battery_soc == 25.0 for f in result.frames)


class TestEngineGuards:

    @pytest.mark.parametrize("soc", [10.0, 19.9, 90.1, 100.0])
    def test_initial_soc_outside_window(self, soc):
        with pytest.raises(DomainError, match="initial_soc"):
            SimulationEngine(initial_soc=soc)

    def test_zero_hours(self):
        with pytest.raises(DomainError, match="hours"):
            SimulationEngine(hours=0)


class TestNextSoc:

    @pytest.fixture
    def sim(self):
        return SimulationEngine(rng=FixedRng())

    def test_discharge_at_nominal_power(self, sim):
        rec = _recommendation(PowerMode.HYBRID_50_50, 8000, 4000, 4000)
        assert sim.next_soc(50.0, rec) == pytest.approx(40.0)

    def test_discharge_scales_with_power(self, sim):
        rec = _recommendation(PowerMode.HYBRID_25_75, 8000, 2000, 6000)
        assert sim.next_soc(50.0, rec) == pytest.approx(35.0)

    def test_discharge_floored(self, sim):
        rec = _recommendation(PowerMode.HYBRID_50_50, 8000, 4000, 4000)
        assert sim.next_soc(25.0, rec) == 20.0

    def test_diesel_only_holds(self, sim):
        rec = _recommendation(PowerMode.DIESEL_ONLY, 8000, 8000, 0)
        assert sim.next_soc(42.0, rec) == 42.0

    def test_excess_diesel_charges(self, sim):
        rec = _recommendation(PowerMode.DIESEL_ONLY, 8000, 9000, 0)
        assert sim.next_soc(60.0, rec) == 65.0

    def test_charge_capped(self, sim):
        rec = _recommendation(PowerMode.DIESEL_ONLY, 8000, 9000, 0)
        assert sim.next_soc(88.0, rec) == 90.0
