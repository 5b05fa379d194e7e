"""
Tests for the rule-based power split advisor.

Covers:
- Each rule of the cascade and the default split
- First-match-wins ordering
- Preset scenario outcomes
- Power split, fuel and efficiency fields of a recommendation
"""

import pytest

from rorohybrid.advisor.decision import (
    DECISION_RULES,
    DEFAULT_RULE_NAME,
    DecisionEngine,
    PowerMode,
)
from rorohybrid.errors import UnknownScenarioError
from rorohybrid.models.conditions import round_fixed, round_half_up
from rorohybrid.models.fuel import FuelModel
from rorohybrid.models.resistance import ResistancePowerModel


class TestPowerMode:

    @pytest.mark.parametrize("mode,diesel", [
        (PowerMode.ELECTRIC_ONLY, 0.0),
        (PowerMode.DIESEL_ONLY, 1.0),
        (PowerMode.HYBRID_75_25, 0.75),
        (PowerMode.HYBRID_50_50, 0.5),
        (PowerMode.HYBRID_25_75, 0.25),
    ])
    def test_ratios(self, mode, diesel):
        assert mode.diesel_ratio == diesel
        assert mode.diesel_ratio + mode.electric_ratio == pytest.approx(1.0)

    def test_labels(self):
        assert PowerMode.HYBRID_75_25.label_en == "Hybrid 75-25"
        assert PowerMode.ELECTRIC_ONLY.label_ar == "كهرباء فقط"
        assert all(mode.label_ar for mode in PowerMode)


class TestRuleCascade:

    def test_rule_table_order(self):
        assert [r.name for r in DECISION_RULES] == [
            "low_speed_charged_battery",
            "high_speed_or_low_battery",
            "heavy_weather",
            "laden_at_speed",
            "charged_battery_calm_sea",
        ]

    @pytest.mark.parametrize("overrides,rule,mode", [
        (dict(speed=10.0, battery=70.0), "low_speed_charged_battery", PowerMode.ELECTRIC_ONLY),
        (dict(speed=19.0, battery=80.0), "high_speed_or_low_battery", PowerMode.DIESEL_ONLY),
        (dict(speed=11.0, battery=20.0), "high_speed_or_low_battery", PowerMode.DIESEL_ONLY),
        (dict(sea_state=5), "heavy_weather", PowerMode.HYBRID_75_25),
        (dict(wave=3.5), "heavy_weather", PowerMode.HYBRID_75_25),
        (dict(cargo=75.0, speed=15.0), "laden_at_speed", PowerMode.HYBRID_50_50),
        (dict(battery=70.0, sea_state=2), "charged_battery_calm_sea", PowerMode.HYBRID_25_75),
        (dict(), DEFAULT_RULE_NAME, PowerMode.HYBRID_50_50),
    ])
    def test_each_rule(self, engine, conditions_factory, overrides, rule, mode):
        assert engine.select_mode(conditions_factory(**overrides)) == (rule, mode)

    def test_threshold_edges_do_not_fire(self, engine, conditions_factory):
        # speed 12 is not < 12, battery 30 is not < 30, wave 3 is not > 3
        c = conditions_factory(speed=12.0, battery=30.0, wave=3.0)
        assert engine.select_mode(c)[0] == DEFAULT_RULE_NAME

    def test_low_speed_beats_heavy_weather(self, engine, conditions_factory):
        c = conditions_factory(speed=10.0, battery=70.0, sea_state=6)
        assert engine.select_mode(c)[1] is PowerMode.ELECTRIC_ONLY

    def test_first_match_wins(self, conditions_factory):
        """Two rules match; reversing the table flips the outcome."""
        c = conditions_factory(speed=16.0, cargo=80.0, battery=70.0, sea_state=2, wave=1.0)

        forward = DecisionEngine()
        backward = DecisionEngine(rules=tuple(reversed(DECISION_RULES)))

        assert forward.select_mode(c)[1] is PowerMode.HYBRID_50_50
        assert backward.select_mode(c)[1] is PowerMode.HYBRID_25_75

    def test_empty_table_uses_default(self, cruise):
        engine = DecisionEngine(rules=(), default_mode=PowerMode.DIESEL_ONLY)
        assert engine.select_mode(cruise) == (DEFAULT_RULE_NAME, PowerMode.DIESEL_ONLY)


class TestPresetScenarios:

    @pytest.mark.parametrize("name,mode", [
        ("port", PowerMode.ELECTRIC_ONLY),
        ("cruise", PowerMode.HYBRID_50_50),
        ("rough", PowerMode.HYBRID_75_25),
        ("charging", PowerMode.DIESEL_ONLY),
    ])
    def test_preset_modes(self, engine, name, mode):
        assert engine.recommend_scenario(name).mode is mode

    def test_cruise_is_laden_at_speed(self, engine):
        assert engine.recommend_scenario("cruise").rule == "laden_at_speed"

    def test_unknown_preset(self, engine):
        with pytest.raises(UnknownScenarioError):
            engine.recommend_scenario("anchorage")


class TestRecommendation:

    def test_cruise_split(self, engine, cruise):
        total = ResistancePowerModel().compute_required_power(cruise)
        rec = engine.recommend(cruise)

        assert rec.total_power_kw == round_half_up(total)
        assert rec.diesel_power_kw == round_half_up(total * 0.5)
        assert rec.electric_power_kw == round_half_up(total * 0.5)
        assert rec.diesel_share_percent == 50
        assert rec.electric_share_percent == 50

    def test_cruise_fuel(self, engine, cruise):
        rec = engine.recommend(cruise)
        sfoc = FuelModel.sfoc_for_load(rec.diesel_power_kw / FuelModel.MCR_KW * 100)

        assert rec.sfoc_g_per_kwh == sfoc == 180.0
        assert rec.fuel_tons_per_hour == round_fixed(rec.diesel_power_kw * sfoc / 1e6, 2)

    @pytest.mark.parametrize("name", ["port", "cruise", "rough", "charging"])
    def test_split_adds_up(self, engine, name):
        rec = engine.recommend_scenario(name)
        assert abs(rec.diesel_power_kw + rec.electric_power_kw - rec.total_power_kw) <= 1
        assert rec.diesel_ratio + rec.electric_ratio == pytest.approx(1.0)

    def test_electric_only_burns_no_fuel(self, engine):
        rec = engine.recommend_scenario("port")
        assert rec.diesel_power_kw == 0
        assert rec.fuel_tons_per_hour == 0.0
        assert rec.fuel_savings_percent == 100

    def test_diesel_only_has_no_savings(self, engine):
        rec = engine.recommend_scenario("charging")
        assert rec.electric_power_kw == 0
        assert rec.fuel_savings_percent == 0
        assert rec.battery_utilization_percent == 0
        assert rec.system_efficiency_percent == 42

    def test_fuel_rounded_to_two_places(self, engine, conditions_factory):
        rec = engine.recommend(conditions_factory())
        assert rec.fuel_tons_per_hour == round(rec.fuel_tons_per_hour, 2)

    def test_to_dict(self, engine, cruise):
        data = engine.recommend(cruise).to_dict()
        assert data["mode"] == "Hybrid 50-50"
        assert data["mode_ar"] == "هجين 50-50"
        assert data["rule"] == "laden_at_speed"
        assert {"total_power_kw", "fuel_tons_per_hour", "system_efficiency_percent"} <= set(data)


class FixedPowerModel:
    """Power model returning a fixed requirement."""

    def __init__(self, power_kw):
        self.power_kw = power_kw

    def compute_required_power(self, conditions):
        return self.power_kw


class TestFuelRounding:

    def test_tie_rounds_up(self, cruise):
        """6250 kW at 180 g/kWh burns exactly 1.125 t/h, reported as 1.13."""
        engine = DecisionEngine(
            power_model=FixedPowerModel(6250.0), rules=(), default_mode=PowerMode.DIESEL_ONLY,
        )
        rec = engine.recommend(cruise)

        assert rec.diesel_power_kw == 6250
        assert rec.sfoc_g_per_kwh == 180.0
        assert rec.fuel_tons_per_hour == 1.13

    def test_below_tie_rounds_down(self, cruise):
        engine = DecisionEngine(
            power_model=FixedPowerModel(6200.0), rules=(), default_mode=PowerMode.DIESEL_ONLY,
        )
        # 6200 * 180 / 1e6 = 1.116
        assert engine.recommend(cruise).fuel_tons_per_hour == 1.12


@pytest.mark.parametrize("snapshot,mode", [
    (dict(speed=10, battery=50), PowerMode.ELECTRIC_ONLY),
    (dict(speed=20, battery=50), PowerMode.DIESEL_ONLY),
    (dict(speed=16, sea_state=6, wave=1, battery=50), PowerMode.HYBRID_75_25),
    (dict(speed=16, cargo=80, sea_state=3, battery=50, wave=1), PowerMode.HYBRID_50_50),
    (dict(speed=16, battery=70, sea_state=2, cargo=50, wave=1), PowerMode.HYBRID_25_75),
])
def test_documented_cascade_examples(engine, conditions_factory, snapshot, mode):
    assert engine.recommend(conditions_factory(**snapshot)).mode is mode
