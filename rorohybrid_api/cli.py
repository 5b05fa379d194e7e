#!/usr/bin/env python3
"""
RoRo Hybrid Advisor CLI Tool.

Command-line interface for the advisor engine:
- Power split recommendation for given conditions or a preset scenario
- 24-hour voyage simulation with baseline comparison
- Baseline comparison for a daily fuel figure
- Preset scenario listing

Usage:
    python -m rorohybrid_api.cli recommend --speed 17 --sea-state 3 --battery 50
    python -m rorohybrid_api.cli recommend --scenario port
    python -m rorohybrid_api.cli simulate --seed 42
    python -m rorohybrid_api.cli compare --ai-fuel 28.5
    python -m rorohybrid_api.cli scenarios
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from rorohybrid.advisor.comparison import ComparisonEngine, ComparisonResult
from rorohybrid.advisor.decision import DecisionEngine, Recommendation
from rorohybrid.advisor.scenarios import DEFAULT_CONDITIONS, PRESET_SCENARIOS, get_scenario
from rorohybrid.advisor.simulation import SimulationEngine
from rorohybrid.config import settings
from rorohybrid.errors import DomainError, UnknownScenarioError
from rorohybrid.metrics import metrics
from rorohybrid.models.conditions import SEA_STATE_DESCRIPTIONS, OperatingConditions

logger = logging.getLogger(__name__)


def _comparison_engine() -> ComparisonEngine:
    return ComparisonEngine(
        fuel_price_usd_per_ton=settings.fuel_price_usd_per_ton,
        voyage_days_per_year=settings.voyage_days_per_year,
    )


def print_recommendation(conditions: OperatingConditions, rec: Recommendation) -> None:
    print("\n" + "=" * 60)
    print("POWER SPLIT RECOMMENDATION")
    print("=" * 60)
    print(
        f"\nConditions: {conditions.speed:g} kts, sea state {conditions.sea_state} "
        f"({conditions.sea_state_description}), cargo {conditions.cargo:g}%, "
        f"wind {conditions.wind:g} m/s, wave {conditions.wave:g} m, "
        f"battery {conditions.battery:g}%"
    )
    print(f"\nMode: {rec.mode.label_en} | {rec.mode.label_ar}  (rule: {rec.rule})")
    print(f"Total power:    {rec.total_power_kw:>8,} kW")
    print(f"Diesel power:   {rec.diesel_power_kw:>8,} kW ({rec.diesel_share_percent}%)")
    print(f"Electric power: {rec.electric_power_kw:>8,} kW ({rec.electric_share_percent}%)")
    print(f"Fuel:           {rec.fuel_tons_per_hour:>8.2f} t/h")
    print(f"SFOC:           {rec.sfoc_g_per_kwh:>8g} g/kWh")
    print(f"Engine load:    {rec.engine_load_percent:>8}%")
    print(f"\nFuel savings:        {rec.fuel_savings_percent}%")
    print(f"Battery utilization: {rec.battery_utilization_percent}%")
    print(f"System efficiency:   {rec.system_efficiency_percent}%")
    print("=" * 60 + "\n")


def print_comparison(comparison: ComparisonResult) -> None:
    print(f"\n{'Scenario':<20} {'Fuel (t)':>10} {'CO2 (t)':>10} {'Cost (USD)':>14} {'Eff.':>6}")
    print("-" * 64)
    for scenario in comparison.scenarios.values():
        print(
            f"{scenario.name.value:<20} "
            f"{scenario.fuel_tons:>10.2f} "
            f"{scenario.co2_tons:>10.2f} "
            f"{scenario.cost_usd:>14,.0f} "
            f"{scenario.efficiency_percent:>5}%"
        )
    s = comparison.savings
    print("-" * 64)
    print(
        f"Daily savings:  {s.daily_fuel_savings_tons:.2f} t "
        f"({s.daily_fuel_savings_percent:.1f}%)"
    )
    print(f"Annual savings: {s.annual_fuel_savings_tons:.1f} t/year")
    print(f"CO2 reduction:  {s.annual_co2_reduction_tons:.1f} t CO2/year")
    print(f"Cost savings:   ${s.annual_cost_savings_usd:,.0f}/year\n")


def recommend(args: argparse.Namespace) -> None:
    """Recommend a power split."""
    if args.scenario:
        conditions = get_scenario(args.scenario)
    else:
        conditions = OperatingConditions(
            speed=args.speed,
            sea_state=args.sea_state,
            cargo=args.cargo,
            wind=args.wind,
            wave=args.wave,
            battery=args.battery,
        )

    with metrics.timer("recommendation"):
        rec = DecisionEngine().recommend(conditions)

    if args.json:
        print(json.dumps({"conditions": conditions.to_dict(), "recommendation": rec.to_dict()}, indent=2))
    else:
        print_recommendation(conditions, rec)


def simulate(args: argparse.Namespace) -> None:
    """Run the 24-hour simulation and baseline comparison."""
    seed = args.seed if args.seed is not None else settings.sim_seed
    kwargs = {"hours": settings.sim_hours, "initial_soc": args.initial_soc}
    engine = (
        SimulationEngine.seeded(seed, **kwargs) if seed is not None
        else SimulationEngine(**kwargs)
    )

    with metrics.timer("simulation_run"):
        result = engine.run()
        comparison = _comparison_engine().compare(result.summary)

    if args.json:
        print(json.dumps({
            "seed": seed,
            "hourly": [frame.to_dict() for frame in result.frames],
            "summary": result.summary.to_dict(),
            "comparison": comparison.to_dict(),
        }, indent=2))
        return

    print("\n" + "=" * 76)
    print("24-HOUR VOYAGE SIMULATION" + (f" (seed {seed})" if seed is not None else ""))
    print("=" * 76)
    print(f"{'Hour':<6} {'Mode':<14} {'Diesel kW':>10} {'Electric kW':>12} {'Fuel t':>8} {'SoC %':>7} {'Cum. t':>8}")
    print("-" * 76)
    for frame in result.frames:
        print(
            f"{frame.hour:<6} "
            f"{frame.mode.label_en:<14} "
            f"{frame.diesel_power_kw:>10,} "
            f"{frame.electric_power_kw:>12,} "
            f"{frame.fuel_tons:>8.2f} "
            f"{frame.battery_soc:>7.1f} "
            f"{frame.cumulative_fuel_tons:>8.2f}"
        )
    print("-" * 76)
    summary = result.summary
    print(f"Total fuel:      {summary.total_fuel_tons:.2f} t")
    print(f"Average SoC:     {summary.average_battery_soc:.1f}%")
    print(f"CO2 (kg/day):    {summary.co2_reduction_kg:,.0f}")
    print_comparison(comparison)


def compare(args: argparse.Namespace) -> None:
    """Compare a daily fuel figure against the baselines."""
    comparison = _comparison_engine().compare_fuel(args.ai_fuel)
    if args.json:
        print(json.dumps(comparison.to_dict(), indent=2))
    else:
        print_comparison(comparison)


def list_scenarios(args: argparse.Namespace) -> None:
    """List preset scenarios."""
    print(f"\n{'Name':<10} {'Speed':>6} {'Sea':>4} {'Cargo':>6} {'Wind':>6} {'Wave':>6} {'Batt.':>6}")
    print("-" * 50)
    for name, c in PRESET_SCENARIOS.items():
        print(
            f"{name:<10} {c.speed:>6g} {c.sea_state:>4} {c.cargo:>6g} "
            f"{c.wind:>6g} {c.wave:>6g} {c.battery:>6g}"
        )
    print("\nSea states: " + ", ".join(f"{k} {v}" for k, v in SEA_STATE_DESCRIPTIONS.items()) + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="RoRo Hybrid Advisor CLI Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Recommend for explicit conditions:
    python -m rorohybrid_api.cli recommend --speed 16 --sea-state 2 --cargo 50 --battery 70

  Recommend for a preset scenario:
    python -m rorohybrid_api.cli recommend --scenario rough

  Reproducible simulation:
    python -m rorohybrid_api.cli simulate --seed 7

  Baseline comparison:
    python -m rorohybrid_api.cli compare --ai-fuel 28.5
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # recommend
    rec_parser = subparsers.add_parser("recommend", help="Recommend a power split")
    rec_parser.add_argument("--scenario", choices=sorted(PRESET_SCENARIOS), help="Preset scenario")
    rec_parser.add_argument("--speed", type=float, default=DEFAULT_CONDITIONS.speed, help="Speed (knots)")
    rec_parser.add_argument("--sea-state", type=int, default=DEFAULT_CONDITIONS.sea_state, help="Douglas sea state (1-7)")
    rec_parser.add_argument("--cargo", type=float, default=DEFAULT_CONDITIONS.cargo, help="Cargo load (%%)")
    rec_parser.add_argument("--wind", type=float, default=DEFAULT_CONDITIONS.wind, help="Wind speed (m/s)")
    rec_parser.add_argument("--wave", type=float, default=DEFAULT_CONDITIONS.wave, help="Wave height (m)")
    rec_parser.add_argument("--battery", type=float, default=DEFAULT_CONDITIONS.battery, help="Battery SoC (%%)")
    rec_parser.add_argument("--json", action="store_true", help="Print JSON")

    # simulate
    sim_parser = subparsers.add_parser("simulate", help="Run the 24-hour simulation")
    sim_parser.add_argument("--seed", type=int, help="Seed for reproducible sea-state jitter")
    sim_parser.add_argument(
        "--initial-soc",
        type=float,
        default=settings.sim_initial_soc,
        help="Battery SoC at hour 0 (%%, default: %(default)s)"
    )
    sim_parser.add_argument("--json", action="store_true", help="Print JSON")

    # compare
    cmp_parser = subparsers.add_parser("compare", help="Compare a daily fuel figure against baselines")
    cmp_parser.add_argument("--ai-fuel", type=float, required=True, help="Daily fuel under the advisor (t)")
    cmp_parser.add_argument("--json", action="store_true", help="Print JSON")

    # scenarios
    subparsers.add_parser("scenarios", help="List preset scenarios")

    return parser


COMMANDS = {
    "recommend": recommend,
    "simulate": simulate,
    "compare": compare,
    "scenarios": list_scenarios,
}


def main(argv: Optional[List[str]] = None) -> int:
    settings.configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        handler(args)
    except (DomainError, UnknownScenarioError) as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"\nError: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
