"""Charge-rate Command Line Interface.

Provides tools for:
- Calculating a charge rate from a base pay rate
- Showing the default configurations
- Pricing the default year 1-4 apprentice profiles
- Running the HTTP API

Usage:
    python -m charge_rate_engine calculate --pay-rate 29.50
    python -m charge_rate_engine calculate --pay-rate 29.50 --include-sick-leave --json
    python -m charge_rate_engine defaults
    python -m charge_rate_engine profiles
    python -m charge_rate_engine serve
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, replace
from typing import Any, Callable

from charge_rate_engine.calculators.batch import BatchCalculator
from charge_rate_engine.calculators.engine import calculate_charge_rate
from charge_rate_engine.calculators.errors import (
    ChargeRateError,
    InvalidConfigurationError,
)
from charge_rate_engine.calculators.types import (
    BillableOptions,
    CalculationResult,
    default_billable_options,
    default_cost_config,
    default_work_config,
)
from charge_rate_engine.config import configure_logging, get_settings
from charge_rate_engine.formatting import format_currency, format_hours, format_percent
from charge_rate_engine.profiles import default_apprentice_profiles

# Exit code for user-correctable input errors
EXIT_INPUT_ERROR = 2

ONCOST_LABELS = {
    "superannuation": "Superannuation",
    "workers_comp": "Workers' compensation",
    "payroll_tax": "Payroll tax",
    "leave_loading": "Leave loading",
    "study_cost": "Study cost",
    "ppe_cost": "PPE cost",
    "admin_cost": "Admin overhead",
}


def parse_non_negative(s: str) -> float:
    """Parse a non-negative number."""
    value = float(s)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {s}")
    return value


class ChargeRateCli:
    """Charge-rate Command Line Interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="charge-rate",
            description="Apprentice charge rate calculator",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            help="Logging level (default: LOG_LEVEL env var or INFO)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # calculate command
        calc = subparsers.add_parser(
            "calculate",
            help="Calculate the charge rate for a base pay rate",
        )
        calc.add_argument(
            "--pay-rate",
            type=parse_non_negative,
            required=True,
            help="Base hourly pay rate in dollars",
        )
        calc.add_argument(
            "--margin",
            type=parse_non_negative,
            help="Profit margin as a fraction (default: cost config default margin)",
        )
        calc.add_argument(
            "--admin-rate",
            type=parse_non_negative,
            help="Admin overhead rate as a fraction",
        )
        for flag, category in [
            ("--include-annual-leave", "annual leave"),
            ("--include-public-holidays", "public holidays"),
            ("--include-sick-leave", "sick leave"),
            ("--include-training-time", "training time"),
            ("--include-adverse-weather", "adverse weather days"),
        ]:
            calc.add_argument(
                flag,
                action="store_true",
                help=f"Count {category} as billable time",
            )
        calc.add_argument(
            "--json",
            action="store_true",
            help="Output the full result as JSON",
        )

        # defaults command
        defaults = subparsers.add_parser(
            "defaults",
            help="Show the default configurations",
        )
        defaults.add_argument(
            "--json",
            action="store_true",
            help="Output as JSON",
        )

        # profiles command
        profiles = subparsers.add_parser(
            "profiles",
            help="Calculate the default year 1-4 apprentice profiles",
        )
        profiles.add_argument(
            "--json",
            action="store_true",
            help="Output as JSON",
        )

        # serve command
        subparsers.add_parser(
            "serve",
            help="Run the HTTP API",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 1

        configure_logging(parsed.log_level)

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "calculate": self._cmd_calculate,
            "defaults": self._cmd_defaults,
            "profiles": self._cmd_profiles,
            "serve": self._cmd_serve,
        }

        handler = handlers.get(parsed.command)
        if handler:
            return handler(parsed)

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return 1

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Calculate a single charge rate."""
        cost = default_cost_config()
        if args.admin_rate is not None:
            cost = replace(cost, admin_rate=args.admin_rate)

        options = BillableOptions(
            include_annual_leave=args.include_annual_leave,
            include_public_holidays=args.include_public_holidays,
            include_sick_leave=args.include_sick_leave,
            include_training_time=args.include_training_time,
            include_adverse_weather=args.include_adverse_weather,
        )

        try:
            result = calculate_charge_rate(
                args.pay_rate, default_work_config(), cost, options, args.margin
            )
        except InvalidConfigurationError as e:
            print("Invalid configuration:", file=sys.stderr)
            for error in e.errors:
                print(f"  - {error}", file=sys.stderr)
            return EXIT_INPUT_ERROR
        except ChargeRateError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_INPUT_ERROR

        if args.json:
            print(json.dumps(result.as_dict(), indent=2))
        else:
            self._print_result(result)
        return 0

    def _cmd_defaults(self, args: argparse.Namespace) -> int:
        """Show default configurations."""
        data: dict[str, dict[str, Any]] = {
            "cost_config": asdict(default_cost_config()),
            "work_config": asdict(default_work_config()),
            "billable_options": asdict(default_billable_options()),
        }

        if args.json:
            print(json.dumps(data, indent=2))
            return 0

        for section, values in data.items():
            print(section)
            for key, value in values.items():
                print(f"  {key}: {value}")
        return 0

    def _cmd_profiles(self, args: argparse.Namespace) -> int:
        """Calculate the default apprentice profiles."""
        calculator = BatchCalculator()
        profiles = default_apprentice_profiles()
        batch = calculator.calculate_all(profiles)

        if args.json:
            output = {
                profile_id: {
                    "calculation_id": str(calc.calculation_id) if calc.calculation_id else None,
                    "result": calc.result.as_dict() if calc.result else None,
                    "errors": calc.errors,
                }
                for profile_id, calc in batch.calculations.items()
            }
            print(json.dumps(output, indent=2))
            return 0 if batch.error_count == 0 else EXIT_INPUT_ERROR

        print(f"{'Apprentice':<20} {'Pay rate':>10} {'Cost/hr':>10} {'Charge rate':>12}")
        print("-" * 55)
        for profile in profiles:
            calc = batch.calculations[profile.id]
            if calc.result is None:
                print(f"{profile.name:<20} ERROR: {'; '.join(calc.errors)}")
                continue
            print(
                f"{profile.name:<20} "
                f"{format_currency(calc.result.pay_rate):>10} "
                f"{format_currency(calc.result.cost_per_hour):>10} "
                f"{format_currency(calc.result.charge_rate):>12}"
            )
        return 0 if batch.error_count == 0 else EXIT_INPUT_ERROR

    def _cmd_serve(self, args: argparse.Namespace) -> int:
        """Run the API with uvicorn."""
        import uvicorn

        settings = get_settings()
        uvicorn.run(
            "charge_rate_engine.api.app:app",
            host=settings.host,
            port=settings.port,
            reload=settings.debug,
        )
        return 0

    def _print_result(self, result: CalculationResult) -> None:
        """Print a formatted calculation breakdown."""
        print("Charge Rate Calculation")
        print("=" * 40)
        print(f"Pay rate:        {format_currency(result.pay_rate)}/hr")
        print(f"Total hours:     {format_hours(result.total_hours)}")
        print(f"Billable hours:  {format_hours(result.billable_hours)}")
        print(f"Base wage:       {format_currency(result.base_wage)}")
        print("\nOn-costs:")
        for key, value in result.oncosts.as_dict().items():
            print(f"  {ONCOST_LABELS[key]:<22} {format_currency(value):>12}")
        print(f"  {'Total on-costs':<22} {format_currency(result.total_oncosts):>12}")
        print(f"\nTotal cost:      {format_currency(result.total_cost)}")
        print(f"Cost per hour:   {format_currency(result.cost_per_hour)}")
        print(f"Margin:          {format_percent(result.margin)}")
        print("=" * 40)
        print(f"Charge rate:     {format_currency(result.charge_rate)}/hr")


def main() -> int:
    """CLI entry point."""
    cli = ChargeRateCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
