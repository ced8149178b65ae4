# scripts/run_analysis.py
"""
Aerodynamic Coefficient Runner
==============================

Evaluates the coefficient models over a recorded flight-state history.

    python scripts/run_analysis.py --history data/sample_approach.csv --xlsx --plot
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Setup project path directly
current_file = Path(__file__).resolve()
project_root = current_file.parent.parent  # scripts/ -> project_root/
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from common.flight_history import FlightHistory
from common.terminal_formatting import success, error, info, warning, set_emoji_enabled
from config import AeroModelConfig, LiftConstants
from calculators.lift_coefficient import LiftCoefficientModel
from calculators.schedule import CoefficientSchedule
from calculators.time_history import TimeHistoryCalculator, TimeHistoryResults


class RunAnalysis:
    """Main runner for coefficient time-history evaluation."""

    def __init__(self):
        self.history = None
        self.output_dir = None

    def setup_output_directory(self, custom_output: Optional[str] = None) -> Path:
        """Setup output directory."""
        if custom_output:
            output_dir = Path(custom_output).resolve()
        else:
            output_dir = (project_root / "analysis_results").resolve()

        output_dir.mkdir(parents=True, exist_ok=True)
        self.output_dir = output_dir
        return output_dir

    def build_config(self, args) -> AeroModelConfig:
        """Create the master configuration from command line arguments."""
        return AeroModelConfig(
            aircraft_name=args.name,
            lift_constants=LiftConstants(bias=args.bias),
        )

    def build_schedule(self, config: AeroModelConfig) -> CoefficientSchedule:
        """Models in evaluation order."""
        lift = LiftCoefficientModel(constants=config.lift_constants, tables=config.lift_tables)
        return CoefficientSchedule([lift], external_inputs=config.external_inputs)

    def command_line_mode(self, args) -> int:
        """Run analysis from command line arguments."""
        print("=" * 70)
        print(" AERODYNAMIC COEFFICIENT ANALYSIS")
        print("=" * 70)

        # Load flight history
        try:
            self.history = FlightHistory.from_csv(args.history)
            print(success(f"Flight history loaded: {self.history}"))
        except Exception as e:
            print(error(f"Failed to load flight history: {e}"))
            return 1

        # Create config and schedule
        try:
            config = self.build_config(args)
            schedule = self.build_schedule(config)
            print(success(f"Configuration created: {schedule}"))
        except Exception as e:
            print(error(f"Failed to create configuration: {e}"))
            return 1

        missing = [k for k in config.external_inputs if k not in self.history.external_inputs]
        if missing:
            print(error(f"Flight history lacks external input columns: {', '.join(missing)}"))
            return 1

        if args.verbose:
            print()
            print(config.get_analysis_description())
            print()

        envelope = []
        for model in schedule:
            if hasattr(model, 'envelope'):
                envelope.extend(model.envelope())

        results = TimeHistoryCalculator(schedule, envelope=envelope).calculate(self.history)
        self.print_results_summary(results)

        if args.xlsx or args.plot:
            self.setup_output_directory(args.output)

        if args.xlsx:
            from reporting.excel import export_time_history_xlsx
            path = export_time_history_xlsx(
                self.output_dir / f"{config.aircraft_name}_coefficients.xlsx", config, results
            )
            print(success(f"Results exported: {path}"))

        if args.plot:
            import matplotlib.pyplot as plt
            from visualization.lift_breakdown_plotter import plot_lift_breakdown
            fig = plot_lift_breakdown(results, config.aircraft_name, output_dir=self.output_dir)
            plt.close(fig)

        return 0

    @staticmethod
    def print_results_summary(results: TimeHistoryResults):
        """Print summary of the evaluated history."""
        print(f"\nRESULTS SUMMARY")
        print("=" * 30)
        print(f"Steps evaluated: {results.n_steps}")
        for key, stats in results.statistics.items():
            print(f"  {key:10}: {stats['min']:8.4f} to {stats['max']:8.4f} (avg: {stats['mean']:8.4f})")

        if results.n_out_of_envelope:
            print(warning(f"{results.n_out_of_envelope} steps outside the tabulated data range (clamped)"))
        else:
            print(info("All steps within the tabulated data range"))


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Evaluate aerodynamic coefficients over a flight-state history.")
    p.add_argument("--history", required=True, help="CSV with a time column and flight-state columns.")
    p.add_argument("--name", default="Aircraft", help="Aircraft name used in reports.")
    p.add_argument("--output", default=None, help="Output directory (default: analysis_results/).")
    p.add_argument("--bias", type=float, default=0.0, help="Constant lift bias for data matching.")
    p.add_argument("--xlsx", action="store_true", help="Export results to Excel.")
    p.add_argument("--plot", action="store_true", help="Save lift breakdown plot.")
    p.add_argument("--no-emoji", action="store_true", help="ASCII status prefixes.")
    p.add_argument("--verbose", action="store_true", help="Print the configuration description.")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.no_emoji:
        set_emoji_enabled(False)
    return RunAnalysis().command_line_mode(args)


if __name__ == "__main__":
    sys.exit(main())
