"""
Fleet demo - builds the sample company fleet, prints it and its total value,
then prints line statistics for a source file (this script by default).

Logger selection comes from the environment, see LoggerFactory.from_environment.
"""

import logging
import sys

from fleet_lib import CodeLineCounter, Fleet, LoggerFactory, demo_vehicles
from fleet_lib.vehicles import format_number


def run_demo(logger, source_file):
    """Print the fleet report and the code analysis; returns the exit code"""
    with Fleet(logger) as company_fleet:
        for vehicle in demo_vehicles():
            company_fleet.add_vehicle(vehicle)

        print(company_fleet.display_fleet())
        print(f"\nTotal fleet value: ${format_number(company_fleet.calculate_total_value())}")

    try:
        counts = CodeLineCounter.analyze(source_file)
    except OSError as e:
        logging.error(f"Code analysis failed: {e}")
        return 1

    print()
    print(counts.report())
    return 0


def main(argv=None):
    """Run the demo; returns the process exit code"""
    argv = sys.argv[1:] if argv is None else argv
    source_file = argv[0] if argv else __file__

    logger = LoggerFactory.from_environment()
    try:
        return run_demo(logger, source_file)
    finally:
        close = getattr(logger, 'close', None)
        if close:
            close()


if __name__ == "__main__":
    sys.exit(main())
