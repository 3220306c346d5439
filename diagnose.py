#!/usr/bin/env python3
"""
CLI for running car diagnostics.

Loads one or more car YAML files, runs the diagnostic checks on each and
prints the findings followed by a one-line summary.

Exit status: 0 if every car is clean, 1 if any car needs attention,
2 if any file could not be diagnosed at all.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import yaml
from tabulate import tabulate

from models import (
    Car,
    DamagedPart,
    DiagnosticStage,
    Finding,
    InvalidInput,
    MissingField,
    MissingPart,
    Verdict,
    evaluate,
    load_car,
    summarize,
)
from validate_yaml import load_schema, validate_vehicle_file

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_NEEDS_ATTENTION = 1
EXIT_ERROR = 2

BANNER = "Welcome to the Car Diagnostic Center"

STEP_LABELS = {
    DiagnosticStage.FIELD_CHECK: "Checking car data fields",
    DiagnosticStage.PART_PRESENCE_CHECK: "Checking for missing parts",
    DiagnosticStage.CONDITION_CHECK: "Checking that all parts are working",
}

# =============================================================================
# Formatting helpers
# =============================================================================


def format_finding(finding: Finding) -> str:
    """Render a finding as a console line."""
    if isinstance(finding, MissingField):
        return f"Missing Car data field Detected: {finding.name}"
    if isinstance(finding, MissingPart):
        return f"Missing Part(s) Detected: {finding.category} - Count: {finding.count}"
    if isinstance(finding, DamagedPart):
        return (
            f"Damaged Part Detected: {finding.category} - Condition: {finding.condition}"
        )
    raise TypeError(f"Unknown finding: {finding!r}")


def make_findings_table(findings: List[Finding]) -> List[List[str]]:
    """Convert findings to table rows: step, item, detail."""
    rows = []
    for finding in findings:
        if isinstance(finding, MissingField):
            item, detail = finding.name, "missing"
        elif isinstance(finding, MissingPart):
            item, detail = str(finding.category), f"{finding.count} missing"
        else:
            item, detail = str(finding.category), str(finding.condition)
        rows.append([finding.stage.value, item, detail])
    return rows


def print_banner():
    rule = "=" * 61
    print(rule)
    print(BANNER.center(61).rstrip())
    print(rule)


def print_steps(failed_stage: Optional[DiagnosticStage]):
    """Print which steps ran and which were skipped."""
    skipping = False
    for stage, label in STEP_LABELS.items():
        marker = ">" * stage.value
        if skipping:
            print(f"{marker}Step {stage.value} ... {label} ... skipped")
            continue
        print(f"{marker}Step {stage.value} ... {label} ... complete")
        if stage == failed_stage:
            skipping = True


# =============================================================================
# Diagnose command
# =============================================================================


def load_for_diagnosis(path: Path, schema: Optional[dict]) -> Optional[Car]:
    """Load a car file, validating it first if a schema is given."""
    if schema is not None:
        errors = validate_vehicle_file(path, schema)
        if errors:
            raise ValueError("; ".join(e.strip() for e in errors))
    return load_car(path)


def diagnose_file(
    path: Path, schema: Optional[dict] = None, today: Optional[date] = None
) -> int:
    """Diagnose one car file and print the report. Returns an exit code."""
    print(f"Car file: {path}")

    if not path.exists():
        print(f"Error: File not found: {path}")
        return EXIT_ERROR

    try:
        car = load_for_diagnosis(path, schema)
        diagnosis = evaluate(car)
    except InvalidInput as e:
        print(f"Error: {path} has no car record ({e})")
        return EXIT_ERROR
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.debug("Failed to load %s", path, exc_info=True)
        print(f"Error: {e}")
        return EXIT_ERROR

    print("Starting diagnostic process")
    print_steps(diagnosis.failed_stage)
    print()

    if diagnosis.findings:
        for finding in diagnosis.findings:
            print(format_finding(finding))
        print()
        headers = ["Step", "Item", "Detail"]
        print(
            tabulate(
                make_findings_table(diagnosis.findings),
                headers=headers,
                tablefmt="simple",
            )
        )
        print()

    print(summarize(car, diagnosis.verdict, on=today))

    if diagnosis.verdict == Verdict.CLEAN:
        return EXIT_CLEAN
    return EXIT_NEEDS_ATTENTION


# =============================================================================
# Main
# =============================================================================


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Car diagnostic checks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s vehicles/sample_car.yaml
  %(prog)s vehicles/*.yaml --validate
  %(prog)s vehicles/sample_car.yaml --verbose
""",
    )
    parser.add_argument(
        "car_files",
        type=Path,
        nargs="+",
        metavar="car_file",
        help="Path to car YAML file",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate each file against schema.yaml before diagnosing",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each diagnostic step",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s [%(name)s] %(message)s",
    )

    schema = load_schema() if args.validate else None

    print_banner()
    exit_code = EXIT_CLEAN
    for i, path in enumerate(args.car_files):
        if i:
            print()
        exit_code = max(exit_code, diagnose_file(path, schema))

    return exit_code


if __name__ == "__main__":
    sys.exit(main() or 0)
