#!/usr/bin/env python3
"""
Check car YAML files against schema.yaml.

Every schema violation in a file is reported, each with the path of the
offending value, so a file with several bad parts is fixed in one pass.

Usage:
  validate_yaml.py                  # every file in vehicles/
  validate_yaml.py car.yaml ...     # just these files
"""
import sys
from pathlib import Path
from typing import Any, Optional

import yaml
from jsonschema import Draft7Validator

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"
VEHICLES_DIR = Path(__file__).parent / "vehicles"


def load_schema() -> dict:
    """Load the car file JSON schema (stored as YAML)."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def format_path(path) -> str:
    """Dotted location of a value, e.g. 'car.parts.2.condition'."""
    return ".".join(str(p) for p in path) or "(document)"


def schema_errors(data: Any, schema: dict) -> list[str]:
    """All schema violations in already-parsed data, in document order."""
    validator = Draft7Validator(schema)
    errors = sorted(
        validator.iter_errors(data),
        key=lambda e: [f"{p:08d}" if isinstance(p, int) else p for p in e.path],
    )
    return [
        f"Schema validation error at {format_path(e.path)}: {e.message}"
        for e in errors
    ]


def validate_vehicle_file(filepath: Path, schema: dict) -> list[str]:
    """Check one car file. Returns a list of problems, empty if valid."""
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]
    except OSError as e:
        return [f"Error: {e}"]
    return schema_errors(data, schema)


def find_car_files(vehicles_dir: Path) -> list[Path]:
    """All car YAML files in a directory, sorted by name."""
    return sorted(
        list(vehicles_dir.glob("*.yaml")) + list(vehicles_dir.glob("*.yml"))
    )


def main(argv: Optional[list[str]] = None):
    if argv is None:
        argv = sys.argv[1:]
    schema = load_schema()

    if argv:
        car_files = [Path(a) for a in argv]
    elif not VEHICLES_DIR.exists():
        print(f"Error: vehicles directory not found: {VEHICLES_DIR}")
        return 1
    else:
        car_files = find_car_files(VEHICLES_DIR)
        if not car_files:
            print(f"Warning: No YAML files found in {VEHICLES_DIR}")
            return 0

    failed = 0
    for path in car_files:
        problems = validate_vehicle_file(path, schema)
        status = "FAIL" if problems else "OK"
        print(f"{status}: {path.name}")
        for problem in problems:
            print(f"  {problem}")
        failed += bool(problems)

    if failed:
        print(f"\n{failed} of {len(car_files)} file(s) failed validation")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
