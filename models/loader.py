"""YAML loading utilities for car data."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .car import CAR_FIELDS, Car
from .part import ConditionState, Part, PartCategory

CAR_KEYS = frozenset(CAR_FIELDS) | {"parts"}


def _as_text(value: Any) -> Optional[str]:
    """YAML reads `year: 2020` as an int; the record keeps strings."""
    return None if value is None else str(value)


def _parse_object(dct: Dict[str, Any]) -> Union[Part, dict]:
    """Parse dictionary into a Part if it looks like one."""
    if "type" in dct:
        return Part(PartCategory(dct["type"]), ConditionState(dct.get("condition")))
    # Everything else stays a dict; the car is built once the tree is parsed
    return dct


def _parse_parts(parts: Any) -> Optional[List[Part]]:
    if parts is None:
        return None
    if not isinstance(parts, list):
        raise ValueError(f"'parts' must be a list, got {type(parts).__name__}")
    for i, part in enumerate(parts):
        if not isinstance(part, Part):
            raise ValueError(f"parts[{i}] is not a part (needs 'type' and 'condition')")
    return parts


def _parse_car(dct: Any) -> Car:
    if not isinstance(dct, dict) or not set(dct) <= CAR_KEYS:
        raise ValueError("No car record found")
    return Car(
        _as_text(dct.get("year")),
        _as_text(dct.get("make")),
        _as_text(dct.get("model")),
        _parse_parts(dct.get("parts")),
    )


def load_car(filename: Union[str, Path]) -> Optional[Car]:
    """
    Load a car from a YAML file.

    Returns None when the file has no car in it (empty document or
    `car: null`). A malformed record (unknown part type or condition,
    parts that aren't a list of parts, unexpected keys) raises ValueError.
    """
    with open(filename, "rb") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)
    if data is None:
        return None
    # default=str turns YAML timestamps (e.g. `year: 2020-01-01`) into text
    data = json.loads(json.dumps(data, default=str), object_hook=_parse_object)
    if isinstance(data, dict) and "car" in data:
        if set(data) != {"car"}:
            raise ValueError(f"Unexpected keys beside 'car' in {filename}")
        data = data["car"]
        if data is None:
            return None
    try:
        return _parse_car(data)
    except ValueError as e:
        raise ValueError(f"{e} in {filename}") from e
