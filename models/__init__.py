"""
Car diagnostic models.

This package provides the data models and checks for diagnosing a car:
- PartCategory / ConditionState: closed part classifications
- Part: a single installed part
- Car: the vehicle record (year, make, model, parts)
- REQUIRED_PARTS: reference bill of materials
- MissingField / MissingPart / DamagedPart: findings
- Verdict / DiagnosticStage: outcome and check order
- evaluate: the diagnostic run itself
"""

from .errors import InvalidInput
from .part import PartCategory, ConditionState, Part, WORKING_CONDITIONS, is_working
from .car import Car, CAR_FIELDS
from .reference import REQUIRED_PARTS, required_count
from .verdict import Verdict, DiagnosticStage
from .finding import Finding, MissingField, MissingPart, DamagedPart
from .reconciler import compute_missing_parts, count_parts
from .classifier import find_damaged_parts
from .diagnostics import Diagnosis, evaluate, summarize
from .loader import load_car

__all__ = [
    "InvalidInput",
    "PartCategory",
    "ConditionState",
    "Part",
    "WORKING_CONDITIONS",
    "is_working",
    "Car",
    "CAR_FIELDS",
    "REQUIRED_PARTS",
    "required_count",
    "Verdict",
    "DiagnosticStage",
    "Finding",
    "MissingField",
    "MissingPart",
    "DamagedPart",
    "compute_missing_parts",
    "count_parts",
    "find_damaged_parts",
    "Diagnosis",
    "evaluate",
    "summarize",
    "load_car",
]
