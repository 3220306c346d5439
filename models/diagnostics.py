"""
Diagnostic evaluation of a car record.

Runs three checks in order, stopping after the first one that fails:
1. Field check - year, make and model must all be present
2. Part presence check - inventory must cover the reference bill of materials
3. Condition check - every installed part must be in working condition

A failing check still reports everything it found before the run stops.
"""

import logging
from datetime import date
from typing import List, NamedTuple, Optional

from .car import Car
from .classifier import find_damaged_parts
from .errors import InvalidInput
from .finding import DamagedPart, Finding, MissingField, MissingPart
from .reconciler import compute_missing_parts
from .verdict import DiagnosticStage, Verdict

logger = logging.getLogger(__name__)


class Diagnosis(NamedTuple):
    """Result of one diagnostic run: the verdict and findings in report order."""

    verdict: Verdict
    findings: List[Finding]

    @property
    def is_clean(self) -> bool:
        return self.verdict == Verdict.CLEAN

    @property
    def failed_stage(self) -> Optional[DiagnosticStage]:
        """The check that stopped the run, or None if every check passed."""
        if not self.findings:
            return None
        return self.findings[0].stage


def check_fields(car: Car) -> List[MissingField]:
    return [MissingField(name) for name in car.missing_fields()]


def check_part_presence(car: Car) -> List[MissingPart]:
    # An absent inventory means nothing is installed
    inventory = car.parts if car.parts is not None else ()
    missing = compute_missing_parts(inventory)
    return [MissingPart(category, count) for category, count in missing.items()]


def check_condition(car: Car) -> List[DamagedPart]:
    return [
        DamagedPart(part.category, part.condition)
        for part in find_damaged_parts(car.parts)
    ]


# Checks in run order
CHECKS = (
    (DiagnosticStage.FIELD_CHECK, check_fields),
    (DiagnosticStage.PART_PRESENCE_CHECK, check_part_presence),
    (DiagnosticStage.CONDITION_CHECK, check_condition),
)


def evaluate(car: Optional[Car]) -> Diagnosis:
    """
    Diagnose a car.

    Missing fields, missing parts and damaged parts are returned as findings.
    The only error raised is InvalidInput, when car is None.
    """
    if car is None:
        raise InvalidInput("Car must not be None")

    findings: List[Finding] = []
    for stage, check in CHECKS:
        logger.debug("Running %s for %r", stage.name, car.name)
        stage_findings = check(car)
        findings.extend(stage_findings)
        if stage_findings:
            logger.debug(
                "%s found %d issue(s), skipping remaining checks",
                stage.name,
                len(stage_findings),
            )
            break

    verdict = Verdict.NEEDS_ATTENTION if findings else Verdict.CLEAN
    logger.debug("%s: %s", DiagnosticStage.DONE.name, verdict.value)
    return Diagnosis(verdict, findings)


def summarize(car: Car, verdict: Verdict, on: Optional[date] = None) -> str:
    """Summary line: date stamp, vehicle name and verdict."""
    stamp = (on or date.today()).isoformat()
    head = f"{stamp} {car.name}" if car.name else stamp
    if verdict == Verdict.CLEAN:
        return f"{head} was found to be free of any issues."
    return f"{head} needs further attention as the diagnostic system found some issues."
