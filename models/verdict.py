"""Verdict and stage enums for diagnostic runs."""

from enum import Enum


class Verdict(Enum):
    """Final outcome of one diagnostic run."""

    CLEAN = "clean"
    NEEDS_ATTENTION = "needs attention"


class DiagnosticStage(Enum):
    """Diagnostic steps, in the order they run."""

    FIELD_CHECK = 1
    PART_PRESENCE_CHECK = 2
    CONDITION_CHECK = 3
    DONE = 4
