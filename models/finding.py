"""Finding dataclasses for diagnostic observations."""

from dataclasses import dataclass, field
from typing import Union

from .part import ConditionState, PartCategory
from .verdict import DiagnosticStage


@dataclass(frozen=True)
class MissingField:
    """A required descriptive field is absent."""

    name: str
    stage: DiagnosticStage = field(
        default=DiagnosticStage.FIELD_CHECK, init=False, compare=False
    )


@dataclass(frozen=True)
class MissingPart:
    """Fewer parts of a category than the reference requires."""

    category: PartCategory
    count: int
    stage: DiagnosticStage = field(
        default=DiagnosticStage.PART_PRESENCE_CHECK, init=False, compare=False
    )

    def __post_init__(self):
        if self.count <= 0:
            raise ValueError(f"Missing part count must be positive, got {self.count}")


@dataclass(frozen=True)
class DamagedPart:
    """An installed part that is not in working condition."""

    category: PartCategory
    condition: ConditionState
    stage: DiagnosticStage = field(
        default=DiagnosticStage.CONDITION_CHECK, init=False, compare=False
    )


Finding = Union[MissingField, MissingPart, DamagedPart]
