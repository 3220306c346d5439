"""Car class for the vehicle record being diagnosed."""

from typing import Iterable, List, Optional, Tuple

from .part import Part

# Descriptive fields, in the order they are checked.
CAR_FIELDS = ("year", "make", "model")


class Car:
    """Vehicle identification and installed parts."""

    def __init__(
        self,
        year: Optional[str] = None,
        make: Optional[str] = None,
        model: Optional[str] = None,
        parts: Optional[Iterable[Part]] = None,
    ):
        self.year = year
        self.make = make
        self.model = model
        # None means the inventory itself is absent, not just empty
        self.parts: Optional[Tuple[Part, ...]] = (
            tuple(parts) if parts is not None else None
        )

    @property
    def name(self) -> str:
        """Human-readable vehicle name built from whichever fields are present."""
        return " ".join(str(v) for v in (self.year, self.make, self.model) if v)

    def missing_fields(self) -> List[str]:
        """Names of descriptive fields that are absent, in check order."""
        return [field for field in CAR_FIELDS if getattr(self, field) is None]

    def __repr__(self) -> str:
        return (
            f"Car(year={self.year!r}, make={self.make!r}, "
            f"model={self.model!r}, parts={self.parts!r})"
        )
