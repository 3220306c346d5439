"""Exceptions raised by the diagnostic core."""


class InvalidInput(ValueError):
    """A caller passed an absent value where one is required."""
