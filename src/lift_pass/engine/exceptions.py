"""Exceptions for the lift pass pricing engine."""


class LiftPassError(Exception):
    """Base exception for lift pass pricing errors."""
    pass


class UnknownPassTypeError(LiftPassError, ValueError):
    """Raised when a pass type identifier is not one of the known passes."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown pass type '{value}'")


class MissingBasePriceError(LiftPassError, LookupError):
    """Raised when no base price is configured for a known pass type."""

    def __init__(self, pass_type):
        self.pass_type = pass_type
        super().__init__(f"No base price configured for pass type '{pass_type}'")
