"""Errors raised by the beam analysis engine."""


class SBeamError(Exception):
    """Base class of all errors raised by sbeam."""
    pass


class InvalidCondition(SBeamError, ValueError):
    """Raised when no analyzer is registered for a support condition."""

    def __init__(self, condition, available=()):
        self.condition = condition
        self.available = tuple(available)
        super().__init__(
            f'Invalid condition {condition!r}. Registered conditions: '
            f'{", ".join(self.available) or "none"}.'
        )


class InvalidGeometry(SBeamError, ValueError):
    """Raised when beam spans are missing, non-finite or out of range."""
    pass


class InvalidMaterial(SBeamError, ValueError):
    """Raised when material properties cannot be used in a formula."""
    pass
