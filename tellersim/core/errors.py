"""Exceptions raised by the simulation core."""


class NoCustomersError(ValueError):
    """Raised when an average is requested from a run with no customers."""
