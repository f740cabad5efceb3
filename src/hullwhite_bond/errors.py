from __future__ import annotations


class InvalidParameter(ValueError):
    """Raised when model parameters or the simulation grid cannot be used."""

    pass


class LengthMismatch(ValueError):
    """Raised when a rate path does not line up with the grid it is priced on."""

    pass
