"""Exceptions raised on caller contract violations."""


class InvalidArgumentError(ValueError):
    """A mix or pigment operation was called with inconsistent arguments."""
