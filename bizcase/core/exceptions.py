"""Exceptions raised at the boundaries of the business case core."""


class InvalidHorizonError(ValueError):
    """Raised when a simulation horizon is not a whole number of months >= 1."""


class UnknownPresetError(KeyError):
    """Raised when a preset id is not present in the preset catalog."""
