"""
Exception hierarchy for the ICER model.

All errors derive from ICERError so callers can catch the package's
failures in one place, while still matching the builtin they refine.
"""

from typing import Optional


class ICERError(Exception):
    """Base class for all ICER model errors."""
    pass


class ParameterError(ICERError, ValueError):
    """A parameter set failed validation."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class MissingParameterError(ParameterError, KeyError):
    """A required parameter is absent."""

    def __init__(self, name: str):
        super().__init__(name, f"Missing required parameter '{name}'")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidParameterError(ParameterError):
    """A parameter value is non-numeric, non-finite or negative."""

    def __init__(self, name: str, value, reason: str):
        self.value = value
        super().__init__(name, f"Invalid value for parameter '{name}': {value!r} ({reason})")


class UndefinedICERError(ICERError, ArithmeticError):
    """
    The ICER is undefined because the QALY difference between arms is zero.

    Attributes:
        delta_cost: Cost difference (standard - test)
        parameter: Parameter being perturbed when this occurred (if any)
        bound: 'low' or 'high' for sensitivity runs (if any)
    """

    def __init__(
        self,
        delta_cost: float,
        parameter: Optional[str] = None,
        bound: Optional[str] = None
    ):
        self.delta_cost = delta_cost
        self.parameter = parameter
        self.bound = bound
        message = f"ICER undefined: QALY difference is zero (cost difference {delta_cost:.2f})"
        if parameter is not None:
            message += f" with '{parameter}' at its {bound} bound"
        super().__init__(message)


class ExportError(ICERError, OSError):
    """Writing the results workbook failed."""
    pass
