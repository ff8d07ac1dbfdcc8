"""
icer - Incremental cost-effectiveness ratio with one-way sensitivity analysis.
"""

from .exceptions import (
    ICERError,
    ParameterError,
    MissingParameterError,
    InvalidParameterError,
    UndefinedICERError,
    ExportError,
)

from .parameters import (
    PARAMETER_NAMES,
    ParameterSet,
    UtilityConstants,
    DEFAULT_UTILITIES,
)

from .model import (
    ArmOutcome,
    OutcomeResult,
    evaluate,
    evaluate_arm,
)

from .sensitivity import (
    SweepConfig,
    SensitivityRow,
    sweep,
    tornado_order,
)

from .results import (
    ResultBundle,
    aggregate,
    SHEET_NAMES,
)

from .export import write_workbook

from .scenarios import BASE_CASE, ARM_LABELS, base_case_parameters

from .runner import AnalysisConfig, RunResult, run_analysis

__all__ = [
    # Errors
    "ICERError",
    "ParameterError",
    "MissingParameterError",
    "InvalidParameterError",
    "UndefinedICERError",
    "ExportError",
    # Parameters
    "PARAMETER_NAMES",
    "ParameterSet",
    "UtilityConstants",
    "DEFAULT_UTILITIES",
    # Model
    "ArmOutcome",
    "OutcomeResult",
    "evaluate",
    "evaluate_arm",
    # Sensitivity
    "SweepConfig",
    "SensitivityRow",
    "sweep",
    "tornado_order",
    # Results
    "ResultBundle",
    "aggregate",
    "SHEET_NAMES",
    "write_workbook",
    # Scenario
    "BASE_CASE",
    "ARM_LABELS",
    "base_case_parameters",
    # Runner
    "AnalysisConfig",
    "RunResult",
    "run_analysis",
]
