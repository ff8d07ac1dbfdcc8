"""
Result aggregation: base case plus sensitivity table, as named sheets.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import pandas as pd

from .exceptions import UndefinedICERError
from .model import OutcomeResult, evaluate
from .parameters import ParameterSet, UtilityConstants, DEFAULT_UTILITIES, coerce_parameters
from .scenarios import ARM_LABELS
from .sensitivity import SensitivityRow, rows_to_dataframe

SHEET_SENSITIVITY = 'One-Way Sensitivity'
SHEET_BASE_ICER = 'Base ICER'
SHEET_SUMMARY = 'Cost and QALY Summary'

SHEET_NAMES = (SHEET_SENSITIVITY, SHEET_BASE_ICER, SHEET_SUMMARY)


@dataclass(frozen=True)
class ResultBundle:
    """
    Everything handed to the export and display collaborators.

    Attributes:
        base: Base-case outcome (ICER is defined)
        sensitivity: Sweep rows, in parameter order
    """
    base: OutcomeResult
    sensitivity: Tuple[SensitivityRow, ...]

    @property
    def base_icer(self) -> float:
        return round(self.base.icer, 2)

    def summary_table(self) -> pd.DataFrame:
        """Cost (2 dp) and QALY (4 dp) for both arms."""
        arms = (self.base.test, self.base.standard)
        return pd.DataFrame({
            'Treatment': [arm.label for arm in arms],
            'Cost': [round(arm.cost, 2) for arm in arms],
            'QALY': [round(arm.qaly, 4) for arm in arms],
        })

    def icer_table(self) -> pd.DataFrame:
        return pd.DataFrame({'ICER': [self.base_icer]})

    def sensitivity_table(self) -> pd.DataFrame:
        return rows_to_dataframe(self.sensitivity)

    def sheets(self) -> Dict[str, pd.DataFrame]:
        """Sheet name -> table, in export order."""
        return {
            SHEET_SENSITIVITY: self.sensitivity_table(),
            SHEET_BASE_ICER: self.icer_table(),
            SHEET_SUMMARY: self.summary_table(),
        }


def aggregate(
    base: ParameterSet,
    sweep_rows: Sequence[SensitivityRow],
    utilities: UtilityConstants = DEFAULT_UTILITIES,
    labels: Tuple[str, str] = ARM_LABELS
) -> ResultBundle:
    """
    Evaluate the base case once and bundle it with the sweep rows.

    Raises:
        UndefinedICERError: if the base-case QALY difference is zero
    """
    base = coerce_parameters(base)
    outcome = evaluate(base, utilities, labels)
    if not outcome.icer_defined:
        raise UndefinedICERError(outcome.delta_cost)
    return ResultBundle(base=outcome, sensitivity=tuple(sweep_rows))


def bundle_records(bundle: ResultBundle) -> Dict[str, List[dict]]:
    """Plain-record form of each sheet, for display collaborators."""
    return {name: df.to_dict(orient='records') for name, df in bundle.sheets().items()}
