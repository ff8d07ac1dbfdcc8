"""
Deterministic one-way sensitivity analysis (OWSA).

Each parameter in turn is set to a low and a high bound (base value times
a multiplier) while every other parameter stays at its base value, and the
ICER is recomputed at each bound. No combinations are evaluated.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging
import warnings

import numpy as np
import pandas as pd

from .exceptions import UndefinedICERError
from .model import evaluate
from .parameters import ParameterSet, UtilityConstants, DEFAULT_UTILITIES, coerce_parameters

logger = logging.getLogger(__name__)

SENSITIVITY_COLUMNS = ['Parameter', 'Low', 'High', 'Range']

ON_UNDEFINED = ('raise', 'blank')


@dataclass(frozen=True)
class SweepConfig:
    """
    Perturbation settings for the sweep.

    Attributes:
        lower_multiplier: Low bound = base value * lower_multiplier
        upper_multiplier: High bound = base value * upper_multiplier
        on_undefined: 'raise' to fail on a zero QALY difference,
                      'blank' to leave the affected bound empty
    """
    lower_multiplier: float = 0.8
    upper_multiplier: float = 1.2
    on_undefined: str = 'raise'

    def __post_init__(self):
        for name in ('lower_multiplier', 'upper_multiplier'):
            value = getattr(self, name)
            if not np.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be finite and non-negative, got {value}")
        if self.lower_multiplier > self.upper_multiplier:
            raise ValueError(
                f"lower_multiplier ({self.lower_multiplier}) exceeds "
                f"upper_multiplier ({self.upper_multiplier})"
            )
        if self.on_undefined not in ON_UNDEFINED:
            raise ValueError(
                f"on_undefined must be one of {ON_UNDEFINED}, got '{self.on_undefined}'"
            )

    @classmethod
    def symmetric(cls, pct: float, **kwargs) -> 'SweepConfig':
        """Bounds of ±pct (0.2 = ±20%)."""
        return cls(lower_multiplier=1.0 - pct, upper_multiplier=1.0 + pct, **kwargs)


@dataclass(frozen=True)
class SensitivityRow:
    """
    ICER bounds for one parameter.

    low/high/range are rounded to 2 dp after the ICER arithmetic, and are
    None only when the ICER was undefined and the sweep ran with
    on_undefined='blank'.
    """
    parameter: str
    low: Optional[float]
    high: Optional[float]
    range: Optional[float]
    low_value: float
    high_value: float

    def as_record(self) -> dict:
        return {
            'Parameter': self.parameter,
            'Low': self.low,
            'High': self.high,
            'Range': self.range,
        }


def _perturbed_icer(
    base: ParameterSet,
    name: str,
    value: float,
    bound: str,
    config: SweepConfig,
    utilities: UtilityConstants
) -> Optional[float]:
    """ICER with a single parameter replaced, handling the undefined case."""
    result = evaluate(base.replace(name, value), utilities)
    if result.icer_defined:
        return result.icer

    if config.on_undefined == 'raise':
        raise UndefinedICERError(result.delta_cost, parameter=name, bound=bound)

    warnings.warn(
        f"ICER undefined with '{name}' at its {bound} bound ({value}); left blank",
        RuntimeWarning,
        stacklevel=3
    )
    return None


def perturbation_bounds(value: float, config: SweepConfig) -> Tuple[float, float]:
    return value * config.lower_multiplier, value * config.upper_multiplier


def sweep_parameter(
    base: ParameterSet,
    name: str,
    config: SweepConfig = SweepConfig(),
    utilities: UtilityConstants = DEFAULT_UTILITIES
) -> SensitivityRow:
    """Evaluate the low and high bound for one parameter."""
    low_value, high_value = perturbation_bounds(base[name], config)

    low = _perturbed_icer(base, name, low_value, 'low', config, utilities)
    high = _perturbed_icer(base, name, high_value, 'high', config, utilities)
    logger.debug("%s: low=%s -> %s, high=%s -> %s", name, low_value, low, high_value, high)

    spread = abs(high - low) if low is not None and high is not None else None

    return SensitivityRow(
        parameter=name,
        low=round(low, 2) if low is not None else None,
        high=round(high, 2) if high is not None else None,
        range=round(spread, 2) if spread is not None else None,
        low_value=low_value,
        high_value=high_value
    )


def sweep(
    base: ParameterSet,
    config: SweepConfig = SweepConfig(),
    utilities: UtilityConstants = DEFAULT_UTILITIES
) -> List[SensitivityRow]:
    """
    One-way sensitivity sweep over every parameter in `base`.

    Args:
        base: Base-case parameters
        config: Perturbation bounds and undefined-ICER policy
        utilities: Health-state utilities

    Returns:
        One SensitivityRow per parameter, in the parameter set's order
    """
    base = coerce_parameters(base)
    logger.info(
        "Sweeping %d parameters at x%s / x%s",
        len(base), config.lower_multiplier, config.upper_multiplier
    )
    return [sweep_parameter(base, name, config, utilities) for name in base]


def tornado_order(rows: Sequence[SensitivityRow]) -> List[SensitivityRow]:
    """Rows sorted by descending range; undefined ranges go last."""
    return sorted(
        rows,
        key=lambda r: (r.range is None, -(r.range if r.range is not None else 0.0))
    )


def rows_to_dataframe(rows: Sequence[SensitivityRow]) -> pd.DataFrame:
    """Sensitivity table with columns Parameter, Low, High, Range."""
    if not rows:
        return pd.DataFrame(columns=SENSITIVITY_COLUMNS)
    return pd.DataFrame([r.as_record() for r in rows], columns=SENSITIVITY_COLUMNS)
