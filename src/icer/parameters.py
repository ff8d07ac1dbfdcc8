"""
Parameter set and utility constants for the ICER model.

A ParameterSet is an immutable mapping of the model's named inputs:
- Transition probabilities (MACE and mortality) for each arm
- Event and disease-management unit costs
- Per-arm drug costs

Arms are identified by suffix: '_t' for the test arm, '_s' for the
standard-of-care arm.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Dict, Iterator, List, Optional
import warnings

import numpy as np

from .exceptions import MissingParameterError, InvalidParameterError


# Fixed enumeration order; the sensitivity table follows it
PARAMETER_NAMES = (
    'mace_tp_t',
    'mort_tp_t',
    'mace_tp_s',
    'mort_tp_s',
    'cvd_cost',
    'dm_cost',
    'drug_cost_t',
    'drug_cost_s',
)

ARMS = ('t', 's')


@dataclass(frozen=True)
class UtilityConstants:
    """
    Health-state utilities (0 = dead, 1 = perfect health).

    Attributes:
        no_mace: Utility when alive without an adverse cardiovascular event
        mace: Utility after a major adverse cardiovascular event
        dead: Utility when dead
    """
    no_mace: float = 0.85
    mace: float = 0.70
    dead: float = 0.0

    def __post_init__(self):
        for name in ('no_mace', 'mace', 'dead'):
            value = getattr(self, name)
            if not np.isfinite(value) or not 0.0 <= value <= 1.0:
                raise ValueError(f"Utility '{name}' must be in [0, 1], got {value}")


DEFAULT_UTILITIES = UtilityConstants()


def _check_value(name: str, value) -> float:
    """Coerce a parameter value to float, rejecting anything unusable."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, value, "not a real number")
    value = float(value)
    if not np.isfinite(value):
        raise InvalidParameterError(name, value, "not finite")
    if value < 0:
        raise InvalidParameterError(name, value, "negative")
    return value


class ParameterSet(Mapping):
    """
    Immutable, validated mapping from parameter name to value.

    All names in PARAMETER_NAMES must be present. Extra names are allowed;
    they are carried through (and swept) but do not enter the model.
    Iteration yields the fixed names first, then extras in insertion order.
    Pass warn=False to skip the probability-sum warning.
    """

    def __init__(
        self,
        values: Mapping,
        required: tuple = PARAMETER_NAMES,
        warn: bool = True
    ):
        for name in required:
            if name not in values:
                raise MissingParameterError(name)

        ordered = list(required) + [k for k in values if k not in required]
        self._values: Dict[str, float] = {
            name: _check_value(name, values[name]) for name in ordered
        }
        self._required = tuple(required)

        if not warn:
            return

        for arm in ARMS:
            p_event = self._values.get(f'mace_tp_{arm}')
            p_dead = self._values.get(f'mort_tp_{arm}')
            if p_event is not None and p_dead is not None and p_event + p_dead > 1.0:
                warnings.warn(
                    f"mace_tp_{arm} + mort_tp_{arm} = {p_event + p_dead:.4f} exceeds 1; "
                    f"event-free probability will be clamped to 0",
                    RuntimeWarning,
                    stacklevel=2
                )

    def __getitem__(self, name: str) -> float:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ', '.join(f'{k}={v!r}' for k, v in self._values.items())
        return f'ParameterSet({items})'

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    @property
    def names(self) -> List[str]:
        """Parameter names in enumeration order."""
        return list(self._values)

    @property
    def extras(self) -> List[str]:
        """Names not used by the outcome model."""
        return [k for k in self._values if k not in self._required]

    def replace(self, name: str, value: float) -> 'ParameterSet':
        """Return a copy with one parameter replaced."""
        if name not in self._values:
            raise MissingParameterError(name)
        values = dict(self._values)
        values[name] = value
        # Perturbed copies may push probabilities over 1
        return ParameterSet(values, required=self._required, warn=False)

    def to_dict(self) -> Dict[str, float]:
        return dict(self._values)

    @classmethod
    def from_kwargs(cls, **values: float) -> 'ParameterSet':
        return cls(values)


def arm_parameters(params: Mapping, arm: str) -> Dict[str, float]:
    """
    Extract the inputs for one arm.

    Returns dict with p_event, p_dead, drug_cost for the arm.
    """
    if arm not in ARMS:
        raise ValueError(f"arm must be one of {ARMS}, got '{arm}'")
    return {
        'p_event': params[f'mace_tp_{arm}'],
        'p_dead': params[f'mort_tp_{arm}'],
        'drug_cost': params[f'drug_cost_{arm}'],
    }


def coerce_parameters(params: Optional[Mapping]) -> ParameterSet:
    """Accept a ParameterSet or a plain mapping (validated on the way in)."""
    if isinstance(params, ParameterSet):
        return params
    if params is None:
        raise ValueError("params must not be None")
    return ParameterSet(params)
