"""
Single-cycle decision model for two treatment arms.

Each arm splits the cohort into three states over one cycle:
- MACE (major adverse cardiovascular event), probability p_event
- Dead, probability p_dead
- Well (alive, event-free), probability max(0, 1 - p_event - p_dead)

Expected values per arm:
    cost = p_event * cvd_cost + p_well * dm_cost + drug_cost
    qaly = p_event * u_mace + p_well * u_no_mace + p_dead * u_dead

Death carries no cost term. The ICER compares standard against test:
    icer = (cost_s - cost_t) / (qaly_s - qaly_t)
"""

from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np

from .exceptions import UndefinedICERError
from .parameters import (
    UtilityConstants,
    DEFAULT_UTILITIES,
    arm_parameters,
    coerce_parameters,
)


@dataclass(frozen=True)
class ArmOutcome:
    """Expected state probabilities, cost and QALY for one arm."""
    label: str
    p_event: float
    p_dead: float
    p_well: float
    cost: float
    qaly: float


@dataclass(frozen=True)
class OutcomeResult:
    """
    Result of evaluating both arms.

    Attributes:
        test: Outcome for the test arm
        standard: Outcome for the standard arm
        delta_cost: standard.cost - test.cost
        delta_qaly: standard.qaly - test.qaly
    """
    test: ArmOutcome
    standard: ArmOutcome
    delta_cost: float
    delta_qaly: float

    @property
    def icer_defined(self) -> bool:
        return bool(np.isfinite(self.delta_qaly)) and self.delta_qaly != 0.0

    @property
    def icer(self) -> float:
        """
        Incremental cost per QALY gained.

        Raises UndefinedICERError when the QALY difference is zero or not finite.
        """
        if not self.icer_defined:
            raise UndefinedICERError(self.delta_cost)
        return self.delta_cost / self.delta_qaly

    def icer_or_none(self) -> Optional[float]:
        return self.icer if self.icer_defined else None

    def net_monetary_benefit(self, wtp: float) -> float:
        """Incremental net monetary benefit at willingness-to-pay `wtp` per QALY."""
        return wtp * self.delta_qaly - self.delta_cost


def well_probability(p_event: float, p_dead: float) -> float:
    """Event-free, alive probability, clamped at zero."""
    return max(0.0, 1.0 - p_event - p_dead)


def evaluate_arm(
    params: Mapping,
    arm: str,
    utilities: UtilityConstants = DEFAULT_UTILITIES,
    label: Optional[str] = None
) -> ArmOutcome:
    """
    Expected cost and QALY for a single arm.

    Args:
        params: ParameterSet, or a plain mapping (validated first)
        arm: 't' (test) or 's' (standard)
        utilities: Health-state utilities
        label: Display label (default: the arm suffix)

    Returns:
        ArmOutcome for the arm
    """
    params = coerce_parameters(params)
    inputs = arm_parameters(params, arm)
    p_event = inputs['p_event']
    p_dead = inputs['p_dead']
    p_well = well_probability(p_event, p_dead)

    cost = (
        p_event * params['cvd_cost']
        + p_well * params['dm_cost']
        + inputs['drug_cost']
    )
    qaly = (
        p_event * utilities.mace
        + p_well * utilities.no_mace
        + p_dead * utilities.dead
    )

    return ArmOutcome(
        label=label if label is not None else arm,
        p_event=p_event,
        p_dead=p_dead,
        p_well=p_well,
        cost=cost,
        qaly=qaly
    )


def evaluate(
    params: Mapping,
    utilities: UtilityConstants = DEFAULT_UTILITIES,
    labels: tuple = ('t', 's')
) -> OutcomeResult:
    """
    Evaluate both arms and their increments.

    Pure: no I/O and no state, so identical inputs give identical outputs.
    A zero QALY difference is not an error here; it surfaces when `icer`
    is read.

    Args:
        params: ParameterSet, or a plain mapping (validated first)
        utilities: Health-state utilities
        labels: (test, standard) display labels

    Returns:
        OutcomeResult

    Raises:
        ParameterError: if a plain mapping fails validation
    """
    params = coerce_parameters(params)
    test = evaluate_arm(params, 't', utilities, labels[0])
    standard = evaluate_arm(params, 's', utilities, labels[1])

    return OutcomeResult(
        test=test,
        standard=standard,
        delta_cost=standard.cost - test.cost,
        delta_qaly=standard.qaly - test.qaly
    )
