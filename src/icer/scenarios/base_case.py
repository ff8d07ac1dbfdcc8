"""
Base case: tirzepatide (test arm) versus semaglutide (standard arm).

One-cycle transition probabilities and unit costs for the comparison.
Costs are per patient per cycle.
"""

from typing import Dict

from ..parameters import ParameterSet


ARM_LABELS = ('Tirzepatide', 'Semaglutide')

BASE_CASE: Dict[str, float] = {
    # Transition probabilities
    'mace_tp_t': 0.425,
    'mort_tp_t': 0.512,
    'mace_tp_s': 0.444,
    'mort_tp_s': 0.367,
    # Event and disease-management costs
    'cvd_cost': 14888.32,
    'dm_cost': 13107.60,
    # Drug costs
    'drug_cost_t': 1079.77,
    'drug_cost_s': 997.59,
}


def base_case_parameters(**overrides: float) -> ParameterSet:
    """
    Fresh ParameterSet for the base case.

    Args:
        **overrides: Values replacing (or extending) the base case

    Returns:
        Validated ParameterSet
    """
    values = dict(BASE_CASE)
    values.update(overrides)
    return ParameterSet(values)
