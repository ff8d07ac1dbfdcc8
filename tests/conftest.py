import pytest

from icer import ParameterSet, base_case_parameters


@pytest.fixture
def base():
    """Base-case parameter set."""
    return base_case_parameters()


@pytest.fixture
def tied_params():
    """
    Parameters whose QALY difference becomes exactly zero when
    mace_tp_s is scaled by 1.25 (0.4 -> 0.5 matches the test arm).
    """
    return ParameterSet({
        'mace_tp_t': 0.5,
        'mort_tp_t': 0.1,
        'mace_tp_s': 0.4,
        'mort_tp_s': 0.1,
        'cvd_cost': 10000.0,
        'dm_cost': 5000.0,
        'drug_cost_t': 1000.0,
        'drug_cost_s': 800.0,
    })
