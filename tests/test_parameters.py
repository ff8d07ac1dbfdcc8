"""
Tests for parameter sets and utility constants.

Tests cover:
- Required names and enumeration order
- Validation errors (missing, non-finite, negative, non-numeric)
- Immutability and replace()
- Probability-sum warning
- UtilityConstants bounds
"""

import math
import warnings

import numpy as np
import pytest

from icer import (
    BASE_CASE,
    PARAMETER_NAMES,
    ParameterSet,
    UtilityConstants,
    MissingParameterError,
    InvalidParameterError,
    ParameterError,
)


class TestConstruction:
    """Tests for building a ParameterSet."""

    def test_base_case_has_all_names(self, base):
        """All eight names present, in the fixed order."""
        assert base.names == list(PARAMETER_NAMES)
        assert len(base) == 8

    def test_order_independent_of_input(self):
        """Input order does not change enumeration order."""
        reversed_values = dict(reversed(list(BASE_CASE.items())))
        params = ParameterSet(reversed_values)
        assert list(params) == list(PARAMETER_NAMES)

    def test_extras_follow_fixed_names(self):
        """Extra names are kept after the fixed ones."""
        values = {'extra': 3.0, **BASE_CASE}
        params = ParameterSet(values)
        assert params.names[-1] == 'extra'
        assert params.extras == ['extra']

    def test_numpy_values_accepted(self):
        """numpy scalars are coerced to float."""
        values = dict(BASE_CASE, cvd_cost=np.float64(100.0), dm_cost=np.int64(50))
        params = ParameterSet(values)
        assert params['cvd_cost'] == 100.0
        assert isinstance(params['dm_cost'], float)

    def test_from_kwargs(self):
        params = ParameterSet.from_kwargs(**BASE_CASE)
        assert params.to_dict() == BASE_CASE


class TestValidation:
    """Tests for fail-fast validation."""

    def test_missing_key(self):
        """Missing name raises MissingParameterError naming it."""
        values = dict(BASE_CASE)
        del values['dm_cost']

        with pytest.raises(MissingParameterError) as exc:
            ParameterSet(values)
        assert exc.value.name == 'dm_cost'
        assert 'dm_cost' in str(exc.value)

    def test_missing_key_is_key_error(self):
        """Missing parameter is also a KeyError and a ValueError."""
        values = dict(BASE_CASE)
        del values['mace_tp_t']

        with pytest.raises(KeyError):
            ParameterSet(values)
        with pytest.raises(ValueError):
            ParameterSet(values)

    @pytest.mark.parametrize('bad', [math.nan, math.inf, -math.inf])
    def test_non_finite(self, bad):
        """NaN and infinities are rejected."""
        values = dict(BASE_CASE, mort_tp_s=bad)
        with pytest.raises(InvalidParameterError) as exc:
            ParameterSet(values)
        assert exc.value.name == 'mort_tp_s'

    def test_negative(self):
        values = dict(BASE_CASE, drug_cost_t=-1.0)
        with pytest.raises(InvalidParameterError, match='drug_cost_t'):
            ParameterSet(values)

    @pytest.mark.parametrize('bad', ['0.4', None, True])
    def test_non_numeric(self, bad):
        values = dict(BASE_CASE, mace_tp_s=bad)
        with pytest.raises(ParameterError):
            ParameterSet(values)

    def test_probability_sum_above_one_warns(self):
        """Probabilities summing above 1 warn but do not fail."""
        values = dict(BASE_CASE, mace_tp_t=0.7, mort_tp_t=0.5)
        with pytest.warns(RuntimeWarning, match='mace_tp_t'):
            params = ParameterSet(values)
        assert params['mace_tp_t'] == 0.7


class TestImmutability:
    """Tests for immutable behaviour."""

    def test_no_item_assignment(self, base):
        with pytest.raises(TypeError):
            base['cvd_cost'] = 1.0

    def test_replace_returns_copy(self, base):
        """replace() leaves the original untouched."""
        changed = base.replace('cvd_cost', 1.0)

        assert changed['cvd_cost'] == 1.0
        assert base['cvd_cost'] == BASE_CASE['cvd_cost']
        for name in PARAMETER_NAMES:
            if name != 'cvd_cost':
                assert changed[name] == base[name]

    def test_replace_unknown_name(self, base):
        with pytest.raises(MissingParameterError):
            base.replace('nope', 1.0)

    def test_replace_validates(self, base):
        with pytest.raises(InvalidParameterError):
            base.replace('dm_cost', math.nan)

    def test_equal_sets_hash_equal(self):
        a = ParameterSet(BASE_CASE)
        b = ParameterSet(dict(BASE_CASE))
        assert a == b
        assert hash(a) == hash(b)

    def test_hash_ignores_extra_order(self):
        """Equal sets with extras inserted in different orders hash equal."""
        a = ParameterSet(dict(BASE_CASE, x=1.0, y=2.0))
        b = ParameterSet({'y': 2.0, 'x': 1.0, **BASE_CASE})

        assert a.extras != b.extras
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_replace_does_not_warn(self, base):
        """Over-unity copies from replace() are quiet."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            changed = base.replace('mace_tp_t', 0.9)
        assert changed['mace_tp_t'] == 0.9
        assert caught == []

    def test_replace_leaves_filters_alone(self, base):
        """Warnings raised around replace() still reach the caller."""
        with pytest.warns(RuntimeWarning, match='elsewhere'):
            base.replace('mace_tp_t', 0.9)
            warnings.warn('elsewhere', RuntimeWarning)

    def test_warn_flag(self):
        values = dict(BASE_CASE, mace_tp_t=0.7, mort_tp_t=0.5)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            ParameterSet(values, warn=False)
        assert caught == []


class TestUtilityConstants:
    """Tests for UtilityConstants."""

    def test_defaults(self):
        u = UtilityConstants()
        assert (u.no_mace, u.mace, u.dead) == (0.85, 0.70, 0.0)

    def test_frozen(self):
        u = UtilityConstants()
        with pytest.raises(AttributeError):
            u.mace = 0.5

    @pytest.mark.parametrize('field_name', ['no_mace', 'mace', 'dead'])
    def test_out_of_range(self, field_name):
        with pytest.raises(ValueError, match=field_name):
            UtilityConstants(**{field_name: 1.5})
