# Base-case scenarios
#
# Each scenario defines:
# - Base-case parameter values
# - Display labels for the two arms

from .base_case import (
    BASE_CASE,
    ARM_LABELS,
    base_case_parameters,
)

__all__ = [
    'BASE_CASE',
    'ARM_LABELS',
    'base_case_parameters',
]
