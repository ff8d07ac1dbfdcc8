"""
One-shot analysis pipeline.

Base-case parameters -> sensitivity sweep -> aggregation -> export.
Runs sequentially; each step is a pure function except the export.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple
import logging

from .export import DEFAULT_OUTPUT, write_workbook
from .parameters import ParameterSet, UtilityConstants, DEFAULT_UTILITIES, coerce_parameters
from .results import ResultBundle, aggregate
from .scenarios import ARM_LABELS, base_case_parameters
from .sensitivity import SweepConfig, sweep

logger = logging.getLogger(__name__)


@dataclass
class AnalysisConfig:
    """
    Settings for a full run.

    Attributes:
        utilities: Health-state utilities passed to every model evaluation
        sweep: Perturbation bounds and undefined-ICER policy
        output_path: Workbook path
        labels: (test, standard) arm labels for the summary table
    """
    utilities: UtilityConstants = DEFAULT_UTILITIES
    sweep: SweepConfig = field(default_factory=SweepConfig)
    output_path: Path = DEFAULT_OUTPUT
    labels: Tuple[str, str] = ARM_LABELS


@dataclass
class RunResult:
    """Result of a full analysis run."""
    params: ParameterSet
    bundle: ResultBundle
    output_path: Optional[Path]


def run_analysis(
    params: Optional[Mapping] = None,
    config: Optional[AnalysisConfig] = None,
    export: bool = True
) -> RunResult:
    """
    Run the base case, the one-way sweep, and (optionally) the export.

    Args:
        params: Base-case parameters (default: the built-in base case)
        config: Run settings (default: AnalysisConfig())
        export: Write the workbook to config.output_path

    Returns:
        RunResult with the bundle and the written path (None if not exported)
    """
    if config is None:
        config = AnalysisConfig()
    base = base_case_parameters() if params is None else coerce_parameters(params)

    rows = sweep(base, config.sweep, config.utilities)
    bundle = aggregate(base, rows, config.utilities, config.labels)
    logger.info("Base-case ICER: %.2f", bundle.base_icer)

    output_path = None
    if export:
        output_path = write_workbook(bundle.sheets(), config.output_path)

    return RunResult(params=base, bundle=bundle, output_path=output_path)
