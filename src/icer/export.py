"""
Spreadsheet export of named result tables.
"""

from pathlib import Path
from typing import Mapping, Union
import logging

import pandas as pd

from .exceptions import ExportError

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path('icer_results.xlsx')


def write_workbook(
    sheets: Mapping[str, pd.DataFrame],
    path: Union[str, Path] = DEFAULT_OUTPUT
) -> Path:
    """
    Write each table to its own sheet, in mapping order.

    Args:
        sheets: Sheet name -> DataFrame
        path: Output .xlsx path (parent directories are created)

    Returns:
        Path written

    Raises:
        ExportError: if the workbook cannot be written
    """
    path = Path(path)
    if not sheets:
        raise ExportError("No sheets to export")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with pd.ExcelWriter(path, engine='openpyxl') as writer:
            for name, df in sheets.items():
                df.to_excel(writer, index=False, sheet_name=name)
    except (OSError, ValueError) as e:
        raise ExportError(f"Could not write workbook '{path}': {e}") from e

    logger.info("Wrote %d sheets to %s", len(sheets), path)
    return path
