"""
Workbook adapter: turns the first sheet of an .xlsx upload into a RawGrid.

This is the only place that touches a file. The decoders receive the grid
and never see the workbook.
"""

import logging

import openpyxl

from .utils import RawGrid

logger = logging.getLogger(__name__)


def read_first_sheet(path: str) -> RawGrid:
    """Read the first worksheet's cell values, row by row.

    Cached formula results are read (data_only=True). Trailing empty cells
    are kept; ragged rows are padded later by the decoders.
    """
    try:
        wb = openpyxl.load_workbook(path, data_only=True, read_only=True)
    except Exception:
        logger.exception("Failed to open workbook: %s", path)
        raise

    try:
        ws = wb[wb.sheetnames[0]]
        grid = [list(row) for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()

    logger.info("Read %d rows from first sheet of %s", len(grid), path)
    return grid
