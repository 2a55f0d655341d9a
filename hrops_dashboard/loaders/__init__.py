"""Record decoders, one per report kind, plus the workbook adapter."""

from .accident import decode_accidents
from .consumables import decode_consumables
from .kpi_report import decode_kpi_report
from .leave import decode_leave
from .manpower import decode_manpower
from .overtime import decode_overtime
from .purchase_request import decode_purchase_requests
from .training import decode_training
from .turnover import decode_turnover
from .warning_letter import decode_warning_letters
from .workbook import read_first_sheet
from .workload import decode_workload

__all__ = [
    "decode_accidents",
    "decode_consumables",
    "decode_kpi_report",
    "decode_leave",
    "decode_manpower",
    "decode_overtime",
    "decode_purchase_requests",
    "decode_training",
    "decode_turnover",
    "decode_warning_letters",
    "decode_workload",
    "read_first_sheet",
]
