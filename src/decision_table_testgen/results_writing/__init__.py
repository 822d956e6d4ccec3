"""Results writing domain exports."""

from .generation_report_writer import write_generation_report
from .report_models import IssueSeverity, ReportMetadata

__all__ = [
    "IssueSeverity",
    "ReportMetadata",
    "write_generation_report",
]
