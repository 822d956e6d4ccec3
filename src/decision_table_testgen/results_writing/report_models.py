"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class IssueSeverity(str, Enum):
    """Rendered severity in the Issues sheet."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class ReportMetadata:
    """Metadata rendered into the Summary sheet."""

    generated_at: datetime
    table_path: str | None
    steps_path: str | None
