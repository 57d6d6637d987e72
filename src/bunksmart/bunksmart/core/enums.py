from __future__ import annotations

from enum import Enum


class AttendanceKind(str, Enum):
    """Loại sự kiện điểm danh (có mặt / vắng)."""

    PRESENT = "present"
    ABSENT = "absent"


class MetricsStatus(str, Enum):
    """Mức rủi ro dùng để tô màu thẻ môn học."""

    SAFE = "safe"
    WARNING = "warning"
    CRITICAL = "critical"
