from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import MetricsStatus


@dataclass(frozen=True)
class SubjectMetrics:
    """Read-model: chỉ số điểm danh của một môn (không lưu trữ).

    safe_to_bunk is None when the target is 0 (no limit on absences).
    must_attend is None when the target is 100 and already missed (not achievable).
    """

    total: int
    attended: int
    percentage: float
    safe_to_bunk: Optional[int]
    must_attend: Optional[int]
    status: MetricsStatus

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "attended": self.attended,
            "percentage": self.percentage,
            "safeToBunk": self.safe_to_bunk,
            "mustAttend": self.must_attend,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class GlobalMetrics:
    """Read-model: tổng hợp trên tất cả các môn."""

    total_classes: int
    total_attended: int
    percentage: float
    is_above_target: bool

    def to_dict(self) -> dict:
        return {
            "totalClasses": self.total_classes,
            "totalAttended": self.total_attended,
            "percentage": self.percentage,
            "isAboveTarget": self.is_above_target,
        }
