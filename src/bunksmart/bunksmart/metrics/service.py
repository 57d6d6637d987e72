from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..state.store import AppStateStore
from .calculator.base import MetricsCalculator
from .calculator.standard_calculator import StandardMetricsCalculator
from .model import GlobalMetrics


@dataclass(frozen=True)
class DashboardData:
    overall: GlobalMetrics
    split: list[dict]
    subjects: list[dict]
    target_percentage: float


class MetricsReportService:
    """Builds dashboard/analytics read-models. Metrics are recomputed on every call."""

    def __init__(self, store: AppStateStore, *, calculator: Optional[MetricsCalculator] = None):
        self._store = store
        self._calculator = calculator or StandardMetricsCalculator()

    def build_dashboard(self) -> DashboardData:
        target = self._store.settings.target_percentage
        subjects = self._store.subjects

        overall = self._calculator.for_subjects(subjects, target)

        rows = []
        for s in subjects:
            m = self._calculator.for_subject(s, target)
            rows.append(
                {
                    "id": s.subject_id,
                    "name": s.name,
                    "color": s.color,
                    "metrics": m.to_dict(),
                }
            )

        split = [
            {"name": "Attended", "value": overall.total_attended},
            {"name": "Bunked", "value": overall.total_classes - overall.total_attended},
        ]
        return DashboardData(overall=overall, split=split, subjects=rows, target_percentage=target)

    def build_analytics(self) -> list[dict]:
        target = self._store.settings.target_percentage

        bars = []
        for s in self._store.subjects:
            m = self._calculator.for_subjects([s], target)
            bars.append(
                {
                    "id": s.subject_id,
                    "name": s.name,
                    "color": s.color,
                    "percentage": m.percentage,
                    "bar_width": min(100.0, m.percentage),
                    "is_above_target": m.is_above_target,
                }
            )
        return bars
