from __future__ import annotations

import math
from fractions import Fraction
from typing import Optional, Sequence

from ...common.validators import require_target_percentage
from ...core.constants import WARNING_BUFFER_POINTS
from ...core.enums import MetricsStatus
from ...core.exceptions import InvalidHistoryError
from ...subjects.model import Subject
from ..model import GlobalMetrics, SubjectMetrics
from .base import MetricsCalculator


def classify_status(percentage: Fraction, target: Fraction) -> MetricsStatus:
    """critical below target, warning inside the buffer band, safe above it."""
    if percentage < target:
        return MetricsStatus.CRITICAL
    if percentage < target + WARNING_BUFFER_POINTS:
        return MetricsStatus.WARNING
    return MetricsStatus.SAFE


def _require_counts(total: int, attended: int) -> None:
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (total, attended)):
        raise InvalidHistoryError("Attendance counts must be integers")
    if total < 0 or attended < 0:
        raise InvalidHistoryError("Attendance counts cannot be negative")
    if attended > total:
        raise InvalidHistoryError(f"Attended ({attended}) cannot exceed total ({total})")


class StandardMetricsCalculator(MetricsCalculator):
    """Standard rule: solve attended/(total+X) >= ratio for bunks, (attended+X)/(total+X) >= ratio for recovery.

    All comparisons use exact fractions so the floor/ceil bounds are tight and
    "percentage == target" is not subject to float rounding.
    """

    def from_counts(self, *, total: int, attended: int, target: float) -> SubjectMetrics:
        _require_counts(total, attended)
        target_value = Fraction(require_target_percentage(target))

        if total == 0:
            return SubjectMetrics(
                total=0,
                attended=0,
                percentage=0.0,
                safe_to_bunk=0,
                must_attend=0,
                status=MetricsStatus.SAFE,
            )

        exact_percentage = Fraction(attended * 100, total)
        ratio = target_value / 100

        safe_to_bunk: Optional[int] = 0
        must_attend: Optional[int] = 0

        if exact_percentage >= target_value:
            if ratio == 0:
                safe_to_bunk = None
            else:
                safe_to_bunk = max(0, math.floor(attended / ratio - total))
        else:
            if ratio == 1:
                must_attend = None
            else:
                must_attend = max(0, math.ceil((ratio * total - attended) / (1 - ratio)))

        return SubjectMetrics(
            total=total,
            attended=attended,
            percentage=float(exact_percentage),
            safe_to_bunk=safe_to_bunk,
            must_attend=must_attend,
            status=classify_status(exact_percentage, target_value),
        )

    def for_subjects(self, subjects: Sequence[Subject], target: float) -> GlobalMetrics:
        target_value = Fraction(require_target_percentage(target))

        total_classes = 0
        total_attended = 0
        for s in subjects:
            total_classes += s.total
            total_attended += s.attended

        if total_classes == 0:
            return GlobalMetrics(
                total_classes=0,
                total_attended=0,
                percentage=0.0,
                is_above_target=target_value <= 0,
            )

        exact_percentage = Fraction(total_attended * 100, total_classes)
        return GlobalMetrics(
            total_classes=total_classes,
            total_attended=total_attended,
            percentage=float(exact_percentage),
            is_above_target=exact_percentage >= target_value,
        )


_default_calculator = StandardMetricsCalculator()


def calculate_metrics(subject: Subject, target: float) -> SubjectMetrics:
    return _default_calculator.for_subject(subject, target)


def get_global_metrics(subjects: Sequence[Subject], target: float) -> GlobalMetrics:
    return _default_calculator.for_subjects(subjects, target)
