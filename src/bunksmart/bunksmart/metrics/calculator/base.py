from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...subjects.model import Subject
from ..model import GlobalMetrics, SubjectMetrics


class MetricsCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance metrics)."""

    @abstractmethod
    def from_counts(self, *, total: int, attended: int, target: float) -> SubjectMetrics:
        raise NotImplementedError

    @abstractmethod
    def for_subjects(self, subjects: Sequence[Subject], target: float) -> GlobalMetrics:
        raise NotImplementedError

    def for_subject(self, subject: Subject, target: float) -> SubjectMetrics:
        return self.from_counts(total=subject.total, attended=subject.attended, target=target)
