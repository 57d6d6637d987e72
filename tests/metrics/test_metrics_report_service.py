from __future__ import annotations

from typing import Optional, Sequence

import pytest

from src.bunksmart.bunksmart.core.enums import AttendanceKind
from src.bunksmart.bunksmart.metrics.service import MetricsReportService
from src.bunksmart.bunksmart.state.model import UserSettings
from src.bunksmart.bunksmart.state.store import AppStateStore
from src.bunksmart.bunksmart.subjects.model import AttendanceEvent, Subject


class InMemoryState:
    def __init__(self, subjects: Optional[Sequence[Subject]] = None, settings: Optional[UserSettings] = None):
        self.subjects = subjects
        self.settings = settings

    def load_subjects(self):
        return self.subjects

    def save_subjects(self, subjects):
        self.subjects = list(subjects)

    def load_settings(self):
        return self.settings

    def save_settings(self, settings):
        self.settings = settings


def subject(subject_id: str, marks: str, color: str = "#10b981") -> Subject:
    history = tuple(
        AttendanceEvent(
            event_id=f"{subject_id}-{i}",
            timestamp=i,
            kind=AttendanceKind.PRESENT if m == "P" else AttendanceKind.ABSENT,
        )
        for i, m in enumerate(marks)
    )
    return Subject(subject_id=subject_id, name=subject_id, color=color, history=history)


def test_dashboard_rows_and_split():
    store = AppStateStore(
        InMemoryState(
            subjects=[subject("maths", "PPPPPPPPPAAA"), subject("physics", "PPPPP")],
            settings=UserSettings(target_percentage=75),
        )
    )
    svc = MetricsReportService(store)

    data = svc.build_dashboard()

    assert data.target_percentage == 75
    assert data.overall.total_classes == 17
    assert data.overall.total_attended == 14
    assert data.split == [{"name": "Attended", "value": 14}, {"name": "Bunked", "value": 3}]
    assert [r["id"] for r in data.subjects] == ["maths", "physics"]
    assert data.subjects[0]["metrics"]["status"] == "warning"
    assert data.subjects[0]["metrics"]["safeToBunk"] == 0
    assert data.subjects[1]["metrics"]["safeToBunk"] == 1


def test_dashboard_follows_target_changes():
    state = InMemoryState(subjects=[subject("maths", "PPPPPPPPPAAA")], settings=UserSettings(target_percentage=75))
    store = AppStateStore(state)
    svc = MetricsReportService(store)

    assert svc.build_dashboard().subjects[0]["metrics"]["status"] == "warning"

    store.replace_settings(UserSettings(target_percentage=85))
    row = svc.build_dashboard().subjects[0]["metrics"]
    assert row["status"] == "critical"
    assert row["mustAttend"] == 8


def test_analytics_caps_bar_width():
    store = AppStateStore(InMemoryState(subjects=[subject("maths", "PPPA"), subject("art", "")]))
    bars = MetricsReportService(store).build_analytics()

    assert bars[0]["percentage"] == pytest.approx(75)
    assert bars[0]["bar_width"] == pytest.approx(75)
    assert bars[0]["is_above_target"] is True
    assert bars[1]["percentage"] == 0
    assert bars[1]["is_above_target"] is False
