from __future__ import annotations

from datetime import datetime

import pytest

from src.bunksmart.bunksmart.core.enums import AttendanceKind
from src.bunksmart.bunksmart.core.exceptions import NotFoundError, ValidationError
from src.bunksmart.bunksmart.metrics.calculator.standard_calculator import calculate_metrics
from src.bunksmart.bunksmart.state.store import AppStateStore
from src.bunksmart.bunksmart.subjects.service import SubjectService


class InMemoryState:
    def __init__(self):
        self.subjects = None
        self.settings = None

    def load_subjects(self):
        return self.subjects

    def save_subjects(self, subjects):
        self.subjects = list(subjects)

    def load_settings(self):
        return self.settings

    def save_settings(self, settings):
        self.settings = settings


@pytest.fixture
def state():
    return InMemoryState()


@pytest.fixture
def svc(state):
    return SubjectService(AppStateStore(state))


def test_add_subject_defaults_color_and_saves(svc, state):
    subject = svc.add_subject(name="  Data Structures ")

    assert subject.name == "Data Structures"
    assert subject.color == "#4f46e5"
    assert subject.history == ()
    assert [s.subject_id for s in state.subjects] == [subject.subject_id]


def test_add_subject_rejects_blank_name_and_unknown_color(svc):
    with pytest.raises(ValidationError):
        svc.add_subject(name="   ")
    with pytest.raises(ValidationError):
        svc.add_subject(name="Maths", color="#000000")


def test_log_attendance_appends_event_with_timestamp(svc):
    subject = svc.add_subject(name="Maths")
    now = datetime(2026, 3, 2, 9, 30)

    event = svc.log_attendance(subject.subject_id, "present", now=now)

    assert event.kind == AttendanceKind.PRESENT
    assert event.timestamp == int(now.timestamp() * 1000)
    assert svc.get_subject(subject.subject_id).history == (event,)


def test_log_attendance_rejects_unknown_type(svc):
    subject = svc.add_subject(name="Maths")
    with pytest.raises(ValidationError):
        svc.log_attendance(subject.subject_id, "late")


def test_log_attendance_unknown_subject(svc):
    with pytest.raises(NotFoundError):
        svc.log_attendance("nope", AttendanceKind.ABSENT)


def test_history_is_newest_first(svc):
    subject = svc.add_subject(name="Maths")
    svc.log_attendance(subject.subject_id, AttendanceKind.PRESENT, now=datetime(2026, 3, 3, 9, 0))
    svc.log_attendance(subject.subject_id, AttendanceKind.ABSENT, now=datetime(2026, 3, 1, 9, 0))
    svc.log_attendance(subject.subject_id, AttendanceKind.PRESENT, now=datetime(2026, 3, 2, 9, 0))

    rows = svc.get_history_ui(subject.subject_id)

    assert [r["type"] for r in rows] == ["present", "present", "absent"]
    assert rows[0]["date"] == "Tue, 03 Mar 2026"
    assert rows[0]["time"] == "09:00 AM"


def test_remove_record_changes_metrics(svc):
    subject = svc.add_subject(name="Maths")
    svc.log_attendance(subject.subject_id, AttendanceKind.PRESENT)
    absent = svc.log_attendance(subject.subject_id, AttendanceKind.ABSENT)

    assert calculate_metrics(svc.get_subject(subject.subject_id), 75).percentage == pytest.approx(50)

    svc.remove_record(subject.subject_id, absent.event_id)

    m = calculate_metrics(svc.get_subject(subject.subject_id), 75)
    assert m.total == 1
    assert m.percentage == pytest.approx(100)

    with pytest.raises(NotFoundError):
        svc.remove_record(subject.subject_id, absent.event_id)


def test_delete_subject_and_reset(svc, state):
    a = svc.add_subject(name="A")
    svc.add_subject(name="B")

    svc.delete_subject(a.subject_id)
    assert [s.name for s in svc.list_subjects()] == ["B"]

    with pytest.raises(NotFoundError):
        svc.delete_subject(a.subject_id)

    svc.reset_semester()
    assert svc.list_subjects() == ()
    assert state.subjects == []
