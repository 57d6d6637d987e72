from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime
from typing import Optional

import structlog

from ..common.datetime_utils import from_epoch_ms, now_local, to_epoch_ms
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_SUBJECT_COLOR, SUBJECT_COLORS
from ..core.enums import AttendanceKind
from ..core.exceptions import NotFoundError, ValidationError
from ..state.store import AppStateStore
from .model import AttendanceEvent, Subject

logger = structlog.get_logger()


class SubjectService:
    """Use case: manage subjects and their attendance history."""

    def __init__(self, store: AppStateStore):
        self._store = store

    def list_subjects(self):
        return self._store.subjects

    def get_subject(self, subject_id: str) -> Subject:
        subject = self._store.find_subject(subject_id)
        if not subject:
            raise NotFoundError("Subject not found")
        return subject

    def add_subject(self, *, name: str, color: Optional[str] = None) -> Subject:
        name = require_non_empty(name, "Subject name")
        color = color or DEFAULT_SUBJECT_COLOR
        if color not in SUBJECT_COLORS:
            raise ValidationError("Color is not in the palette")

        subject = Subject(subject_id=str(uuid.uuid4()), name=name, color=color)
        self._store.replace_subjects([*self._store.subjects, subject])

        logger.info("subject_added", subject_id=subject.subject_id, name=name)
        return subject

    def delete_subject(self, subject_id: str) -> None:
        self.get_subject(subject_id)
        self._store.replace_subjects([s for s in self._store.subjects if s.subject_id != subject_id])
        logger.info("subject_deleted", subject_id=subject_id)

    def log_attendance(self, subject_id: str, kind: AttendanceKind, *, now: Optional[datetime] = None) -> AttendanceEvent:
        subject = self.get_subject(subject_id)
        try:
            kind = AttendanceKind(kind)
        except ValueError:
            raise ValidationError("Attendance type must be 'present' or 'absent'")

        now = now or now_local()
        event = AttendanceEvent(event_id=str(uuid.uuid4()), timestamp=to_epoch_ms(now), kind=kind)
        updated = replace(subject, history=(*subject.history, event))
        self._replace_one(updated)

        logger.info("attendance_logged", subject_id=subject_id, kind=kind.value)
        return event

    def remove_record(self, subject_id: str, record_id: str) -> None:
        subject = self.get_subject(subject_id)
        history = tuple(e for e in subject.history if e.event_id != record_id)
        if len(history) == len(subject.history):
            raise NotFoundError("Attendance record not found")

        self._replace_one(replace(subject, history=history))
        logger.info("attendance_removed", subject_id=subject_id, record_id=record_id)

    def reset_semester(self) -> None:
        count = len(self._store.subjects)
        self._store.replace_subjects([])
        logger.info("semester_reset", subjects_cleared=count)

    def get_history_ui(self, subject_id: str) -> list[dict]:
        subject = self.get_subject(subject_id)
        # newest first; same-millisecond events keep "last logged first"
        events = sorted(subject.history, key=lambda e: e.timestamp)[::-1]
        return [self._to_ui(e) for e in events]

    def _replace_one(self, updated: Subject) -> None:
        self._store.replace_subjects(
            [updated if s.subject_id == updated.subject_id else s for s in self._store.subjects]
        )

    def _to_ui(self, e: AttendanceEvent) -> dict:
        at = from_epoch_ms(e.timestamp)
        return {
            "id": e.event_id,
            "timestamp": e.timestamp,
            "type": e.kind.value,
            "date": at.strftime("%a, %d %b %Y"),
            "time": at.strftime("%I:%M %p"),
        }
