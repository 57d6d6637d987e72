from __future__ import annotations

from typing import Optional, Sequence

import structlog

from ..common.validators import require_target_percentage
from ..core.constants import SETTINGS_FILE_NAME, SUBJECTS_FILE_NAME
from ..core.enums import AttendanceKind
from ..core.exceptions import ValidationError
from ..storage.json_base import JsonFileStore
from ..subjects.model import AttendanceEvent, Subject
from .model import UserProfile, UserSettings
from .repository import StateRepository

logger = structlog.get_logger()


def subject_to_row(subject: Subject) -> dict:
    return {
        "id": subject.subject_id,
        "name": subject.name,
        "color": subject.color,
        "history": [
            {"id": e.event_id, "timestamp": e.timestamp, "type": e.kind.value}
            for e in subject.history
        ],
    }


def subject_from_row(row: dict) -> Subject:
    return Subject(
        subject_id=str(row["id"]),
        name=str(row["name"]),
        color=str(row["color"]),
        history=tuple(
            AttendanceEvent(
                event_id=str(h["id"]),
                timestamp=int(h["timestamp"]),
                kind=AttendanceKind(h["type"]),
            )
            for h in row.get("history") or []
        ),
    )


def settings_to_row(settings: UserSettings) -> dict:
    profile = settings.profile
    return {
        "targetPercentage": settings.target_percentage,
        "profile": (
            {
                "name": profile.name,
                "usn": profile.usn,
                "semester": profile.semester,
                "collegeName": profile.college_name,
                "email": profile.email,
            }
            if profile
            else None
        ),
        "isLoggedIn": settings.is_logged_in,
        "hasCompletedSetup": settings.has_completed_setup,
    }


def settings_from_row(row: dict) -> UserSettings:
    p = row.get("profile")
    profile = (
        UserProfile(
            email=str(p.get("email", "")),
            name=str(p.get("name", "")),
            usn=str(p.get("usn", "")),
            semester=str(p.get("semester", "")),
            college_name=str(p.get("collegeName", "")),
        )
        if p
        else None
    )
    return UserSettings(
        target_percentage=require_target_percentage(row["targetPercentage"]),
        profile=profile,
        is_logged_in=bool(row.get("isLoggedIn", False)),
        has_completed_setup=bool(row.get("hasCompletedSetup", False)),
    )


class JsonStateRepository(StateRepository):
    """Two blobs under the data directory: the subject list and the settings record."""

    def __init__(self, files: JsonFileStore):
        self._files = files

    def load_subjects(self) -> Optional[Sequence[Subject]]:
        rows = self._files.read(SUBJECTS_FILE_NAME)
        if rows is None:
            return None
        try:
            return [subject_from_row(r) for r in rows]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("subjects_blob_malformed", error=str(e))
            return None

    def save_subjects(self, subjects: Sequence[Subject]) -> None:
        self._files.write(SUBJECTS_FILE_NAME, [subject_to_row(s) for s in subjects])

    def load_settings(self) -> Optional[UserSettings]:
        row = self._files.read(SETTINGS_FILE_NAME)
        if row is None:
            return None
        try:
            return settings_from_row(row)
        except (KeyError, TypeError, ValueError, AttributeError, ValidationError) as e:
            logger.warning("settings_blob_malformed", error=str(e))
            return None

    def save_settings(self, settings: UserSettings) -> None:
        self._files.write(SETTINGS_FILE_NAME, settings_to_row(settings))
