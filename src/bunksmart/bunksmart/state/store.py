from __future__ import annotations

from typing import Optional, Sequence, Tuple

import structlog

from ..core.constants import DEFAULT_TARGET_PERCENTAGE
from ..subjects.model import Subject
from .model import UserSettings
from .repository import StateRepository

logger = structlog.get_logger()


class AppStateStore:
    """Single source of truth for subjects + settings.

    Loads once from the persistence port on construction and writes back on
    every mutation. Snapshots handed out are immutable.
    """

    def __init__(self, persistence: StateRepository, *, default_target: float = DEFAULT_TARGET_PERCENTAGE):
        self._persistence = persistence

        subjects = persistence.load_subjects()
        settings = persistence.load_settings()

        self._subjects: Tuple[Subject, ...] = tuple(subjects or ())
        self._settings: UserSettings = settings or UserSettings(target_percentage=default_target)

        logger.info(
            "state_loaded",
            subjects=len(self._subjects),
            has_saved_settings=settings is not None,
        )

    @property
    def subjects(self) -> Tuple[Subject, ...]:
        return self._subjects

    @property
    def settings(self) -> UserSettings:
        return self._settings

    def find_subject(self, subject_id: str) -> Optional[Subject]:
        for s in self._subjects:
            if s.subject_id == subject_id:
                return s
        return None

    def replace_subjects(self, subjects: Sequence[Subject]) -> None:
        self._subjects = tuple(subjects)
        self._persistence.save_subjects(self._subjects)

    def replace_settings(self, settings: UserSettings) -> None:
        self._settings = settings
        self._persistence.save_settings(settings)
