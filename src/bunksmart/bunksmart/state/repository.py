from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..subjects.model import Subject
from .model import UserSettings


class StateRepository(Protocol):
    """Persistence port for the application state.

    Lưu ý (DIP): AppStateStore phụ thuộc vào interface này, không phụ thuộc trực tiếp file/DB cụ thể.
    """

    def load_subjects(self) -> Optional[Sequence[Subject]]:
        """Return None when nothing has been saved yet."""

        raise NotImplementedError

    def save_subjects(self, subjects: Sequence[Subject]) -> None:
        raise NotImplementedError

    def load_settings(self) -> Optional[UserSettings]:
        """Return None when nothing has been saved yet."""

        raise NotImplementedError

    def save_settings(self, settings: UserSettings) -> None:
        raise NotImplementedError
