from __future__ import annotations

from dataclasses import replace

import structlog

from ..common.validators import require_target_percentage
from .model import UserSettings
from .store import AppStateStore

logger = structlog.get_logger()


class SettingsService:
    """Use case: change the global attendance target."""

    def __init__(self, store: AppStateStore):
        self._store = store

    def get_settings(self) -> UserSettings:
        return self._store.settings

    def set_target(self, target) -> UserSettings:
        value = require_target_percentage(target)
        self._store.replace_settings(replace(self._store.settings, target_percentage=value))

        logger.info("target_changed", target_percentage=value)
        return self._store.settings
