"""Seed demo subjects with a few weeks of attendance into DATA_DIR."""

from __future__ import annotations

import importlib
import sys
from datetime import datetime, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.bunksmart.bunksmart.container import build_container
from src.bunksmart.bunksmart.core.constants import SUBJECT_COLORS
from src.bunksmart.bunksmart.core.enums import AttendanceKind

# name -> pattern of present (P) / absent (A), oldest first
DEMO_SUBJECTS = {
    "Data Structures": "PPPPAPPPPPPAPPPPPPPP",
    "Operating Systems": "PPAPPAPPAPPPAPAPPPAP",
    "Engineering Maths": "PPPPPPPPPPPPPPPAPPPP",
    "Computer Networks": "PAPPAAPPPAPPAPPPAPPA",
}


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(app_config={k: getattr(settings, k) for k in dir(settings) if k.isupper()})
    svc = container.subject_service

    if svc.list_subjects():
        raise SystemExit("Data directory already has subjects; run a backup and reset first.")

    start = datetime.now() - timedelta(days=30)
    for i, (name, pattern) in enumerate(DEMO_SUBJECTS.items()):
        subject = svc.add_subject(name=name, color=SUBJECT_COLORS[i % len(SUBJECT_COLORS)])
        for day, mark in enumerate(pattern):
            kind = AttendanceKind.PRESENT if mark == "P" else AttendanceKind.ABSENT
            svc.log_attendance(subject.subject_id, kind, now=start + timedelta(days=day, hours=9))

    print(f"OK: Seeded {len(DEMO_SUBJECTS)} subjects -> {settings.DATA_DIR}")


if __name__ == "__main__":
    main()
