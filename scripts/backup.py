"""Backup the JSON data directory into backups/<timestamp>/."""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_dir = Path(settings.DATA_DIR)
    if not data_dir.is_dir():
        raise SystemExit(f"Data directory not found: {data_dir}")

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = REPO_ROOT / "backups" / f"bunksmart_{ts}"
    shutil.copytree(data_dir, out_dir, ignore=shutil.ignore_patterns("*.tmp"))

    print(f"OK: Backup created: {out_dir}")


if __name__ == "__main__":
    main()
