from __future__ import annotations

import json
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

import structlog

logger = structlog.get_logger()


class JsonFileStore:
    """Data directory holding one JSON blob per key.

    Note: Files are rewritten whole on every save (small, single-user data).
    """

    def __init__(self, data_dir: str | os.PathLike):
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, file_name: str) -> Path:
        return self._data_dir / file_name

    def read(self, file_name: str, default: Any = None) -> Any:
        path = self.path_for(file_name)
        if not path.exists():
            return default

        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("json_blob_unreadable", path=str(path), error=str(e))
            return default

    def write(self, file_name: str, data: Any) -> None:
        with atomic_write(self.path_for(file_name)) as f:
            json.dump(data, f, ensure_ascii=False, indent=2)


@contextmanager
def atomic_write(path: Path) -> Iterator[Any]:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    f = tmp_path.open("w", encoding="utf-8")
    try:
        yield f
        f.close()
        os.replace(tmp_path, path)
    except Exception:
        f.close()
        tmp_path.unlink(missing_ok=True)
        raise
