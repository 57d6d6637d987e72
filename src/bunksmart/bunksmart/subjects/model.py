from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..core.enums import AttendanceKind


@dataclass(frozen=True)
class AttendanceEvent:
    """Thực thể miền (domain): một lần điểm danh có mặt/vắng.

    timestamp là epoch milliseconds.
    """

    event_id: str
    timestamp: int
    kind: AttendanceKind


@dataclass(frozen=True)
class Subject:
    """Thực thể miền (domain): Môn học cùng lịch sử điểm danh.

    Lưu ý: history giữ thứ tự thêm vào; không sửa tại chỗ, luôn tạo bản mới.
    """

    subject_id: str
    name: str
    color: str
    history: Tuple[AttendanceEvent, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.history)

    @property
    def attended(self) -> int:
        return sum(1 for e in self.history if e.kind == AttendanceKind.PRESENT)
