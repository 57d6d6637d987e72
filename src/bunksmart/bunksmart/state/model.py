from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_TARGET_PERCENTAGE


@dataclass(frozen=True)
class UserProfile:
    """Thông tin hồ sơ sinh viên (điền sau lần đăng nhập đầu tiên)."""

    email: str
    name: str = ""
    usn: str = ""
    semester: str = ""
    college_name: str = ""


@dataclass(frozen=True)
class UserSettings:
    """Cài đặt toàn cục: mục tiêu % dùng chung cho mọi môn + trạng thái phiên."""

    target_percentage: float = DEFAULT_TARGET_PERCENTAGE
    profile: Optional[UserProfile] = None
    is_logged_in: bool = False
    has_completed_setup: bool = False
