from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Thực thể miền (domain): tài khoản đăng nhập (mô phỏng).

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập file).
    """

    email: str
    password_hash: str
    created_at: int


@dataclass(frozen=True)
class PendingSignup:
    """Signup waiting for its verification code."""

    email: str
    password_hash: str
    code: str
    issued_at: int
