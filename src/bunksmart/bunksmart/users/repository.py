from __future__ import annotations

from typing import Optional, Protocol

from .model import Account


class AccountRepository(Protocol):
    """Giao diện repository cho Account.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp file cụ thể.
    """

    def get_by_email(self, email: str) -> Optional[Account]:
        raise NotImplementedError

    def create_account(self, *, email: str, password_hash: str, created_at: int) -> Account:
        raise NotImplementedError
