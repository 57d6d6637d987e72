from __future__ import annotations

from typing import Optional

from ..core.constants import ACCOUNTS_FILE_NAME
from ..storage.json_base import JsonFileStore
from .model import Account
from .repository import AccountRepository


class JsonAccountRepository(AccountRepository):
    def __init__(self, files: JsonFileStore):
        self._files = files

    def _rows(self) -> dict:
        rows = self._files.read(ACCOUNTS_FILE_NAME, {})
        return rows if isinstance(rows, dict) else {}

    def get_by_email(self, email: str) -> Optional[Account]:
        row = self._rows().get(email)
        if not row:
            return None
        return Account(
            email=email,
            password_hash=row["passwordHash"],
            created_at=int(row.get("createdAt", 0)),
        )

    def create_account(self, *, email: str, password_hash: str, created_at: int) -> Account:
        rows = self._rows()
        rows[email] = {"passwordHash": password_hash, "createdAt": created_at}
        self._files.write(ACCOUNTS_FILE_NAME, rows)
        return Account(email=email, password_hash=password_hash, created_at=created_at)
