from __future__ import annotations

from typing import Optional, Protocol

from .model import Account


class AccountRepository(Protocol):
    def get_by_id(self, company_id: int, account_id: int) -> Optional[Account]:
        raise NotImplementedError
