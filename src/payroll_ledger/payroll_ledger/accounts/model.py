from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Budget envelope / project that transactions are booked against."""

    account_id: int
    company_id: int
    name: str
