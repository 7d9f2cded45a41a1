from __future__ import annotations

import threading
from contextlib import contextmanager
from datetime import date
from typing import Hashable

PeriodKey = tuple[int, int, date, date]


class PeriodLocks:
    """In-process mutex per (company, employee, from, to).

    Serializes the check-then-insert of one payroll period inside a worker; the
    unique key on the payroll table still covers other processes.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[Hashable, threading.Lock] = {}
        self._waiters: dict[Hashable, int] = {}

    @contextmanager
    def hold(self, key: PeriodKey):
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._waiters[key] -= 1
                if self._waiters[key] == 0:
                    del self._waiters[key]
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
