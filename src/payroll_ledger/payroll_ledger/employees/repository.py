from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Read-only view of the roster; employee CRUD lives elsewhere."""

    def list_active(self, company_id: int) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, company_id: int, employee_id: int) -> Optional[Employee]:
        """Return None when the employee does not exist or belongs to another company."""

        raise NotImplementedError
