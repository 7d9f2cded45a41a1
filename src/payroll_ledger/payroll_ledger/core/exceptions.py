from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an employee/account/advance is missing or belongs to another company."""


class DuplicatePeriodError(DomainError):
    """Raised when a payroll record already exists for the (employee, period) tuple."""

    def __init__(self, employee_id: int, from_date, to_date):
        super().__init__("Payroll already completed for this week")
        self.employee_id = employee_id
        self.from_date = from_date
        self.to_date = to_date


class PartialCommitError(DomainError):
    """Raised by batch commits when some employees failed while others succeeded."""

    def __init__(self, succeeded: list, failed: list):
        super().__init__(f"{len(failed)} of {len(succeeded) + len(failed)} payroll commits failed")
        self.succeeded = succeeded
        self.failed = failed


class StorageError(DomainError):
    """Raised when the underlying persistence layer fails."""
