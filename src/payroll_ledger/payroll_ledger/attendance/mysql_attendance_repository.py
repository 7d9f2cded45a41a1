from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.mysql_base import MySQLRepository, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, employee_id, company_id, work_date, status"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        company_id=int(r["company_id"]),
        work_date=r["work_date"],
        status=AttendanceStatus.from_multiplier(r["status"]),
    )


class MySQLAttendanceRepository(MySQLRepository, AttendanceRepository):
    def list_in_range(
        self,
        employee_id: int,
        company_id: int,
        from_date: date,
        to_date: date,
    ) -> Sequence[AttendanceRecord]:
        with self._cursor() as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE employee_id=%s AND company_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (int(employee_id), int(company_id), from_date, to_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with self._cursor() as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(
        self,
        *,
        employee_id: int,
        company_id: int,
        work_date: date,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        with self._cursor() as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, company_id, work_date, status)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (int(employee_id), int(company_id), work_date, status.pay_multiplier),
            )

            # If it was an update, lastrowid can be 0; fetch attendance_id.
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            return _to_record(fetchone(cur))

    def list_for_date(self, company_id: int, work_date: date) -> Sequence[AttendanceRecord]:
        with self._cursor() as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE company_id=%s AND work_date=%s
                ORDER BY employee_id ASC
                """,
                (int(company_id), work_date),
            )
            return [_to_record(r) for r in fetchall(cur)]
