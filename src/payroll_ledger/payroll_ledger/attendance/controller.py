from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_optional_date, today_local
from ..common.http import company_required, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @company_required
    def attendance_list(company_id: int):
        work_date = parse_optional_date(request.args.get("date")) or today_local()
        records = container.attendance_service.list_for_date(company_id, work_date)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_mark")
    @company_required
    def attendance_mark(company_id: int):
        body = json_body()
        record = container.attendance_service.mark(
            company_id,
            body.get("employeeId"),
            parse_iso_date(body.get("date")),
            body.get("status"),
        )
        return jsonify(record.to_dict()), 201
