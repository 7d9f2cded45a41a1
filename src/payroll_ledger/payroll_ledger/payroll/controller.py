from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..common.http import company_required, json_body
from ..common.validators import require_id
from ..core.exceptions import ValidationError
from ..container import Container
from .model import CommitLine


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/preview", methods=["GET"], endpoint="payroll_preview")
    @company_required
    def payroll_preview(company_id: int):
        rows = container.payroll_service.compute_preview(
            company_id,
            parse_optional_date(request.args.get("fromDate")),
            parse_optional_date(request.args.get("toDate")),
        )
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_list")
    @company_required
    def payroll_list(company_id: int):
        employee_id = request.args.get("employeeId")
        account_id = request.args.get("accountId")
        records = container.payroll_service.list_payrolls(
            company_id,
            from_date=parse_optional_date(request.args.get("fromDate")),
            to_date=parse_optional_date(request.args.get("toDate")),
            employee_id=require_id(employee_id, "employeeId") if employee_id else None,
            account_id=require_id(account_id, "accountId") if account_id else None,
        )
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/payroll", methods=["POST"], endpoint="payroll_commit")
    @company_required
    def payroll_commit(company_id: int):
        body = json_body()
        commit = container.payroll_service.commit_payroll(
            company_id,
            body.get("employeeId"),
            body.get("accountId"),
            parse_optional_date(body.get("fromDate")),
            parse_optional_date(body.get("toDate")),
            body.get("amount"),
            body.get("remarks"),
        )
        return jsonify(commit.to_dict()), 201

    @app.route("/api/payroll/batch", methods=["POST"], endpoint="payroll_commit_batch")
    @company_required
    def payroll_commit_batch(company_id: int):
        body = json_body()
        items = body.get("items")
        if not isinstance(items, list) or not items:
            raise ValidationError("items are required")

        lines = []
        for item in items:
            if not isinstance(item, dict):
                raise ValidationError("items must be objects")
            lines.append(
                CommitLine(
                    employee_id=item.get("employeeId"),
                    net_amount=item.get("amount"),
                    remarks=item.get("remarks"),
                )
            )

        result = container.payroll_service.commit_batch(
            company_id,
            body.get("accountId"),
            parse_optional_date(body.get("fromDate")),
            parse_optional_date(body.get("toDate")),
            lines,
        )
        return jsonify(result.to_dict()), 201
