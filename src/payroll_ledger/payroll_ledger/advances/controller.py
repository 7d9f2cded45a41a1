from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import company_required, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/advances", methods=["GET"], endpoint="advances_list")
    @company_required
    def advances_list(company_id: int):
        employee_id = request.args.get("employeeId")
        advances = container.advance_service.list_advances(
            company_id,
            employee_id=employee_id or None,
        )
        return jsonify([a.to_dict() for a in advances])

    @app.route("/api/advances", methods=["POST"], endpoint="advances_create")
    @company_required
    def advances_create(company_id: int):
        body = json_body()
        advance = container.advance_service.record_advance_payment(
            company_id,
            body.get("employeeId"),
            body.get("accountId"),
            body.get("amount"),
            parse_iso_date(body.get("date")),
            body.get("reason"),
        )
        return jsonify(advance.to_dict()), 201

    @app.route("/api/advances/<int:advance_id>", methods=["PUT"], endpoint="advances_update")
    @company_required
    def advances_update(company_id: int, advance_id: int):
        body = json_body()
        advance = container.advance_service.reconcile_advance(
            company_id,
            advance_id,
            account_id=body.get("accountId"),
            amount=body.get("amount"),
            advance_date=parse_iso_date(body.get("date")),
            reason=body.get("reason"),
            employee_id=body.get("employeeId"),
        )
        return jsonify(advance.to_dict())

    @app.route("/api/advances/<int:advance_id>", methods=["DELETE"], endpoint="advances_delete")
    @company_required
    def advances_delete(company_id: int, advance_id: int):
        container.advance_service.delete_advance(company_id, advance_id)
        return jsonify({"message": "Advance deleted successfully"})
