from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.enums import EmployeeType
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        raw_type = request.args.get("type")
        try:
            employee_type = EmployeeType(raw_type) if raw_type else None
        except ValueError:
            return jsonify({"error": f"Unknown employee type {raw_type!r}"}), 400

        employees = container.employee_service.list(employee_type)
        return jsonify([container.employee_service.to_dict(e) for e in employees])

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_detail")
    def employees_detail(employee_id: str):
        try:
            employee = container.employee_service.get(employee_id)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 404
        return jsonify(container.employee_service.to_dict(employee))
