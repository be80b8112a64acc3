from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.enums import EmployeeType
from ..core.exceptions import DirectoryUnavailable, ValidationError
from ..container import Container
from .model import Period


def _period_from_args() -> Period:
    start = request.args.get("start", "")
    end = request.args.get("end", "")
    if not start or not end:
        raise ValidationError("start and end are required (YYYY-MM-DD)")
    return Period.parse(start, end)


def _category(raw: str) -> EmployeeType | None:
    try:
        return EmployeeType(raw.lower())
    except ValueError:
        return None


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(DirectoryUnavailable)
    def handle_directory_unavailable(e: DirectoryUnavailable):
        return jsonify({"error": str(e)}), 503

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_run")
    def payroll_run():
        period = _period_from_args()

        categories = None
        raw = request.args.get("category")
        if raw:
            category = _category(raw)
            if category is None:
                return jsonify({"error": f"Unknown category {raw!r}"}), 404
            categories = [category]

        run = container.payroll_run_service.run(period, categories)
        return jsonify(run.to_dict())

    @app.route("/api/payroll/<category>", methods=["GET"], endpoint="payroll_by_category")
    def payroll_by_category(category: str):
        employee_type = _category(category)
        if employee_type is None:
            return jsonify({"error": f"Unknown category {category!r}"}), 404

        period = _period_from_args()
        payrolls = container.payroll_run_service.calculator_for(employee_type).execute(period)
        return jsonify([p.to_dict() for p in payrolls])
