from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays/<int:year>", methods=["GET"], endpoint="api_holidays_year")
    def api_holidays_year(year: int):
        try:
            holidays = container.holiday_store.holidays_for_year(year)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify([h.to_dict() for h in holidays])

    @app.route("/api/holidays/<int:year>/<int:month>", methods=["GET"], endpoint="api_holidays_month")
    def api_holidays_month(year: int, month: int):
        try:
            holidays = container.holiday_store.holidays_for_month(year, month)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify([h.to_brief() for h in holidays])

    @app.route("/api/holidays/check/<date_s>", methods=["GET"], endpoint="api_holidays_check")
    def api_holidays_check(date_s: str):
        try:
            result = container.school_day_resolver.classify(date_s)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(result.to_dict())

    @app.route("/api/holidays/non-school-days", methods=["GET"], endpoint="api_non_school_days")
    def api_non_school_days():
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        if not start_s or not end_s:
            return jsonify({"error": "start and end are required"}), 400

        try:
            days = container.school_day_resolver.non_school_days(start_s, end_s)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify([d.to_dict() for d in days])
