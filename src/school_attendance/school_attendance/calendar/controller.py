from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.model import Scope
from ..common.validators import optional_int
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/calendar/<int:year>/<int:month>", methods=["GET"], endpoint="api_calendar_month")
    def api_calendar_month(year: int, month: int):
        try:
            scope = Scope(
                teacher_id=optional_int(request.args.get("teacher_id"), "teacher_id"),
                class_id=optional_int(request.args.get("class_id"), "class_id"),
            )
            data = container.calendar_aggregator.build_month(year, month, scope)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(data.to_dict())
