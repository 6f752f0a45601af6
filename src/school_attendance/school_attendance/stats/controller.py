from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.model import Scope
from ..common.validators import optional_int
from ..core.constants import DEFAULT_ISSUE_THRESHOLD, DEFAULT_TOP_PERFORMERS
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/stats", methods=["GET"], endpoint="api_attendance_stats")
    def api_attendance_stats():
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        if not start_s or not end_s:
            return jsonify({"error": "start and end are required"}), 400

        try:
            scope = Scope(
                teacher_id=optional_int(request.args.get("teacher_id"), "teacher_id"),
                class_id=optional_int(request.args.get("class_id"), "class_id"),
            )
            top = optional_int(request.args.get("top"), "top")
            report = container.statistics_aggregator.build_report(
                start_s,
                end_s,
                scope,
                top=DEFAULT_TOP_PERFORMERS if top is None else top,
                threshold=DEFAULT_ISSUE_THRESHOLD,
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(report.to_dict())
