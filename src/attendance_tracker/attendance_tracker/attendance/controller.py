from __future__ import annotations

import dataclasses
from functools import wraps

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_iso, parse_iso_datetime
from ..container import Container


def register(app: Flask, container: Container) -> None:
    sessions = container.session_manager
    attendance = container.attendance_service

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if sessions.session.role is None:
                return jsonify({"success": False, "message": "Please sign in to continue"}), 401
            return view(*args, **kwargs)

        return wrapper

    def _event_timestamp():
        """Timestamp from the request body, or the local clock when absent."""
        data = request.get_json(silent=True) or {}
        timestamp = (data.get("timestamp") or "").strip()
        if not timestamp:
            return now_iso()
        if parse_iso_datetime(timestamp) is None:
            return None
        return timestamp

    @app.route("/attendance/checkin", methods=["POST"], endpoint="checkin")
    def checkin():
        timestamp = _event_timestamp()
        if timestamp is None:
            return jsonify({"success": False, "message": "Invalid timestamp"}), 400

        attendance.register_check_in(timestamp)
        return jsonify({"success": True, "timestamp": timestamp})

    @app.route("/attendance/checkout", methods=["POST"], endpoint="checkout")
    def checkout():
        timestamp = _event_timestamp()
        if timestamp is None:
            return jsonify({"success": False, "message": "Invalid timestamp"}), 400

        attendance.register_check_out(timestamp)
        return jsonify({"success": True, "timestamp": timestamp})

    @app.route("/attendance/me", methods=["GET"], endpoint="my_attendance")
    @login_required
    def my_attendance():
        employee = sessions.current_employee
        if employee is None:
            return jsonify({"success": False, "message": "Only employees have an attendance history"}), 403

        summary = attendance.get_employee_summary(employee.id)
        return jsonify(
            {
                "employee": {"id": employee.id, "name": employee.name},
                "summary": dataclasses.asdict(summary),
                "history": attendance.get_history_ui(employee.id),
            }
        )

    @app.route("/attendance/records", methods=["GET"], endpoint="records")
    @login_required
    def records():
        return jsonify([dataclasses.asdict(r) for r in attendance.list_records()])
