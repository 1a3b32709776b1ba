from __future__ import annotations

import dataclasses

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        if container.session_manager.session.role != Role.ADMIN:
            return jsonify({"success": False, "message": "You do not have access"}), 403

        employee_id = request.args.get("employee_id") or None
        data = container.metrics_service.dashboard(employee_id=employee_id)
        return jsonify(
            {
                "stats": dataclasses.asdict(data.stats),
                "records": [dataclasses.asdict(r) for r in data.records],
                "employee_ids": data.employee_ids,
            }
        )
