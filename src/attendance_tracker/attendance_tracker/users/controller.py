from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_non_empty, require_role
from ..container import Container
from ..core.exceptions import ValidationError
from .identity import home_route_for_role
from .service import SessionManager

logger = logging.getLogger(__name__)


def session_payload(sessions: SessionManager) -> dict:
    employee = sessions.current_employee
    role = sessions.session.role
    return {
        "role": role.value if role else None,
        "employee": {"id": employee.id, "name": employee.name} if employee else None,
        "flash_message": sessions.flash_message,
    }


def register(app: Flask, container: Container) -> None:
    sessions = container.session_manager

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            email = require_non_empty(data.get("email", ""), "Email")
            role = require_role(data.get("role"))
        except ValidationError as e:
            logger.warning("Login rejected: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400

        result = sessions.login(email, data.get("password") or "", role)
        return jsonify({"success": True, "role": result.role.value, "redirect": home_route_for_role(result.role)})

    @app.route("/register", methods=["POST"], endpoint="register")
    def register_account():
        data = request.get_json(silent=True) or {}
        try:
            email = require_non_empty(data.get("email", ""), "Email")
            role = require_role(data.get("role", "employee"))
        except ValidationError as e:
            logger.warning("Registration rejected: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400

        sessions.register_account(
            name=data.get("name") or "",
            credential=email,
            password=data.get("password") or "",
            role=role,
            employee_id=data.get("employee_id"),
        )
        return jsonify({"success": True, "message": sessions.flash_message}), 201

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        sessions.logout()
        return jsonify({"success": True})

    @app.route("/session", methods=["GET"], endpoint="current_session")
    def current_session():
        return jsonify(session_payload(sessions))

    @app.route("/flash", methods=["DELETE"], endpoint="clear_flash")
    def clear_flash():
        sessions.clear_flash_message()
        return jsonify({"success": True})
