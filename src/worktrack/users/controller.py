from __future__ import annotations

from datetime import timedelta
import traceback

from flask import Flask, g, jsonify

from ..common.decorators import admin_required, login_required, request_payload, system_error
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container


def _truthy(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in {"1", "true", "on", "yes"}


def register(app: Flask, container: Container, *, session_days: int = 7) -> None:
    app.permanent_session_lifetime = timedelta(days=session_days)

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request_payload()
        identifier = data.get("identifier") or data.get("email") or ""
        password = data.get("password") or ""
        remember = _truthy(data.get("remember_me"))

        try:
            user = container.auth_service.login(identifier, password, remember)
            return jsonify({"success": True, "message": f"Welcome back, {user.name}!", "user": user.to_dict()})
        except AuthenticationError as e:
            return jsonify({"success": False, "message": str(e)}), 401
        except Exception as e:
            traceback.print_exc()
            return system_error(app, "logging in", e)

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        return jsonify({"success": True, "message": "You have been successfully logged out."})

    @app.route("/me", endpoint="me")
    @login_required
    def me():
        return jsonify({"success": True, "user": g.current_user.to_dict()})

    @app.route("/admin/users", methods=["GET"], endpoint="admin_users")
    @admin_required
    def admin_users():
        users = container.user_service.list_users()
        return jsonify({"success": True, "users": [u.to_dict() for u in users]})

    @app.route("/admin/users", methods=["POST"], endpoint="add_user")
    @admin_required
    def add_user():
        data = request_payload()
        try:
            user = container.user_service.add_user(
                data.get("name", ""),
                data.get("email", ""),
                data.get("role") or "employee",
            )
            return jsonify({"success": True, "message": f"User {user.name} has been added", "user": user.to_dict()}), 201
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception as e:
            traceback.print_exc()
            return system_error(app, "adding user", e)

    @app.route("/admin/users/<user_id>/delete", methods=["POST"], endpoint="delete_user")
    @admin_required
    def delete_user(user_id: str):
        try:
            user = container.user_service.remove_user(user_id)
            return jsonify({"success": True, "message": f"User {user.name} has been removed"})
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception as e:
            traceback.print_exc()
            return system_error(app, "removing user", e)
