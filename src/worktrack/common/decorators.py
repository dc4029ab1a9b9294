from __future__ import annotations

from functools import wraps

from flask import current_app, g, jsonify, request

from ..core.exceptions import AuthorizationError


def get_container():
    return current_app.extensions["worktrack"]


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = get_container().auth_service.current_user()
        if not user:
            return jsonify({"success": False, "message": "Please log in to continue"}), 401
        g.current_user = user
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        auth = get_container().auth_service
        user = auth.current_user()
        if not user:
            return jsonify({"success": False, "message": "Please log in to continue"}), 401
        try:
            auth.require_admin(user)
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        g.current_user = user
        return view(*args, **kwargs)

    return wrapper


def system_error(app, action: str, exc: Exception):
    """JSON 500 for unexpected failures; detail only in DEBUG."""
    message = f"System error while {action}"
    if bool(app.config.get("DEBUG", False)):
        message = f"{message}: {exc}"
    return jsonify({"success": False, "message": message}), 500


def request_payload() -> dict:
    """JSON body or form fields, whichever the client sent."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()
