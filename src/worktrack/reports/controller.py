from __future__ import annotations

from dataclasses import asdict
from datetime import date
import traceback
from typing import Optional

from flask import Flask, g, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.decorators import admin_required, login_required, system_error
from ..core.constants import EXPORT_FILENAME
from ..core.exceptions import ValidationError
from ..container import Container


def _filters() -> tuple[Optional[str], Optional[date]]:
    user_id = (request.args.get("user_id") or "").strip()
    if user_id == "all":
        user_id = ""
    raw_date = (request.args.get("date") or "").strip()
    try:
        on_date = parse_iso_date(raw_date) if raw_date else None
    except ValueError:
        raise ValidationError("Date must be YYYY-MM-DD")
    return user_id or None, on_date


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            user_filter, date_filter = _filters()
            board = container.dashboard_service.for_user(
                g.current_user,
                today=now_local().date(),
                user_filter=user_filter,
                date_filter=date_filter,
            )
            return jsonify({"success": True, "role": board.kind.value, "dashboard": asdict(board)})
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception as e:
            traceback.print_exc()
            return system_error(app, "building dashboard", e)

    @app.route("/api/stats", methods=["GET"], endpoint="api_stats")
    @admin_required
    def api_stats():
        try:
            return jsonify({"success": True, **container.dashboard_service.chart_data()})
        except Exception as e:
            traceback.print_exc()
            return system_error(app, "computing statistics", e)

    @app.route("/admin/export", methods=["GET"], endpoint="export_submissions")
    @admin_required
    def export_submissions():
        try:
            user_filter, date_filter = _filters()
            csv_text = container.dashboard_service.export(user_filter=user_filter, date_filter=date_filter)
            return app.response_class(
                csv_text.encode("utf-8-sig"),
                mimetype="text/csv",
                headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception as e:
            traceback.print_exc()
            return system_error(app, "exporting submissions", e)
