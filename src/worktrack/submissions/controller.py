from __future__ import annotations

import traceback

from flask import Flask, g, jsonify

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.decorators import admin_required, login_required, request_payload, system_error
from ..core.exceptions import SubmissionLockedError, ValidationError
from ..container import Container
from ..reports.service import submission_row


def register(app: Flask, container: Container) -> None:
    @app.route("/api/submissions/today", methods=["GET"], endpoint="today_submission")
    @login_required
    def today_submission():
        user = g.current_user
        today = now_local().date()
        record = container.submission_service.get_today(user.user_id, today)
        return jsonify(
            {
                "success": True,
                "date": today.isoformat(),
                "has_submitted_today": record is not None,
                "submission": submission_row(record, user.name) if record else None,
            }
        )

    @app.route("/api/submissions", methods=["POST"], endpoint="submit_today")
    @login_required
    def submit_today():
        user = g.current_user
        data = request_payload()
        try:
            record = container.submission_service.submit_today(
                user.user_id,
                data.get("attendance"),
                data.get("seconds_done"),
                data.get("remarks"),
                now=now_local(),
            )
            return jsonify(
                {
                    "success": True,
                    "message": "Work entry submitted successfully!",
                    "submission": submission_row(record, user.name),
                }
            ), 201
        except SubmissionLockedError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception as e:
            traceback.print_exc()
            return system_error(app, "saving work entry", e)

    @app.route("/admin/submissions", methods=["POST"], endpoint="admin_submit")
    @admin_required
    def admin_submit():
        """Create or overwrite the entry for any (user, date)."""
        data = request_payload()
        try:
            user_id = str(data.get("user_id") or "")
            target = container.user_service.get_user(user_id) if user_id else None
            if not target:
                raise ValidationError("User not found")
            try:
                work_date = parse_iso_date(str(data.get("date") or ""))
            except ValueError:
                raise ValidationError("Date must be YYYY-MM-DD")

            record = container.submission_service.submit(
                target.user_id,
                work_date,
                data.get("attendance"),
                data.get("seconds_done"),
                data.get("remarks"),
                now=now_local(),
            )
            return jsonify(
                {
                    "success": True,
                    "message": "Work entry saved",
                    "submission": submission_row(record, target.name),
                }
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception as e:
            traceback.print_exc()
            return system_error(app, "saving work entry", e)
