from __future__ import annotations

import hmac
import logging

from flask import Flask, jsonify, request, session

from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)

HTTP_STATUS_BY_CODE = {
    "invalid-argument": 400,
    "unauthenticated": 401,
    "permission-denied": 403,
    "not-found": 404,
    "failed-precondition": 412,
    "internal": 500,
    "unavailable": 503,
}


def register(app: Flask, container: Container) -> None:
    def _error(e: DomainError):
        status = HTTP_STATUS_BY_CODE.get(e.code, 500)
        return jsonify({"success": False, "code": e.code, "message": str(e)}), status

    def _body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    @app.route("/api/photo-validation/run", methods=["POST"], endpoint="api_photo_validation_run")
    def api_photo_validation_run():
        data = _body()
        try:
            result = container.review_service.run_automated_validation(
                check_in_id=data.get("checkInId"),
                actor_id=session.get("user_id"),
            )
        except DomainError as e:
            return _error(e)
        except Exception:
            logger.exception("automated validation failed")
            return jsonify({"success": False, "code": "internal", "message": "Error validating the photo"}), 500
        return jsonify({"success": True, "validation": result.to_dict()}), 200

    @app.route("/api/photo-validation/review", methods=["POST"], endpoint="api_photo_validation_review")
    def api_photo_validation_review():
        data = _body()
        try:
            message = container.review_service.apply_human_review(
                check_in_id=data.get("checkInId"),
                approved=data.get("approved"),
                actor_id=session.get("user_id"),
                notes=data.get("notes"),
            )
        except DomainError as e:
            return _error(e)
        except Exception:
            logger.exception("manual photo review failed")
            return jsonify({"success": False, "code": "internal", "message": "Error processing the review"}), 500
        return jsonify({"success": True, "message": message}), 200

    @app.route("/api/photo-validation/<check_in_id>", methods=["GET"], endpoint="api_photo_validation_get")
    def api_photo_validation_get(check_in_id: str):
        try:
            container.authorizer.require_reviewer(session.get("user_id"))
            result = container.review_service.get_validation(check_in_id)
        except DomainError as e:
            return _error(e)
        except Exception:
            logger.exception("reading validation for %s failed", check_in_id)
            return jsonify({"success": False, "code": "internal", "message": "Error reading the validation"}), 500
        if result is None:
            return jsonify({"success": False, "code": "not-found", "message": "No validation for this check-in"}), 404
        return jsonify({"success": True, "validation": result.to_dict()}), 200

    @app.route("/hooks/photo-uploaded", methods=["POST"], endpoint="hook_photo_uploaded")
    def hook_photo_uploaded():
        expected = app.config.get("UPLOAD_HOOK_TOKEN") or ""
        supplied = request.headers.get("X-Hook-Token", "")
        if not expected or not hmac.compare_digest(expected.encode(), supplied.encode()):
            return jsonify({"success": False, "code": "permission-denied", "message": "Invalid hook token"}), 403

        data = _body()
        outcome = container.upload_trigger.handle_upload(
            str(data.get("name") or ""),
            bucket=str(data.get("bucket") or "") or None,
        )
        return jsonify(
            {
                "success": True,
                "processed": outcome.processed,
                "reason": outcome.reason,
                "checkInId": outcome.check_in_id,
            }
        ), 200
