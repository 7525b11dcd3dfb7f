from __future__ import annotations

import logging

from flask import Flask, Response, jsonify, request

from ..container import Container
from ..core.constants import CORS_HEADERS, METHOD_NOT_ALLOWED_MESSAGE
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"


def register(app: Flask, container: Container) -> None:
    @app.after_request
    def add_cors_headers(response: Response) -> Response:
        if request.path.startswith(API_PREFIX):
            for name, value in CORS_HEADERS.items():
                response.headers[name] = value
        return response

    @app.errorhandler(405)
    def method_not_allowed(e):
        # Methods Flask rejects before dispatch, e.g. TRACE
        if request.path.startswith(API_PREFIX):
            return jsonify({"error": METHOD_NOT_ALLOWED_MESSAGE}), 405
        return e

    def _body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def list_hours():
        rows = [e.to_dict() for e in container.entry_service.list_entries()]
        return jsonify(rows), 200

    def add_hours():
        data = _body()
        container.entry_service.create_entry(date_value=data.get("date"), hours_value=data.get("hours"))
        return jsonify({"success": True}), 200

    def delete_hours():
        data = _body()
        entry_id = data.get("id")
        if entry_id is None:
            entry_id = request.args.get("id")
        container.entry_service.delete_entry(entry_id_value=entry_id)
        return jsonify({"success": True}), 200

    handlers = {
        "GET": list_hours,
        "POST": add_hours,
        "DELETE": delete_hours,
    }

    @app.route(
        "/api/hours",
        methods=["GET", "POST", "DELETE", "OPTIONS", "PUT", "PATCH"],
        endpoint="api_hours",
    )
    def api_hours():
        # Preflight never reaches the store
        if request.method == "OPTIONS":
            return Response(status=200)

        handler = handlers.get(request.method)
        if handler is None:
            return jsonify({"error": METHOD_NOT_ALLOWED_MESSAGE}), 405

        try:
            return handler()
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception as e:
            logger.exception("API error on %s %s", request.method, request.path)
            return jsonify({"error": str(e)}), 500
