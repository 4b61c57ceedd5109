"""Permissive CORS handling for development."""

from __future__ import annotations

from flask import Flask, Response, request

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Headers": (
        "Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization, "
        "accept, origin, Cache-Control, X-Requested-With"
    ),
    "Access-Control-Allow-Methods": "POST, OPTIONS, GET, PUT, DELETE",
}


def allow_cors(app: Flask) -> Flask:
    """Add CORS headers to every response and answer preflight requests with 204."""
    app.before_request(lambda: Response(status=204) if request.method == "OPTIONS" else None)

    @app.after_request
    def _add_cors_headers(response: Response) -> Response:
        response.headers.update(_CORS_HEADERS)
        return response

    return app