"""Uniform JSON response envelope."""

import json
from typing import Any

from flask import Response


def json_response(status_code: int, message: str, data: Any) -> Response:
    """Build a response with a {"data": ..., "message": ...} JSON body."""
    body = json.dumps({"data": data, "message": message}, ensure_ascii=False,
                      separators=(",", ":"), default=lambda obj: obj.to_dict())
    return Response(body, status=status_code, content_type="application/json; charset=utf-8")