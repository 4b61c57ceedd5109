"""Handlers of the main endpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from flask import Response

from apptemplate.dto import (
    ValidationError,
    bind_detail_query,
    transform_get_detail_main_response,
    transform_get_main_response,
    validate_detail_request,
)
from apptemplate.responses import json_response

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_INTERNAL_SERVER_ERROR = 500


@dataclass
class MainController:
    """Serves the list and detail endpoints from a repository."""

    repo_main: Any
    logger: logging.Logger

    def get_main(self) -> Response:
        """List every record."""
        try:
            rows = self.repo_main.get_list_test_table()
        except Exception as err:
            return json_response(HTTP_INTERNAL_SERVER_ERROR, str(err), None)
        return json_response(HTTP_OK, "HALO", transform_get_main_response(rows))

    def get_detail_main(self, query: Mapping[str, Any]) -> Response:
        """Show one record with its detail.

        Raises LookupError when the record does not exist.
        """
        try:
            param = bind_detail_query(query)
        except ValueError as err:
            self.logger.error("GetDetailMain " + str(err))
            return json_response(HTTP_BAD_REQUEST, "Invalid Query Parameters ", None)

        try:
            validate_detail_request(param)
        except ValidationError as err:
            return json_response(HTTP_BAD_REQUEST, "Invalid Query Parameters " + str(err), None)

        try:
            record = self.repo_main.get_detail_test_table(param.id)
        except Exception as err:
            return json_response(HTTP_BAD_REQUEST, str(err), None)

        if record is None:
            raise LookupError(f"record {param.id} not found")
        return json_response(HTTP_BAD_REQUEST, "SUCCESS", transform_get_detail_main_response(record))