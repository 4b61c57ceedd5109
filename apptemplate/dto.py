"""Request and response shapes of the main endpoints, with their conversions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

_INT = re.compile(r"[+-]?[0-9]+")


class ValidationError(ValueError):
    """Raised when a request parameter fails validation."""


@dataclass(frozen=True)
class GetMainResponse:
    id: int
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class GetDetailRequestParam:
    id: int = 0


@dataclass(frozen=True)
class ChildDetailMainResponse:
    id: int
    is_detail: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "isDetail": self.is_detail}


@dataclass(frozen=True)
class GetDetailMainResponse:
    id: int
    name: str
    detail: ChildDetailMainResponse

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "detail": self.detail.to_dict()}


def bind_detail_query(query: Mapping[str, Any]) -> GetDetailRequestParam:
    """Read the id query value (missing or empty is 0); ValueError if not a 64-bit integer."""
    text = str(query.get("id") or "0")
    if not _INT.fullmatch(text) or not -(2**63) <= int(text) < 2**63:
        raise ValueError(f"invalid integer for 'id': {text!r}")
    return GetDetailRequestParam(id=int(text))


def validate_detail_request(param: GetDetailRequestParam) -> GetDetailRequestParam:
    """Require a non-zero id."""
    if param.id == 0:
        raise ValidationError(
            "Key: 'GetDetailRequestParam.Id' Error:Field validation for 'Id' failed on the 'required' tag"
        )
    return param


def transform_get_main_response(model_data: Iterable[Any]) -> list[GetMainResponse]:
    return [GetMainResponse(id=row.id, name=row.name) for row in model_data]


def transform_get_detail_main_response(model_data: Any) -> GetDetailMainResponse:
    detail = model_data.detail
    if detail is None:
        raise ValueError(f"record {model_data.id} has no detail")
    return GetDetailMainResponse(
        id=model_data.id,
        name=model_data.name,
        detail=ChildDetailMainResponse(id=detail.id, is_detail=detail.is_detail),
    )