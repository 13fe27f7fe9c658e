from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Pagination(BaseModel):
    """Pagination block of paged listings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class Envelope(BaseModel):
    """Uniform response wrapper. Only the keys that were set are rendered."""

    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
    error: Optional[str] = None
    pagination: Optional[Pagination] = None


_UNSET: Any = object()


def envelope_response(
    success: bool,
    *,
    data: Any = _UNSET,
    message: Optional[str] = None,
    error: Optional[str] = None,
    pagination: Optional[Pagination] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    fields: dict = {"success": success}
    if data is not _UNSET:
        fields["data"] = data
    if message is not None:
        fields["message"] = message
    if error is not None:
        fields["error"] = error
    if pagination is not None:
        fields["pagination"] = pagination
    body = Envelope(**fields).model_dump(exclude_unset=True, by_alias=True)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def ok(
    data: Any = _UNSET,
    message: Optional[str] = None,
    *,
    pagination: Optional[Pagination] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    return envelope_response(True, data=data, message=message, pagination=pagination, status_code=status_code)


def fail(message: str, status_code: int, error: Optional[str] = None) -> JSONResponse:
    return envelope_response(False, message=message, error=error, status_code=status_code)
