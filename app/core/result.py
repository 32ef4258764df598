"""
Tagged result type for entity access functions.

Callers branch on ``isinstance(result, Ok)``; the ``{success, data|error}``
envelope only exists at the API boundary via ``to_envelope()``.
"""
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Generic, TypeVar, Union

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

T = TypeVar("T")

# Failure codes used by entity access and session functions
NOT_FOUND = "NOT_FOUND"
FETCH_FAILED = "FETCH_FAILED"
CREATE_FAILED = "CREATE_FAILED"
UPDATE_FAILED = "UPDATE_FAILED"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Success variant."""
    data: T
    success: ClassVar[bool] = True

    def to_envelope(self) -> Dict[str, Any]:
        return {"success": True, "data": jsonable_encoder(self.data)}


@dataclass(frozen=True)
class Err:
    """Named failure variant with a fixed, human-readable message."""
    error: str
    code: str
    success: ClassVar[bool] = False

    def to_envelope(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error, "code": self.code}


Result = Union[Ok[T], Err]


_STATUS_BY_CODE = {
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def envelope_response(result: Result, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Render a Result as a JSON envelope with a matching HTTP status."""
    if isinstance(result, Ok):
        return JSONResponse(status_code=success_status, content=result.to_envelope())
    return JSONResponse(
        status_code=_STATUS_BY_CODE.get(result.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        content=result.to_envelope(),
    )
