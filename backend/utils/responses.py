"""
Helpers mapping pipeline outcomes to JSON responses.

Form endpoints answer with explicit JSONResponse objects (not
HTTPException) so the body always follows the SuccessResponse /
ErrorResponse envelope.
"""

from typing import Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse

from backend.schemas.responses import ErrorDetail, ErrorResponse, SuccessResponse
from backend.utils.constants import ERROR_CODES


def success_response(message: str) -> JSONResponse:
    body = SuccessResponse(message=message)
    return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())


def validation_error_response(
    message: str,
    fields: Optional[Dict[str, str]] = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> JSONResponse:
    """VALIDATION_ERROR envelope; `fields` defaults to an empty map."""
    body = ErrorResponse(
        error=ErrorDetail(
            code=ERROR_CODES['VALIDATION_ERROR'],
            message=message,
            fields=fields or {},
        )
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def server_error_response(message: str) -> JSONResponse:
    """SERVER_ERROR envelope: no field map, never any internal detail."""
    body = ErrorResponse(
        error=ErrorDetail(code=ERROR_CODES['SERVER_ERROR'], message=message)
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(exclude_none=True),
    )
