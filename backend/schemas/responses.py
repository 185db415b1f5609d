"""
Response envelope shared by the form endpoints.

Every request ends with exactly one of:
- SuccessResponse: {"success": true, "message": ...}
- ErrorResponse:   {"success": false, "error": {"code", "message", "fields"?}}

`fields` is only present on VALIDATION_ERROR responses.
"""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field

ErrorCode = Literal["VALIDATION_ERROR", "SERVER_ERROR"]


class SuccessResponse(BaseModel):
    """Terminal response for a submission that was forwarded successfully."""

    success: Literal[True] = True
    message: str = Field(..., description="Localized confirmation message")


class ErrorDetail(BaseModel):
    code: ErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Localized, human-readable message")
    fields: Optional[Dict[str, str]] = Field(
        None,
        description="Field name -> localized message (VALIDATION_ERROR only)"
    )


class ErrorResponse(BaseModel):
    """Terminal response for a rejected or failed submission."""

    success: Literal[False] = False
    error: ErrorDetail

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": False,
                    "error": {
                        "code": "VALIDATION_ERROR",
                        "message": "Please fix the errors below.",
                        "fields": {"email": "Please enter a valid email address."}
                    }
                },
                {
                    "success": False,
                    "error": {
                        "code": "SERVER_ERROR",
                        "message": "Something went wrong. Please try again."
                    }
                }
            ]
        }
    }
