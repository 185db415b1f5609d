"""
Pydantic models for the contact form endpoint.

The form posts untyped JSON. Decoding is deliberately lenient: a field of
the wrong type is treated as missing so the validator can answer with a
localized field error instead of a framework-level 422.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from backend.utils.i18n import Language, resolve_lang


def coerce_text(value: Any) -> Optional[str]:
    """Keep strings, treat anything else as a missing field."""
    return value if isinstance(value, str) else None


class ContactRequest(BaseModel):
    """
    Request body for POST /api/contact.

    Fields:
        name: Sender's name (2-100 characters once trimmed)
        email: Sender's email address (max 255 characters)
        message: Free-text inquiry (10-2000 characters once trimmed)
        lang: Form language, anything but "en" resolves to "fr"
    """
    name: Optional[str] = Field(None, description="Sender's name")
    email: Optional[str] = Field(None, description="Sender's email address")
    message: Optional[str] = Field(None, description="Message body")
    lang: Language = Field("fr", description="Form language ('fr' or 'en')")

    @field_validator("name", "email", "message", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return coerce_text(value)

    @field_validator("lang", mode="before")
    @classmethod
    def _resolve_lang(cls, value: Any) -> Language:
        return resolve_lang(value)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Alice",
                    "email": "alice@example.com",
                    "message": "Hello, this is a real inquiry.",
                    "lang": "en"
                }
            ]
        }
    }
