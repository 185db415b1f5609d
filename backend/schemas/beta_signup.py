"""
Pydantic models for the beta signup endpoint.

Skills are the identifiers picked in the skill grid (see backend/data/skills.py).
They are not checked against the taxonomy, only counted.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from backend.schemas.contact import coerce_text
from backend.utils.i18n import Language, resolve_lang


class BetaSignupRequest(BaseModel):
    """Request body for POST /api/beta-signup."""

    email: Optional[str] = Field(None, description="Applicant's email address")
    name: Optional[str] = Field(None, description="Applicant's first name")
    skills: Optional[List[str]] = Field(
        None,
        description="Selected skill identifiers (1 to 5)",
        examples=[["cloud", "agile", "finance"]]
    )
    role: Optional[str] = Field(None, description="Job title (optional)")
    company: Optional[str] = Field(None, description="Company (optional)")
    lang: Language = Field("fr", description="Form language ('fr' or 'en')")

    @field_validator("email", "name", "role", "company", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return coerce_text(value)

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> Optional[List[str]]:
        if not isinstance(value, list):
            return None
        return [item if isinstance(item, str) else str(item) for item in value]

    @field_validator("lang", mode="before")
    @classmethod
    def _resolve_lang(cls, value: Any) -> Language:
        return resolve_lang(value)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "alice@example.com",
                    "name": "Alice",
                    "skills": ["cloud", "agile"],
                    "role": "CTO",
                    "company": "Acme",
                    "lang": "en"
                }
            ]
        }
    }
