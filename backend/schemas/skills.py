"""
Pydantic models for the skill taxonomy endpoint.

The taxonomy is returned already localized: the skill grid only needs the
display names for the page language.
"""

from typing import List

from pydantic import BaseModel, Field

from backend.utils.i18n import Language


class SkillResponse(BaseModel):
    id: str = Field(..., description="Stable skill identifier sent back on signup")
    name: str = Field(..., description="Localized display name")
    selected: bool = False
    disabled: bool = Field(False, description="Not selected and the selection is full")


class SkillCategoryResponse(BaseModel):
    id: str = Field(..., description="Category identifier")
    name: str = Field(..., description="Localized display name")
    icon: str = Field(..., description="Emoji icon")
    expanded: bool = False
    skills: List[SkillResponse]


class SkillTaxonomyResponse(BaseModel):
    """Response model for GET /api/skills."""

    lang: Language
    max_selection: int = Field(..., description="Maximum number of skills per signup")
    selected: List[str] = Field(default_factory=list, description="Selected skill ids, in order")
    can_select_more: bool = True
    selection_valid: bool = Field(False, description="Between 1 and max_selection skills selected")
    categories: List[SkillCategoryResponse]

    model_config = {
        "json_schema_extra": {
            "example": {
                "lang": "en",
                "max_selection": 5,
                "selected": ["cloud"],
                "can_select_more": True,
                "selection_valid": True,
                "categories": [
                    {
                        "id": "tech",
                        "name": "Tech",
                        "icon": "💻",
                        "expanded": True,
                        "skills": [
                            {
                                "id": "cloud",
                                "name": "Cloud & Infrastructure",
                                "selected": True,
                                "disabled": False,
                            }
                        ]
                    }
                ]
            }
        }
    }
