"""
Skill taxonomy endpoint.

Public, read-only: serves the localized skill grid used by the beta
signup form. Unknown `lang` values fall back to French.

The grid state travels in the query string (`expanded`, repeated
`selected`) and is replayed through the pure selection functions, so the
response carries each skill's selected/disabled flags and whether the
current selection can be submitted. Unknown identifiers are ignored.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from backend.data.skills import (
    SKILL_CATEGORIES,
    get_category,
    get_category_name,
    get_skill,
    get_skill_name,
)
from backend.schemas.skills import (
    SkillCategoryResponse,
    SkillResponse,
    SkillTaxonomyResponse,
)
from backend.services.skill_selection import (
    SkillSelectionState,
    can_select_more,
    is_selection_valid,
    is_skill_disabled,
    toggle_category,
    toggle_skill,
)
from backend.utils.constants import MAX_SKILLS
from backend.utils.i18n import resolve_lang
from backend.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["skills"])


def build_selection_state(
    expanded: Optional[str], selected: List[str]
) -> SkillSelectionState:
    """Replay the requested grid state, dropping unknown and repeated ids."""
    state = SkillSelectionState()
    if expanded and get_category(expanded) is not None:
        state = toggle_category(state, expanded)
    for skill_id in selected:
        if get_skill(skill_id) is None or skill_id in state.selected:
            continue
        state = toggle_skill(state, skill_id)
    return state


@router.get(
    "/skills",
    response_model=SkillTaxonomyResponse,
    summary="Localized skill taxonomy",
    description="""
    Categories and skills of the signup skill grid, with names in the
    requested language.

    Optional grid state: `expanded` (category id) and repeated `selected`
    (skill ids, in selection order). Selections beyond the limit are
    ignored, and skills that can no longer be picked are flagged
    `disabled`.
    """,
)
async def list_skills(
    lang: Optional[str] = Query(None, description="'fr' (default) or 'en'"),
    expanded: Optional[str] = Query(None, description="Expanded category id"),
    selected: List[str] = Query([], description="Selected skill ids"),
) -> SkillTaxonomyResponse:
    resolved = resolve_lang(lang)
    state = build_selection_state(expanded, selected)
    logger.debug(f"Serving skill taxonomy (lang={resolved}, selected={len(state.selected)})")

    categories = [
        SkillCategoryResponse(
            id=category.id,
            name=get_category_name(category.id, resolved),
            icon=category.icon,
            expanded=state.expanded_category == category.id,
            skills=[
                SkillResponse(
                    id=skill.id,
                    name=get_skill_name(skill.id, resolved),
                    selected=skill.id in state.selected,
                    disabled=is_skill_disabled(state.selected, skill.id),
                )
                for skill in category.skills
            ],
        )
        for category in SKILL_CATEGORIES
    ]

    return SkillTaxonomyResponse(
        lang=resolved,
        max_selection=MAX_SKILLS,
        selected=list(state.selected),
        can_select_more=can_select_more(state.selected),
        selection_valid=is_selection_valid(state.selected),
        categories=categories,
    )
