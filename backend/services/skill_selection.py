"""
Skill grid selection state.

The grid keeps two pieces of state: the expanded category (accordion,
at most one open) and the ordered set of selected skills. Both live in an
immutable SkillSelectionState owned by the caller; every operation
returns a new state and never touches shared module state.

Bounded selection: between 1 and 5 skills make a valid submission. Once
5 skills are selected, unselected skills are disabled and toggling them
is a no-op; selected skills can always be removed.

Callers that need to react to changes (the signup form) pass an
`on_change` callback, which receives the new selection only when it
actually changed.
"""

from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple

from backend.utils.constants import MAX_SKILLS, MIN_SKILLS

SelectionCallback = Callable[[Tuple[str, ...]], None]

ACTIVATION_KEYS = ("Enter", " ")


@dataclass(frozen=True)
class SkillSelectionState:
    expanded_category: Optional[str] = None
    selected: Tuple[str, ...] = ()


def can_select_more(selected: Tuple[str, ...]) -> bool:
    return len(selected) < MAX_SKILLS


def is_selection_valid(selected: Tuple[str, ...]) -> bool:
    return MIN_SKILLS <= len(selected) <= MAX_SKILLS


def is_skill_disabled(selected: Tuple[str, ...], skill_id: str) -> bool:
    """A skill is disabled when it is not selected and the selection is full."""
    return skill_id not in selected and not can_select_more(selected)


def toggle_category(state: SkillSelectionState, category_id: str) -> SkillSelectionState:
    """Expand a category, or collapse it if it is already expanded."""
    expanded = None if state.expanded_category == category_id else category_id
    return replace(state, expanded_category=expanded)


def _notify(
    before: SkillSelectionState,
    after: SkillSelectionState,
    on_change: Optional[SelectionCallback],
) -> SkillSelectionState:
    if on_change is not None and after.selected != before.selected:
        on_change(after.selected)
    return after


def toggle_skill(
    state: SkillSelectionState,
    skill_id: str,
    on_change: Optional[SelectionCallback] = None,
) -> SkillSelectionState:
    """
    Select or deselect a skill.

    Selecting keeps insertion order and is ignored when MAX_SKILLS skills
    are already selected.

    Args:
        state: Current grid state
        skill_id: Skill to toggle
        on_change: Called with the new selection if it changed

    Returns:
        The new grid state
    """
    if skill_id in state.selected:
        selected = tuple(s for s in state.selected if s != skill_id)
    elif can_select_more(state.selected):
        selected = state.selected + (skill_id,)
    else:
        selected = state.selected
    return _notify(state, replace(state, selected=selected), on_change)


def remove_skill(
    state: SkillSelectionState,
    skill_id: str,
    on_change: Optional[SelectionCallback] = None,
) -> SkillSelectionState:
    """Deselect a skill (the remove button on a selected-skill pill)."""
    selected = tuple(s for s in state.selected if s != skill_id)
    return _notify(state, replace(state, selected=selected), on_change)


def is_activation_key(key: str) -> bool:
    return key in ACTIVATION_KEYS


def handle_category_key(
    state: SkillSelectionState, key: str, category_id: str
) -> SkillSelectionState:
    """Keyboard handler for a category header: Enter/Space toggles it."""
    if not is_activation_key(key):
        return state
    return toggle_category(state, category_id)


def handle_skill_key(
    state: SkillSelectionState,
    key: str,
    skill_id: str,
    on_change: Optional[SelectionCallback] = None,
) -> SkillSelectionState:
    """Keyboard handler for a skill chip: Enter/Space toggles it."""
    if not is_activation_key(key):
        return state
    return toggle_skill(state, skill_id, on_change)
