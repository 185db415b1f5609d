"""
Tests for the skill grid selection state and the static taxonomy.
"""

from backend.data.skills import (
    SKILL_CATEGORIES,
    get_category,
    get_category_name,
    get_skill,
    get_skill_name,
)
from backend.services.skill_selection import (
    SkillSelectionState,
    can_select_more,
    handle_category_key,
    handle_skill_key,
    is_selection_valid,
    is_skill_disabled,
    remove_skill,
    toggle_category,
    toggle_skill,
)

FIVE = ("cloud", "devops", "security", "data", "ai")


class TestToggleCategory:

    def test_expands_then_collapses(self):
        state = toggle_category(SkillSelectionState(), "tech")
        assert state.expanded_category == "tech"

        state = toggle_category(state, "tech")
        assert state.expanded_category is None

    def test_expanding_another_category_replaces_it(self):
        state = SkillSelectionState(expanded_category="tech")

        assert toggle_category(state, "business").expanded_category == "business"

    def test_keeps_selection(self):
        state = SkillSelectionState(selected=("cloud",))

        assert toggle_category(state, "tech").selected == ("cloud",)


class TestToggleSkill:

    def test_adds_in_insertion_order(self):
        state = toggle_skill(SkillSelectionState(), "web")
        state = toggle_skill(state, "agile")

        assert state.selected == ("web", "agile")

    def test_toggling_selected_skill_removes_it(self):
        state = SkillSelectionState(selected=("web", "agile"))

        assert toggle_skill(state, "web").selected == ("agile",)

    def test_sixth_skill_is_ignored(self):
        state = SkillSelectionState(selected=FIVE)

        assert toggle_skill(state, "web").selected == FIVE

    def test_full_selection_can_still_remove(self):
        state = SkillSelectionState(selected=FIVE)

        assert toggle_skill(state, "ai").selected == FIVE[:4]

    def test_original_state_is_not_mutated(self):
        state = SkillSelectionState()

        toggle_skill(state, "web")

        assert state.selected == ()

    def test_on_change_called_with_new_selection(self):
        changes = []

        toggle_skill(SkillSelectionState(), "web", on_change=changes.append)

        assert changes == [("web",)]

    def test_on_change_not_called_when_selection_is_full(self):
        changes = []

        toggle_skill(SkillSelectionState(selected=FIVE), "web", on_change=changes.append)

        assert changes == []


class TestRemoveSkill:

    def test_removes_skill(self):
        changes = []
        state = SkillSelectionState(selected=("web", "agile"))

        state = remove_skill(state, "agile", on_change=changes.append)

        assert state.selected == ("web",)
        assert changes == [("web",)]

    def test_removing_unknown_skill_is_a_no_op(self):
        changes = []
        state = SkillSelectionState(selected=("web",))

        assert remove_skill(state, "nope", on_change=changes.append) == state
        assert changes == []


class TestSelectionBounds:

    def test_can_select_more(self):
        assert can_select_more(())
        assert can_select_more(FIVE[:4])
        assert not can_select_more(FIVE)

    def test_is_selection_valid(self):
        assert not is_selection_valid(())
        assert is_selection_valid(("web",))
        assert is_selection_valid(FIVE)
        assert not is_selection_valid(FIVE + ("web",))

    def test_unselected_skills_disabled_at_five(self):
        assert is_skill_disabled(FIVE, "web")
        assert not is_skill_disabled(FIVE, "cloud")
        assert not is_skill_disabled(FIVE[:4], "web")


class TestKeyboard:

    def test_enter_and_space_activate(self):
        state = handle_skill_key(SkillSelectionState(), "Enter", "web")
        state = handle_skill_key(state, " ", "agile")

        assert state.selected == ("web", "agile")

    def test_other_keys_are_ignored(self):
        state = SkillSelectionState()

        assert handle_skill_key(state, "Tab", "web") is state
        assert handle_category_key(state, "Escape", "tech") is state

    def test_category_key_toggles(self):
        state = handle_category_key(SkillSelectionState(), "Enter", "tech")

        assert state.expanded_category == "tech"


class TestTaxonomy:

    def test_four_categories_of_six_skills(self):
        assert len(SKILL_CATEGORIES) == 4
        assert all(len(category.skills) == 6 for category in SKILL_CATEGORIES)

    def test_skill_ids_are_unique(self):
        ids = [skill.id for category in SKILL_CATEGORIES for skill in category.skills]

        assert len(ids) == len(set(ids)) == 24

    def test_localized_names(self):
        assert get_skill_name("security", "fr") == "Cybersécurité"
        assert get_skill_name("security", "en") == "Cybersecurity"
        assert get_category_name("personal", "fr") == "Personnel"
        assert get_category_name("personal", "en") == "Personal"

    def test_unknown_ids_fall_back_to_id(self):
        assert get_skill_name("underwater-basket-weaving", "en") == "underwater-basket-weaving"
        assert get_category_name("misc", "fr") == "misc"
        assert get_skill("misc") is None
        assert get_category("misc") is None

    def test_category_lookup(self):
        assert get_category("tech").icon == "💻"
