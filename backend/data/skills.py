"""
Static skill taxonomy shown in the beta signup skill grid.

One canonical shape: every category and skill carries a bilingual name
record. The taxonomy is read-only and shared by all requests.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from backend.utils.i18n import Language


@dataclass(frozen=True)
class LocalizedText:
    fr: str
    en: str

    def get(self, lang: Language) -> str:
        return self.en if lang == "en" else self.fr


@dataclass(frozen=True)
class Skill:
    id: str
    name: LocalizedText


@dataclass(frozen=True)
class SkillCategory:
    id: str
    name: LocalizedText
    icon: str
    skills: Tuple[Skill, ...]


def _skill(skill_id: str, fr: str, en: str) -> Skill:
    return Skill(id=skill_id, name=LocalizedText(fr=fr, en=en))


SKILL_CATEGORIES: Tuple[SkillCategory, ...] = (
    SkillCategory(
        id="tech",
        name=LocalizedText(fr="Tech", en="Tech"),
        icon="💻",
        skills=(
            _skill("cloud", "Cloud & Infrastructure", "Cloud & Infrastructure"),
            _skill("devops", "DevOps & CI/CD", "DevOps & CI/CD"),
            _skill("security", "Cybersécurité", "Cybersecurity"),
            _skill("data", "Data & Analytics", "Data & Analytics"),
            _skill("ai", "IA & Machine Learning", "AI & Machine Learning"),
            _skill("web", "Développement Web", "Web Development"),
        ),
    ),
    SkillCategory(
        id="leadership",
        name=LocalizedText(fr="Leadership", en="Leadership"),
        icon="🎯",
        skills=(
            _skill("management", "Management d'équipe", "Team Management"),
            _skill("communication", "Communication", "Communication"),
            _skill("agile", "Agilité & Scrum", "Agile & Scrum"),
            _skill("coaching", "Coaching", "Coaching"),
            _skill("strategy", "Stratégie", "Strategy"),
            _skill("change", "Conduite du changement", "Change Management"),
        ),
    ),
    SkillCategory(
        id="business",
        name=LocalizedText(fr="Business", en="Business"),
        icon="📊",
        skills=(
            _skill("finance", "Finance", "Finance"),
            _skill("marketing", "Marketing Digital", "Digital Marketing"),
            _skill("sales", "Vente & Négociation", "Sales & Negotiation"),
            _skill("product", "Product Management", "Product Management"),
            _skill("analytics", "Business Analytics", "Business Analytics"),
            _skill("compliance", "Conformité & RGPD", "Compliance & GDPR"),
        ),
    ),
    SkillCategory(
        id="personal",
        name=LocalizedText(fr="Personnel", en="Personal"),
        icon="🧠",
        skills=(
            _skill("productivity", "Productivité", "Productivity"),
            _skill("presentation", "Prise de parole", "Public Speaking"),
            _skill("writing", "Écriture professionnelle", "Professional Writing"),
            _skill("critical", "Pensée critique", "Critical Thinking"),
            _skill("emotional", "Intelligence émotionnelle", "Emotional Intelligence"),
            _skill("learning", "Apprendre à apprendre", "Learning to Learn"),
        ),
    ),
)

_SKILLS_BY_ID: Dict[str, Skill] = {
    skill.id: skill for category in SKILL_CATEGORIES for skill in category.skills
}
_CATEGORIES_BY_ID: Dict[str, SkillCategory] = {
    category.id: category for category in SKILL_CATEGORIES
}


def get_skill(skill_id: str) -> Optional[Skill]:
    return _SKILLS_BY_ID.get(skill_id)


def get_skill_name(skill_id: str, lang: Language) -> str:
    """Display name of a skill, or the id itself when it is unknown."""
    skill = _SKILLS_BY_ID.get(skill_id)
    return skill.name.get(lang) if skill else skill_id


def get_category_name(category_id: str, lang: Language) -> str:
    """Display name of a category, or the id itself when it is unknown."""
    category = _CATEGORIES_BY_ID.get(category_id)
    return category.name.get(lang) if category else category_id


def get_category(category_id: str) -> Optional[SkillCategory]:
    return _CATEGORIES_BY_ID.get(category_id)
