"""
Field validation for the contact and beta signup forms.

Validators never raise: they return a mapping of field name -> localized
message, and an empty mapping means the submission is valid. Each field
gets at most one error; rules are checked in order and the first failing
rule wins (an empty email is "required", never "invalid").
"""

import re
from typing import Dict, Optional

from backend.schemas.beta_signup import BetaSignupRequest
from backend.schemas.contact import ContactRequest
from backend.utils.constants import (
    EMAIL_MAX_LENGTH,
    MAX_SKILLS,
    MIN_SKILLS,
    MESSAGE_MAX_LENGTH,
    MESSAGE_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)
from backend.utils.i18n import Language
from backend.utils.messages import BETA_SIGNUP_MESSAGES, CONTACT_MESSAGES

# Whole-string match: one "@", then at least one "." in the domain part
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def validate_contact(request: ContactRequest, lang: Language) -> Dict[str, str]:
    """
    Validate a contact form submission.

    Rules:
        name: required; trimmed length in [2, 100]
        email: required; must match EMAIL_PATTERN; at most 255 characters
        message: required; trimmed length in [10, 2000]

    Args:
        request: Decoded contact request
        lang: Language of the error messages

    Returns:
        Field error map (empty when the submission is valid)
    """
    errors: Dict[str, str] = {}
    m = CONTACT_MESSAGES[lang]

    if _is_blank(request.name):
        errors["name"] = m["name_required"]
    elif not NAME_MIN_LENGTH <= len(request.name.strip()) <= NAME_MAX_LENGTH:
        errors["name"] = m["name_min"]

    if not request.email:
        errors["email"] = m["email_required"]
    elif not is_valid_email(request.email) or len(request.email) > EMAIL_MAX_LENGTH:
        errors["email"] = m["email_invalid"]

    if _is_blank(request.message):
        errors["message"] = m["message_required"]
    elif not MESSAGE_MIN_LENGTH <= len(request.message.strip()) <= MESSAGE_MAX_LENGTH:
        errors["message"] = m["message_min"]

    return errors


def validate_beta_signup(request: BetaSignupRequest, lang: Language) -> Dict[str, str]:
    """
    Validate a beta signup submission.

    Rules:
        email: required; must match EMAIL_PATTERN
        name: required (non-blank)
        skills: between MIN_SKILLS and MAX_SKILLS (1 to 5)
    """
    errors: Dict[str, str] = {}
    m = BETA_SIGNUP_MESSAGES[lang]

    if not request.email:
        errors["email"] = m["email_required"]
    elif not is_valid_email(request.email):
        errors["email"] = m["email_invalid"]

    if _is_blank(request.name):
        errors["name"] = m["name_required"]

    skill_count = len(request.skills or [])
    if skill_count < MIN_SKILLS:
        errors["skills"] = m["skills_min"]
    elif skill_count > MAX_SKILLS:
        errors["skills"] = m["skills_max"]

    return errors
