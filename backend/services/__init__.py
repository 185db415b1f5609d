"""
Service layer for the Infinity landing-site backend.

Contains the form pipeline logic that:
- Validates decoded submissions into localized field error maps
- Builds sanitized notification envelopes and renders the admin emails
- Sends the admin email through the transactional email transport
- Manages the skill grid's bounded selection state

Services act as the glue between routes (HTTP layer) and the email provider.
"""

from .notification_service import (
    NotificationError,
    build_beta_signup_envelope,
    build_contact_envelope,
    send_beta_signup_notification,
    send_contact_notification,
)
from .skill_selection import (
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
from .validation import is_valid_email, validate_beta_signup, validate_contact

__all__ = [
    "validate_contact",
    "validate_beta_signup",
    "is_valid_email",
    "build_contact_envelope",
    "build_beta_signup_envelope",
    "send_contact_notification",
    "send_beta_signup_notification",
    "NotificationError",
    "SkillSelectionState",
    "can_select_more",
    "is_selection_valid",
    "is_skill_disabled",
    "toggle_category",
    "toggle_skill",
    "remove_skill",
    "handle_category_key",
    "handle_skill_key",
]
