"""
Localized API messages for the contact and beta signup endpoints.

Each endpoint has its own catalog (wording differs slightly between the
two forms). Catalogs are read-only mappings shared by all requests.
"""

from types import MappingProxyType
from typing import Mapping, TypedDict

from backend.utils.i18n import Language


class ContactMessages(TypedDict):
    name_required: str
    name_min: str
    email_required: str
    email_invalid: str
    message_required: str
    message_min: str
    invalid_body: str
    validation_error: str
    server_error: str
    success: str


class BetaSignupMessages(TypedDict):
    email_required: str
    email_invalid: str
    name_required: str
    skills_min: str
    skills_max: str
    invalid_body: str
    validation_error: str
    server_error: str
    success: str


CONTACT_MESSAGES: Mapping[Language, ContactMessages] = MappingProxyType({
    "fr": {
        "name_required": "Veuillez entrer votre nom.",
        "name_min": "Le nom doit contenir au moins 2 caractères.",
        "email_required": "L'adresse email est requise.",
        "email_invalid": "Veuillez entrer une adresse email valide.",
        "message_required": "Veuillez entrer un message.",
        "message_min": "Le message doit contenir au moins 10 caractères.",
        "invalid_body": "Requête invalide.",
        "validation_error": "Veuillez corriger les erreurs ci-dessous.",
        "server_error": "Une erreur est survenue. Veuillez réessayer.",
        "success": "Message envoyé ! Nous vous répondrons dans les 24 heures.",
    },
    "en": {
        "name_required": "Please enter your name.",
        "name_min": "Name must be at least 2 characters.",
        "email_required": "Please enter your email.",
        "email_invalid": "Please enter a valid email address.",
        "message_required": "Please enter a message.",
        "message_min": "Message must be at least 10 characters.",
        "invalid_body": "Invalid request.",
        "validation_error": "Please fix the errors below.",
        "server_error": "Something went wrong. Please try again.",
        "success": "Message sent! We'll respond within 24 hours.",
    },
})

BETA_SIGNUP_MESSAGES: Mapping[Language, BetaSignupMessages] = MappingProxyType({
    "fr": {
        "email_required": "L'adresse email est requise",
        "email_invalid": "Veuillez entrer une adresse email valide",
        "name_required": "Le prénom est requis",
        "skills_min": "Sélectionnez au moins 1 compétence",
        "skills_max": "Vous pouvez sélectionner 5 compétences maximum",
        "invalid_body": "Requête invalide",
        "validation_error": "Veuillez corriger les erreurs ci-dessous",
        "server_error": "Une erreur est survenue. Veuillez réessayer.",
        "success": "Inscription réussie ! Vous recevrez un email de confirmation.",
    },
    "en": {
        "email_required": "Email address is required",
        "email_invalid": "Please enter a valid email address",
        "name_required": "First name is required",
        "skills_min": "Select at least 1 skill",
        "skills_max": "You can select up to 5 skills",
        "invalid_body": "Invalid request",
        "validation_error": "Please fix the errors below",
        "server_error": "An error occurred. Please try again.",
        "success": "Signup successful! You'll receive a confirmation email.",
    },
})
