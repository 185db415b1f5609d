"""
Admin notifications for form submissions.

Flow for a validated submission:
1. Build an envelope: every user-supplied string escaped exactly once,
   plus a server-side timestamp (fixed fr-FR format, Paris time)
2. Render the HTML and plain-text bodies from the jinja2 templates in
   backend/templates
3. Send a single email to ADMIN_EMAIL from the form's fixed sender

There is no retry and no queue: any failure is raised to the route as a
NotificationError, which answers with a generic SERVER_ERROR.
"""

import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Tuple
from zoneinfo import ZoneInfo

from jinja2 import Environment, FileSystemLoader

from backend.config import settings
from backend.schemas.beta_signup import BetaSignupRequest
from backend.schemas.contact import ContactRequest
from backend.services.email_client import EmailParams, EmailTransport
from backend.utils.i18n import Language
from backend.utils.sanitize import escape_html

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"

# Envelope values are already escaped by escape_html: no second escaping pass
env = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "../templates"),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


@dataclass(frozen=True)
class EmailTemplate:
    subject: str
    html_template: str
    text_template: str

    def render(self, **kwargs: Any) -> Tuple[str, str, str]:
        subject = self.subject.format(**kwargs)
        html = env.get_template(self.html_template).render(**kwargs)
        text = env.get_template(self.text_template).render(**kwargs)
        return subject, html, text


CONTACT_EMAIL = EmailTemplate(
    subject="New Contact: {name}",
    html_template="contact_email.html",
    text_template="contact_email.txt",
)
BETA_SIGNUP_EMAIL = EmailTemplate(
    subject="🎉 New Beta Signup: {name}",
    html_template="beta_signup_email.html",
    text_template="beta_signup_email.txt",
)


class NotificationError(Exception):
    """The admin notification could not be sent (misconfiguration or provider failure)."""


@dataclass(frozen=True)
class ContactEnvelope:
    """Sanitized copy of a contact submission, ready for interpolation."""
    name: str
    email: str
    message: str
    lang: Language
    timestamp: str


@dataclass(frozen=True)
class BetaSignupEnvelope:
    """Sanitized copy of a beta signup, ready for interpolation."""
    name: str
    email: str
    skills: Tuple[str, ...]
    role: Optional[str]
    company: Optional[str]
    timestamp: str


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Render a timestamp for notification emails.

    The rendering never depends on the requester's locale: always
    day/month/year in NOTIFICATION_TIMEZONE (Europe/Paris by default).

    Args:
        moment: Aware datetime to render (defaults to now)
    """
    tz = ZoneInfo(settings.NOTIFICATION_TIMEZONE)
    if moment is None:
        moment = datetime.now(tz)
    return moment.astimezone(tz).strftime(TIMESTAMP_FORMAT)


def build_contact_envelope(request: ContactRequest) -> ContactEnvelope:
    """Build the sanitized envelope of a validated contact request (fields are trimmed first)."""
    return ContactEnvelope(
        name=escape_html((request.name or "").strip()),
        email=escape_html((request.email or "").strip()),
        message=escape_html((request.message or "").strip()),
        lang=request.lang,
        timestamp=format_timestamp(),
    )


def build_beta_signup_envelope(request: BetaSignupRequest) -> BetaSignupEnvelope:
    """Build the sanitized envelope of a validated beta signup; empty role/company are dropped."""
    return BetaSignupEnvelope(
        name=escape_html(request.name or ""),
        email=escape_html(request.email or ""),
        skills=tuple(escape_html(skill) for skill in request.skills or []),
        role=escape_html(request.role) if request.role else None,
        company=escape_html(request.company) if request.company else None,
        timestamp=format_timestamp(),
    )


def render_contact_email(envelope: ContactEnvelope) -> Tuple[str, str, str]:
    """
    Render the admin email for a contact submission.

    Returns:
        (subject, html, text)
    """
    return CONTACT_EMAIL.render(**asdict(envelope))


def render_beta_signup_email(envelope: BetaSignupEnvelope) -> Tuple[str, str, str]:
    """
    Render the admin email for a beta signup.

    Role and company lines are left out when they are empty.

    Returns:
        (subject, html, text)
    """
    return BETA_SIGNUP_EMAIL.render(**asdict(envelope))


async def _send_to_admin(
    transport: EmailTransport,
    sender: str,
    subject: str,
    html: str,
    text: str,
) -> Optional[str]:
    admin_email = settings.ADMIN_EMAIL
    if not admin_email:
        raise NotificationError("ADMIN_EMAIL not configured")

    params: EmailParams = {
        "to": [admin_email],
        "subject": subject,
        "html": html,
        "text": text,
    }

    try:
        message_id = await transport.send(sender, params)
    except Exception as e:
        raise NotificationError("Email provider call failed") from e

    logger.info(f"Admin notification sent (message_id={message_id})")
    return message_id


async def send_contact_notification(
    envelope: ContactEnvelope,
    transport: EmailTransport,
) -> Optional[str]:
    """
    Email a contact submission to the site administrator.

    Args:
        envelope: Sanitized contact submission
        transport: Email transport (Resend in production)

    Returns:
        Provider message id

    Raises:
        NotificationError: ADMIN_EMAIL is not set (nothing is sent), or the
            provider call failed
    """
    subject, html, text = render_contact_email(envelope)
    return await _send_to_admin(transport, settings.CONTACT_SENDER, subject, html, text)


async def send_beta_signup_notification(
    envelope: BetaSignupEnvelope,
    transport: EmailTransport,
) -> Optional[str]:
    """
    Email a beta signup to the site administrator.

    Raises:
        NotificationError: ADMIN_EMAIL is not set (nothing is sent), or the
            provider call failed
    """
    subject, html, text = render_beta_signup_email(envelope)
    return await _send_to_admin(transport, settings.BETA_SENDER, subject, html, text)
