"""
Beta signup endpoint.

Same flow as the contact form, without the Content-Type check:
decode → validate → sanitize + email the admin → respond.

Server errors are always answered in French, whatever the requester's
language.
"""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from backend.schemas.beta_signup import BetaSignupRequest
from backend.schemas.responses import ErrorResponse, SuccessResponse
from backend.services.email_client import EmailTransport, get_email_transport
from backend.services.notification_service import (
    build_beta_signup_envelope,
    send_beta_signup_notification,
)
from backend.services.validation import validate_beta_signup
from backend.utils.i18n import DEFAULT_LANG, lang_from_accept_language
from backend.utils.logging import get_logger
from backend.utils.messages import BETA_SIGNUP_MESSAGES
from backend.utils.responses import (
    server_error_response,
    success_response,
    validation_error_response,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["forms"])


@router.post(
    "/beta-signup",
    response_model=SuccessResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed body or invalid fields"},
        500: {"model": ErrorResponse, "description": "Notification could not be sent"},
    },
    summary="Sign up for the beta",
    description="""
    Validate a beta signup and forward it by email to the site administrator.

    Body: {email, name, skills[], role?, company?, lang}. `lang` defaults to "fr".

    Validation:
    - email: required, valid address
    - name: required
    - skills: 1 to 5 skill identifiers (see GET /api/skills)
    """
)
async def submit_beta_signup(
    request: Request,
    transport: Annotated[EmailTransport, Depends(get_email_transport)],
) -> JSONResponse:
    """Handle a beta signup submission."""
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    if not isinstance(payload, dict):
        logger.info("Beta signup rejected: body is not a JSON object")
        header_lang = lang_from_accept_language(request.headers.get("Accept-Language"))
        return validation_error_response(BETA_SIGNUP_MESSAGES[header_lang]["invalid_body"])

    data = BetaSignupRequest.model_validate(payload)
    lang = data.lang
    m = BETA_SIGNUP_MESSAGES[lang]

    errors = validate_beta_signup(data, lang)
    if errors:
        logger.info(f"Beta signup invalid (lang={lang}, fields={sorted(errors)})")
        return validation_error_response(m["validation_error"], errors)

    try:
        envelope = build_beta_signup_envelope(data)
        await send_beta_signup_notification(envelope, transport)
    except Exception as e:
        logger.error(
            f"Beta signup error at {datetime.now(timezone.utc).isoformat()}: {type(e).__name__}"
        )
        return server_error_response(BETA_SIGNUP_MESSAGES[DEFAULT_LANG]["server_error"])

    logger.info(f"Beta signup forwarded (lang={lang}, skills={len(data.skills or [])})")
    return success_response(m["success"])
