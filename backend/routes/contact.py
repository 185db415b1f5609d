"""
Contact form endpoint.

Endpoint flow:
- Step 1: Content-Type must declare JSON → 415 otherwise
- Step 2: Decode the JSON body → 400 if malformed
- Step 3: Validate fields → 400 with a localized field map
- Step 4: Sanitize + email the admin → 500 (generic message) on failure
- Step 5: Localized confirmation → 200

Server errors pick their language from the Accept-Language header, not
from the body's `lang` field.
"""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from backend.schemas.contact import ContactRequest
from backend.schemas.responses import ErrorResponse, SuccessResponse
from backend.services.email_client import EmailTransport, get_email_transport
from backend.services.notification_service import (
    build_contact_envelope,
    send_contact_notification,
)
from backend.services.validation import validate_contact
from backend.utils.constants import JSON_MEDIA_TYPE
from backend.utils.i18n import lang_from_accept_language
from backend.utils.logging import get_logger
from backend.utils.messages import CONTACT_MESSAGES
from backend.utils.responses import (
    server_error_response,
    success_response,
    validation_error_response,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["forms"])


@router.post(
    "/contact",
    response_model=SuccessResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed body or invalid fields"},
        415: {"model": ErrorResponse, "description": "Content-Type is not application/json"},
        500: {"model": ErrorResponse, "description": "Notification could not be sent"},
    },
    summary="Submit the contact form",
    description="""
    Validate a contact form submission and forward it by email to the site
    administrator.

    Body: {name, email, message, lang}. `lang` defaults to "fr".

    Validation:
    - name: required, 2-100 characters once trimmed
    - email: required, valid address, at most 255 characters
    - message: required, 10-2000 characters once trimmed
    """
)
async def submit_contact(
    request: Request,
    transport: Annotated[EmailTransport, Depends(get_email_transport)],
) -> JSONResponse:
    """Handle a contact form submission."""
    content_type = request.headers.get("Content-Type")
    if not content_type or JSON_MEDIA_TYPE not in content_type:
        logger.info(f"Contact submission rejected: unsupported Content-Type {content_type!r}")
        return validation_error_response(
            "Content-Type must be application/json",
            status_code=415,
        )

    header_lang = lang_from_accept_language(request.headers.get("Accept-Language"))

    try:
        payload = await request.json()
    except ValueError:
        logger.info("Contact submission rejected: body is not valid JSON")
        return validation_error_response(CONTACT_MESSAGES[header_lang]["invalid_body"])

    if not isinstance(payload, dict):
        logger.info("Contact submission rejected: body is not a JSON object")
        return validation_error_response(CONTACT_MESSAGES[header_lang]["invalid_body"])

    data = ContactRequest.model_validate(payload)
    lang = data.lang
    m = CONTACT_MESSAGES[lang]

    errors = validate_contact(data, lang)
    if errors:
        logger.info(f"Contact submission invalid (lang={lang}, fields={sorted(errors)})")
        return validation_error_response(m["validation_error"], errors)

    try:
        envelope = build_contact_envelope(data)
        await send_contact_notification(envelope, transport)
    except Exception as e:
        logger.error(
            f"Contact form error at {datetime.now(timezone.utc).isoformat()}: {type(e).__name__}"
        )
        return server_error_response(CONTACT_MESSAGES[header_lang]["server_error"])

    logger.info(f"Contact submission forwarded (lang={lang})")
    return success_response(m["success"])
