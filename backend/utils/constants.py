"""
Constants shared by the form-handling endpoints.

Error codes are part of the public JSON contract consumed by the site's
forms, so they must not be renamed.
"""

# Error codes returned in ErrorResponse.error.code
ERROR_CODES = {
    # Client-correctable: malformed body, wrong media type or field errors
    'VALIDATION_ERROR': 'VALIDATION_ERROR',

    # Opaque: misconfiguration or provider failure (details only in server logs)
    'SERVER_ERROR': 'SERVER_ERROR',
}

JSON_MEDIA_TYPE = "application/json"

# Contact form limits
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 2000

# Beta signup: skills picked in the skill grid
MIN_SKILLS = 1
MAX_SKILLS = 5
