"""
Pydantic schemas for API request and response validation.

Request models decode leniently (wrong types become missing fields) so the
validators, not the framework, decide which localized errors to return.
"""
