"""
FastAPI routers for all API endpoints.

Each module defines a router for one concern (contact form, beta signup,
skill taxonomy, health). Form routes follow the same flow:
decode → validate → sanitize + notify → respond.
"""
