"""
FastAPI application entry point for the Infinity landing-site backend.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import settings
from backend.routes.beta_signup import router as beta_signup_router
from backend.routes.contact import router as contact_router
from backend.routes.health import router as health_router
from backend.routes.skills import router as skills_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    Environment-based configuration:
    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (the site's own domains)
    - anything else: Allows all origins for local dev

    The forms are normally posted same-origin by the site itself, so
    production without CORS_ALLOWED_ORIGINS allows no cross-origin callers.

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No cross-origin callers allowed."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="Infinity Landing API",
    description="Form handling backend (contact, beta signup) for the Infinity marketing site",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(contact_router)
app.include_router(beta_signup_router)
app.include_router(skills_router)

logger.info("FastAPI app initialized successfully")
