"""
Configuration module for the Infinity landing-site backend.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Resend (transactional email provider)
    RESEND_API_KEY: str = os.getenv("RESEND_API_KEY", "")

    # Every form submission is forwarded to this single address
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "")

    # Fixed sender identities, one per form
    CONTACT_SENDER: str = os.getenv(
        "CONTACT_SENDER", "n∞sia Contact <onboarding@resend.dev>"
    )
    BETA_SENDER: str = os.getenv(
        "BETA_SENDER", "Infinity Beta <onboarding@resend.dev>"
    )

    # Timestamps in notification emails are always rendered in this zone
    NOTIFICATION_TIMEZONE: str = os.getenv("NOTIFICATION_TIMEZONE", "Europe/Paris")

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (only read in production, see backend/main.py)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing.
        """
        required_settings = {
            "RESEND_API_KEY": cls.RESEND_API_KEY,
            "ADMIN_EMAIL": cls.ADMIN_EMAIL,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   Form submissions will fail until you configure your .env file.")
        else:
            # In production or staging, fail immediately
            raise
