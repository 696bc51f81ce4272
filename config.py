# ============================================================================
# CLAUDE CONTEXT - APPLICATION CONFIGURATION
# ============================================================================
# STATUS: Core Infrastructure - Configuration Management
# PURPOSE: Centralized configuration for the Directus CMS connection
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: AppConfig, get_app_config, validate_configuration
# DEPENDENCIES: pydantic-settings
# SOURCE: Environment variables, .env file
# PATTERNS: Singleton pattern for config
# ============================================================================

"""
Application Configuration Module

Provides centralized configuration management for the content API:
- Directus origin (used for both data queries and asset delivery)
- Transport timeout
- Debug logging switch

Environment Variables:
    Optional:
    - DIRECTUS_URL: CMS origin (default: https://ewgx.steltner.cc)
    - DIRECTUS_TIMEOUT: Request timeout in seconds (default: 30)
    - DEBUG_LOGGING: Enable DEBUG level loggers (default: false)

Usage:
    from config import get_app_config

    config = get_app_config()
    client = DirectusClient(base_url=config.directus_url)
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_DIRECTUS_URL = "https://ewgx.steltner.cc"


# ============================================================================
# Application Configuration
# ============================================================================

class AppConfig(BaseSettings):
    """
    Application-wide configuration loaded from environment variables.

    Attributes:
        directus_url: Directus origin for item queries and assets
        directus_timeout: HTTP timeout in seconds for CMS requests
        debug_logging: Switch component loggers to DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    directus_url: str = Field(
        default=DEFAULT_DIRECTUS_URL,
        description="Directus origin (data + assets)"
    )
    directus_timeout: float = Field(
        default=30.0,
        description="CMS request timeout in seconds"
    )
    debug_logging: bool = Field(
        default=False,
        description="Enable DEBUG level logging"
    )

    @field_validator('directus_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize origin so paths can be appended directly."""
        v = v.strip().rstrip('/')
        if not v:
            raise ValueError("DIRECTUS_URL must not be empty")
        return v

    @field_validator('directus_timeout')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Timeout must be positive."""
        if v <= 0:
            raise ValueError("DIRECTUS_TIMEOUT must be greater than 0")
        return v


@lru_cache(maxsize=1)
def get_app_config() -> AppConfig:
    """
    Get singleton application configuration instance.

    Returns:
        AppConfig: Validated configuration object

    Raises:
        ValidationError: If environment variables hold invalid values
    """
    return AppConfig()


# ============================================================================
# Configuration Validation
# ============================================================================

def validate_configuration() -> bool:
    """
    Validate configuration on application startup.

    Returns:
        bool: True if configuration is valid

    Raises:
        Exception: If configuration validation fails
    """
    try:
        config = get_app_config()
        logger.info("Configuration validation:")
        logger.info(f"  Directus URL: {config.directus_url}")
        logger.info(f"  Timeout: {config.directus_timeout}s")
        logger.info(f"  Debug logging: {config.debug_logging}")
        return True

    except Exception as e:
        logger.error(f"❌ Configuration validation failed: {e}")
        raise


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    validate_configuration()
