"""
Harness configuration module.

This module defines configuration classes for different environments
(development, testing, ci). Values are loaded from environment variables
with sensible defaults and are shared by the browser session harness and
the demo site the example tests run against.
"""

import os


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration with default settings."""

    # Browser session settings
    BROWSER: str = os.environ.get("HARNESS_BROWSER", "chromium")
    TIMEOUT_MS: int = int(os.environ.get("HARNESS_TIMEOUT_MS", "30000"))
    HEADLESS: bool = _env_bool("HARNESS_HEADLESS", True)
    VIEWPORT_WIDTH: int = 1280
    VIEWPORT_HEIGHT: int = 720

    # Where failure screenshots are written
    ARTIFACT_DIR: str = os.environ.get("HARNESS_ARTIFACT_DIR", "test-results/screenshots")

    # Demo site settings
    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    DEMO_USERNAME: str = "tomsmith"
    DEMO_PASSWORD: str = "SuperSecretPassword!"
    DYNAMIC_LOADING_DELAY_MS: int = int(os.environ.get("DYNAMIC_LOADING_DELAY_MS", "5000"))


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False

    # Watch the browser while writing tests
    HEADLESS: bool = _env_bool("HARNESS_HEADLESS", False)


class TestingConfig(Config):
    """Testing environment configuration."""

    __test__ = False

    DEBUG: bool = True
    TESTING: bool = True

    DYNAMIC_LOADING_DELAY_MS: int = int(os.environ.get("DYNAMIC_LOADING_DELAY_MS", "500"))


class CIConfig(TestingConfig):
    """Continuous integration configuration."""

    DEBUG: bool = False
    HEADLESS: bool = True
    TIMEOUT_MS: int = int(os.environ.get("HARNESS_TIMEOUT_MS", "60000"))


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "ci": CIConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, ci).
             If None, uses HARNESS_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("HARNESS_ENV", "development")
    return config.get(env, config["default"])
