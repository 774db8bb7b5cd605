import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Base configuration class."""

    # Flask Configuration
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() in ('true', '1', 't')
    TESTING = False

    # Application Configuration
    # When unset, short links are built from the host the request came in on
    BASE_URL = os.getenv('BASE_URL') or None
    SHORT_CODE_LENGTH = int(os.getenv('SHORT_CODE_LENGTH', 6))
    MAX_ALLOCATION_ATTEMPTS = int(os.getenv('MAX_ALLOCATION_ATTEMPTS', 1000))
    DEFAULT_VALIDITY_MINUTES = int(os.getenv('DEFAULT_VALIDITY_MINUTES', 30))

    # URL Configuration
    MAX_URL_LENGTH = 2048
    CUSTOM_CODE_MIN_LENGTH = 3
    CUSTOM_CODE_MAX_LENGTH = 10
    # Paths served by fixed routes; a short link with one of these names
    # could never be reached
    RESERVED_SHORTCODES = ('health', 'shorturls')

    # Expiry sweep
    SWEEP_ENABLED = os.getenv('SWEEP_ENABLED', 'True').lower() in ('true', '1', 't')
    SWEEP_INTERVAL_SECONDS = int(os.getenv('SWEEP_INTERVAL_SECONDS', 60))

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    BASE_URL = 'http://short.test'
    SWEEP_ENABLED = False


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
