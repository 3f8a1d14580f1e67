"""
Application configuration with environment-specific settings.

Usage:
    from config import get_config
    app.config.from_object(get_config())
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base directory of the application
BASE_DIR = Path(__file__).parent.resolve()


class Config:
    """Base configuration with common settings."""

    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        raise ValueError(
            "SECRET_KEY environment variable is required!\n"
            "Generate one with: python -c 'import secrets; print(secrets.token_hex(32))'"
        )

    # Session configuration (display mode lives in the session by default)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 60 * 60 * 24 * 365  # 1 year

    # Path configuration
    DATA_DIR = BASE_DIR / 'data'
    BLOGS_FILE = Path(os.environ.get('BLOGS_FILE', DATA_DIR / 'blogs.json'))

    # Database configuration
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', f'sqlite:///{BASE_DIR / "devodyssey.db"}')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = False  # Set to True for SQL query debugging

    # Presentation settings
    READING_WORDS_PER_MINUTE = int(os.environ.get('READING_WPM', 200))
    AVATAR_FALLBACK_URL = os.environ.get(
        'AVATAR_FALLBACK_URL',
        'https://api.dicebear.com/7.x/avataaars/svg?seed={seed}'
    )
    ALL_BLOGS_PATH = '/all-blogs'
    BLOG_DETAIL_PATH = '/blog'
    FEATURED_BLOG_LIMIT = 6

    # Display mode persistence: 'session' or 'database'
    DISPLAY_MODE_KEY = 'blogDisplayMode'
    DISPLAY_MODE_BACKEND = os.environ.get('DISPLAY_MODE_BACKEND', 'session')

    # Rate limiting for preference writes
    DISPLAY_MODE_RATE_LIMIT = "30 per minute"

    # Application settings
    JSON_SORT_KEYS = False
    JSONIFY_PRETTYPRINT_REGULAR = False


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False
    SESSION_COOKIE_SECURE = False  # Allow HTTP in development

    SEND_FILE_MAX_AGE_DEFAULT = 0  # Disable caching for development


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True  # Require HTTPS

    PREFERRED_URL_SCHEME = 'https'

    # Additional validation for production
    if not os.environ.get('SECRET_KEY'):
        raise ValueError("SECRET_KEY must be explicitly set in production!")


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG = True
    TESTING = True
    SESSION_COOKIE_SECURE = False
    WTF_CSRF_ENABLED = False  # Disable CSRF for testing
    RATELIMIT_ENABLED = False

    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env_name=None):
    """
    Get configuration class for specified environment.

    Args:
        env_name (str): Environment name (development/production/testing)
                       If None, uses FLASK_ENV environment variable

    Returns:
        Config class for the specified environment
    """
    if env_name is None:
        env_name = os.environ.get('FLASK_ENV', 'development')

    return config.get(env_name, config['default'])
