"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

from constants import BEACON_URL


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///analytics.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Admin login. Without a password the settings page cannot be unlocked.
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')

    # Flask-WTF CSRF protection for admin forms
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_JSON = os.environ.get('LOG_JSON', '0') == '1'

    # Beacon script source, overridable for self-hosted mirrors
    BEACON_URL = os.environ.get('BEACON_URL', BEACON_URL)


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_JSON = True


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    BEACON_URL = BEACON_URL
    ADMIN_PASSWORD = 'test-admin-password'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
