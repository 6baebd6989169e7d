"""
Application Configuration

Centralizes all Flask and application configuration settings.
Values come from the environment, with a .env file loaded for local runs.
"""

import os

from dotenv import load_dotenv

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

load_dotenv(os.path.join(BASE_DIR, '.env'))


def _csv(value):
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///mealprep.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Display default for users without a stored preference
    DEFAULT_MEASUREMENT_SYSTEM = os.environ.get('DEFAULT_MEASUREMENT_SYSTEM', 'metric')

    # n8n workflow engine
    N8N_WEBHOOK_URL = os.environ.get('N8N_WEBHOOK_URL', '')
    WORKFLOW_TIMEOUT = float(os.environ.get('WORKFLOW_TIMEOUT', '30'))

    # Frontend origins allowed to call the API
    CORS_ORIGINS = _csv(os.environ.get('CORS_ORIGINS', 'http://localhost:5173'))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    DEFAULT_MEASUREMENT_SYSTEM = 'metric'
    N8N_WEBHOOK_URL = 'http://workflow.test/webhook/chat'
    WORKFLOW_TIMEOUT = 5


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
