"""Flask application configuration for the alloy design engine."""
import os
from pathlib import Path

basedir = Path(__file__).parent.absolute()


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Design defaults offered to clients before any input is made
    ALLOY_DEFAULT_NAME = os.environ.get('ALLOY_DEFAULT_NAME', 'Custom 316L-V Mod')
    ALLOY_DEFAULT_QUENCH = os.environ.get('ALLOY_DEFAULT_QUENCH', 'Water')
    ALLOY_DEFAULT_GRAIN_SIZE = float(os.environ.get('ALLOY_DEFAULT_GRAIN_SIZE', 25.0))  # um
    ALLOY_DEFAULT_TARGET_YS = float(os.environ.get('ALLOY_DEFAULT_TARGET_YS', 600.0))  # MPa


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    WTF_CSRF_ENABLED = False
    ALLOY_DEFAULT_NAME = 'Custom 316L-V Mod'
    ALLOY_DEFAULT_QUENCH = 'Water'
    ALLOY_DEFAULT_GRAIN_SIZE = 25.0
    ALLOY_DEFAULT_TARGET_YS = 600.0


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
