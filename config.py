## config.py

import os


class Config:
    """Base configuration class. Contains settings common to all environments."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'macim-dev-secret-change-me'
    JWT_SECRET = os.environ.get('JWT_SECRET') or SECRET_KEY
    JWT_ALGORITHM = 'HS256'
    JWT_EXPIRES_DAYS = int(os.environ.get('JWT_EXPIRES_DAYS', 7))
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    SEED_FIELDS = True

class DevelopmentConfig(Config):
    """Configuration for development."""
    DEBUG = True

    # A relative sqlite path is resolved inside the app's instance folder,
    # which Flask-SQLAlchemy creates on first use.
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or 'sqlite:///macim.db'

class TestingConfig(Config):
    """Configuration for running automated tests."""
    TESTING = True
    # Each app gets a fresh in-memory database.
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_SECRET = 'testing-secret'
    SEED_FIELDS = False
    LOG_LEVEL = 'WARNING'

class ProductionConfig(Config):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///macim.db'
