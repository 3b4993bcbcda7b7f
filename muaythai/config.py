import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


def _database_url(default):
    url = os.getenv('DATABASE_URL', default)
    # Heroku-style URLs are rejected by SQLAlchemy 2
    if url and url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


def _split_origins(value):
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Config:
    API_TITLE = 'MyMuayThai API'
    API_VERSION = '1.0.0'
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')

    # Database
    SQLALCHEMY_DATABASE_URI = _database_url('sqlite:///mymuaythai.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {}

    # JWT
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'dev-jwt-secret-change-me-in-production-000')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=1)
    JWT_REFRESH_TOKEN_EXPIRES = timedelta(days=30)
    JWT_TOKEN_LOCATION = ['headers']
    JWT_HEADER_NAME = 'Authorization'
    JWT_HEADER_TYPE = 'Bearer'
    JWT_ENCODE_ISSUER = 'mymuaythai-api'
    JWT_DECODE_ISSUER = 'mymuaythai-api'
    JWT_ENCODE_AUDIENCE = 'mymuaythai-admin'
    JWT_DECODE_AUDIENCE = 'mymuaythai-admin'
    JWT_SECRET_MIN_LENGTH = 32

    # Passwords
    BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', '12'))
    MAX_ADMIN_USERS = 3

    # Rate Limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.getenv('RATELIMIT_STORAGE_URI', 'memory://')
    RATELIMIT_DEFAULT = os.getenv('RATE_LIMIT_DEFAULT', '100 per minute')
    RATELIMIT_HEADERS_ENABLED = True
    LOGIN_RATE_LIMIT = os.getenv('LOGIN_RATE_LIMIT', '5 per 5 minutes')
    ADMIN_RATE_LIMIT = os.getenv('ADMIN_RATE_LIMIT', '50 per minute')

    # CORS
    CORS_ORIGINS = _split_origins(os.getenv('ALLOWED_ORIGINS', 'http://localhost:3000,http://localhost:3333'))

    # Security Headers
    SECURITY_HEADERS = {
        'X-Content-Type-Options': 'nosniff',
        'X-Frame-Options': 'DENY',
        'Referrer-Policy': 'strict-origin-when-cross-origin',
    }

    MAX_CONTENT_LENGTH = 2 * 1024 * 1024

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE = os.getenv('LOG_FILE')

    # Server
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '4000'))


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')
    RATELIMIT_DEFAULT = os.getenv('RATE_LIMIT_DEFAULT', '1000 per minute')
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 5,
        'max_overflow': 5,
        'pool_timeout': 30,
        'pool_recycle': 1800,
        'pool_pre_ping': True,
    }


class ProductionConfig(Config):
    DEBUG = False
    # these must come from the environment in production
    SECRET_KEY = os.getenv('SECRET_KEY')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    SQLALCHEMY_DATABASE_URI = _database_url(None)
    CORS_ORIGINS = _split_origins(os.getenv('ALLOWED_ORIGINS', ''))
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 20,
        'max_overflow': 10,
        'pool_timeout': 30,
        'pool_recycle': 1800,
        'pool_pre_ping': True,
    }
    SECURITY_HEADERS = {
        **Config.SECURITY_HEADERS,
        'Strict-Transport-Security': 'max-age=31536000; includeSubDomains',
    }
    PREFERRED_URL_SCHEME = 'https'


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    JWT_SECRET_KEY = 'testing-jwt-secret-key-that-is-long-enough'
    BCRYPT_ROUNDS = 4
    RATELIMIT_ENABLED = False
    LOG_LEVEL = 'WARNING'
    LOG_FILE = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
