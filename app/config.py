import os
from dotenv import load_dotenv

load_dotenv()


# MVola base URLs
MVOLA_BASE_URLS = {
    'sandbox': 'https://devapi.mvola.mg',
    'production': 'https://api.mvola.mg',
}

DEFAULT_ALLOWED_ORIGINS = 'http://localhost:3000,https://dev-solarmakers.odoo.com'


def _mvola_environment():
    return 'production' if os.getenv('NODE_ENV') == 'production' else 'sandbox'


def _split_origins(value):
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')
    VERSION = '1.0.0'
    ENVIRONMENT = os.getenv('NODE_ENV', 'development')
    PORT = int(os.getenv('PORT', 3000))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # 10MB request body limit
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024

    ALLOWED_ORIGINS = _split_origins(os.getenv('ALLOWED_ORIGINS', DEFAULT_ALLOWED_ORIGINS))

    # MVola Configuration
    MVOLA_CONSUMER_KEY = os.getenv('MVOLA_CONSUMER_KEY')
    MVOLA_CONSUMER_SECRET = os.getenv('MVOLA_CONSUMER_SECRET')
    MVOLA_PARTNER_MSISDN = os.getenv('MVOLA_PARTNER_MSISDN')
    MVOLA_PARTNER_NAME = os.getenv('MVOLA_PARTNER_NAME')
    MVOLA_ENV = _mvola_environment()
    MVOLA_BASE_URL = os.getenv('MVOLA_BASE_URL') or MVOLA_BASE_URLS[MVOLA_ENV]
    MVOLA_CALLBACK_URL = os.getenv('MVOLA_CALLBACK_URL', '')
    MVOLA_HTTP_TIMEOUT = float(os.getenv('MVOLA_HTTP_TIMEOUT', 30))
    MVOLA_DESCRIPTION = os.getenv('MVOLA_DESCRIPTION', 'Paiement Solarmakers')
    MVOLA_REFERENCE_PREFIX = os.getenv('MVOLA_REFERENCE_PREFIX', 'SOLAR')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    ENVIRONMENT = 'test'
    ALLOWED_ORIGINS = ['http://localhost:3000']

    MVOLA_CONSUMER_KEY = 'test_consumer_key'
    MVOLA_CONSUMER_SECRET = 'test_consumer_secret'
    MVOLA_PARTNER_MSISDN = '0343500003'
    MVOLA_PARTNER_NAME = 'Solarmakers'
    MVOLA_ENV = 'sandbox'
    MVOLA_BASE_URL = MVOLA_BASE_URLS['sandbox']
    MVOLA_CALLBACK_URL = ''
    MVOLA_HTTP_TIMEOUT = 5
    MVOLA_DESCRIPTION = 'Paiement Solarmakers'
    MVOLA_REFERENCE_PREFIX = 'SOLAR'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'test': TestingConfig,
    'default': DevelopmentConfig
}
