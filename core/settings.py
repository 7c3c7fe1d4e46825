"""
Django settings for the currency convertor project.

Values are read from the environment (optionally from a .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-currency-convertor-dev-key')

DEBUG = os.getenv('DEBUG', 'True').lower() == 'true'

ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'drf_spectacular',
    'apps.convertor',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'apps.convertor.middleware.CurrentYearMiddleware',
]

ROOT_URLCONF = 'core.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'core.wsgi.application'

# Rates are never persisted
DATABASES = {}

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True

STATIC_URL = 'static/'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [],
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'Currency Convertor API',
    'DESCRIPTION': 'Converts amounts between currencies, rounded half-even to two decimal places',
    'VERSION': '1.0.0',
}

# Currency convertor configuration

# Rate table used by the convertor: "fixed" or "currency_beacon"
EXCHANGE_RATE_TABLE = os.getenv('EXCHANGE_RATE_TABLE', 'fixed')

# Significant digits used for rate arithmetic before the final rounding
CURRENCY_CONVERTOR_PRECISION = int(os.getenv('CURRENCY_CONVERTOR_PRECISION', '28'))

# "SOURCE/TARGET": rate, used by the fixed rate table
FIXED_EXCHANGE_RATES = {
    'EUR/CZK': os.getenv('FIXED_EUR_CZK_RATE', '26.25'),
}
FIXED_EXCHANGE_RATES_DERIVE_INVERSE = True

CURRENCY_BEACON_URL = os.getenv('CURRENCY_BEACON_URL', 'https://api.currencybeacon.com/v1')
CURRENCY_BEACON_API_KEY = os.getenv('CURRENCY_BEACON_API_KEY', '')
CURRENCY_BEACON_TIMEOUT = float(os.getenv('CURRENCY_BEACON_TIMEOUT', '10'))

LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'apps': {
            'level': LOG_LEVEL,
        },
    },
}
