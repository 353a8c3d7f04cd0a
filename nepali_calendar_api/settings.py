"""
Django settings for the Nepali Calendar API.

Values come from the environment; a ``.env`` file next to manage.py is loaded first.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


def env_bool(name, default=False):
    return os.environ.get(name, str(default)).strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-change-me')

DEBUG = env_bool('DJANGO_DEBUG', False)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')
    if host.strip()
]


INSTALLED_APPS = [
    'corsheaders',
    'bs_calendar',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',
    'bs_calendar.middleware.ApiErrorMiddleware',
]

ROOT_URLCONF = 'nepali_calendar_api.urls'

WSGI_APPLICATION = 'nepali_calendar_api.wsgi.application'

# No persistence
DATABASES = {}

# The API paths have no trailing slash
APPEND_SLASH = False


# Nepal time decides what "today" is
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Asia/Kathmandu'
USE_I18N = False
USE_TZ = True


# Cache: converted responses and rate-limit counters
CACHE_TTL = int(os.environ.get('CACHE_TTL', 3600))

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'nepali-calendar-api',
        'TIMEOUT': CACHE_TTL,
    }
}


# Rate limiting (django-ratelimit), per client IP
RATELIMIT_ENABLE = env_bool('RATELIMIT_ENABLE', True)
API_RATE_LIMIT = os.environ.get('API_RATE_LIMIT', '100/15m')
CONVERSION_RATE_LIMIT = os.environ.get('CONVERSION_RATE_LIMIT', '30/m')

if os.environ.get('RATELIMIT_IP_META_KEY'):
    RATELIMIT_IP_META_KEY = os.environ['RATELIMIT_IP_META_KEY']


# CORS
CORS_ALLOW_ALL_ORIGINS = True


LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name}: {message}',
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
        'bs_calendar': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
