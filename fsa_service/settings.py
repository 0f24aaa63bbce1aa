"""
Django settings for the fsa_service project.

Deployment-specific values are read from environment variables:

    DJANGO_SECRET_KEY        secret key (a development key is used when unset)
    FSA_DEBUG                "1"/"true" to enable debug mode
    FSA_ALLOWED_HOSTS        comma separated host names
    FSA_CORS_ALLOWED_ORIGINS comma separated origins allowed to call the API
    FSA_LOG_LEVEL            log level for the automaton app, default INFO
    FSA_MAX_NFA_STATES       largest NFA accepted for conversion, 0 for no limit
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name, default):
    value = os.environ.get(name, default)
    return [item.strip() for item in value.split(',') if item.strip()]


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-fsa-service-development-key')

DEBUG = _env_bool('FSA_DEBUG', default=False)

ALLOWED_HOSTS = _env_list('FSA_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver')

INSTALLED_APPS = [
    'corsheaders',
    'automaton',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'fsa_service.urls'

WSGI_APPLICATION = 'fsa_service.wsgi.application'

# No models; the database only exists so the test runner can set one up
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True

# CORS (django-cors-headers)
CORS_ALLOWED_ORIGINS = _env_list(
    'FSA_CORS_ALLOWED_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173'
)

# Subset construction is exponential in the worst case, so NFA size is capped
FSA_MAX_NFA_STATES = int(os.environ.get('FSA_MAX_NFA_STATES', '16'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'automaton': {
            'handlers': ['console'],
            'level': os.environ.get('FSA_LOG_LEVEL', 'INFO').upper(),
            'propagate': False,
        },
    },
}
