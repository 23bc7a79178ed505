"""
Production settings for the Site Counts project.

Use this for Docker deployment and production environments.
"""

import os
from .base import *

# =============================================================================
# SENTRY ERROR TRACKING (OPTIONAL)
# =============================================================================
# Sentry is only initialized when SENTRY_DSN is set.

SENTRY_DSN = config('SENTRY_DSN', default='')

if SENTRY_DSN:
    import logging

    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration
    from sentry_sdk.integrations.logging import LoggingIntegration

    def filter_sensitive_data(event, hint):
        """
        Remove sensitive data from Sentry events before sending.
        Filters: Authorization and Cookie headers, secret-looking form fields.
        """
        request = event.get('request')
        if request:
            headers = request.get('headers') or {}
            for header in ('Authorization', 'Cookie'):
                if header in headers:
                    headers[header] = '[Filtered]'

            data = request.get('data')
            if isinstance(data, dict):
                for field in ('password', 'token', 'secret', 'csrfmiddlewaretoken'):
                    if field in data:
                        data[field] = '[Filtered]'

        return event

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[
            DjangoIntegration(
                transaction_style='url',
                middleware_spans=True,
                signals_spans=False,       # Cache invalidation receivers are too chatty
                cache_spans=True,
            ),
            LoggingIntegration(
                level=logging.INFO,        # Breadcrumbs
                event_level=logging.ERROR  # Events
            ),
        ],
        traces_sample_rate=config('SENTRY_TRACES_SAMPLE_RATE', default=0.1, cast=float),
        environment=config('ENVIRONMENT', default='production'),
        release=config('GIT_COMMIT', default='unknown'),
        send_default_pii=False,
        before_send=filter_sensitive_data,
        max_breadcrumbs=50,
        attach_stacktrace=True,
    )

    logging.getLogger(__name__).info(
        f"Sentry initialized for environment '{config('ENVIRONMENT', default='production')}'"
    )

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = config('DEBUG', default=False, cast=bool)

# Production ALLOWED_HOSTS - must be explicitly set
ALLOWED_HOSTS = config('ALLOWED_HOSTS', cast=Csv())

# PostgreSQL when POSTGRES_HOST points somewhere real, SQLite from base.py otherwise
if os.getenv('POSTGRES_HOST') and os.getenv('POSTGRES_HOST') != 'localhost':
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.getenv('POSTGRES_DB', 'sitecounts'),
            'USER': os.getenv('POSTGRES_USER', 'sitecounts'),
            'PASSWORD': os.getenv('POSTGRES_PASSWORD'),
            'HOST': os.getenv('POSTGRES_HOST'),
            'PORT': os.getenv('POSTGRES_PORT', '5432'),
            'CONN_MAX_AGE': 600,
        }
    }

# WhiteNoise goes directly after SecurityMiddleware
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'core.middleware.SentryContextMiddleware',
]

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# =============================================================================
# PRODUCTION SECURITY SETTINGS
# =============================================================================
# TLS terminates at the reverse proxy; Django only sets headers and cookie flags.

SECURE_SSL_REDIRECT = config('SECURE_SSL_REDIRECT', default=False, cast=bool)

# Start low (300) when first enabling, browsers cache this for the full duration
SECURE_HSTS_SECONDS = config('SECURE_HSTS_SECONDS', default=31536000, cast=int)
SECURE_HSTS_INCLUDE_SUBDOMAINS = config('SECURE_HSTS_INCLUDE_SUBDOMAINS', default=True, cast=bool)
SECURE_HSTS_PRELOAD = config('SECURE_HSTS_PRELOAD', default=True, cast=bool)

SESSION_COOKIE_SECURE = config('SESSION_COOKIE_SECURE', default=True, cast=bool)
CSRF_COOKIE_SECURE = config('CSRF_COOKIE_SECURE', default=True, cast=bool)

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

# Console logging only, collected by docker logs
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
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
        'level': config('LOG_LEVEL', default='INFO'),
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': config('DJANGO_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
        'django.security': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
        'site_counts': {
            'handlers': ['console'],
            'level': config('SITE_COUNTS_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}

ADMINS = [
    ('Site Counts Admin', config('ADMIN_EMAIL', default='admin@sitecounts.local')),
]
MANAGERS = ADMINS
