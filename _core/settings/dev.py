"""
Development settings for the Site Counts project.

Use this for local development with manage.py runserver, and for tests.
"""

from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = config('DEBUG', default=True, cast=bool)

# Development-friendly ALLOWED_HOSTS
ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1,testserver,*', cast=Csv())

# Database - SQLite by default (inherited from base.py)
# No override needed - just use the SQLite config from base.py

# Simple console logging for development
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        # Cache hit/miss lines are DEBUG; raise to see them
        'site_counts': {
            'handlers': ['console'],
            'level': config('SITE_COUNTS_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}

# Show detailed error pages
DEBUG_PROPAGATE_EXCEPTIONS = False
