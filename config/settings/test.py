"""
Test settings: in-memory SQLite, quiet logging.
"""
from .base import *  # noqa: F401,F403
from .base import LOGGING

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

LOGGING['loggers']['apps']['level'] = 'WARNING'
LOGGING['loggers']['shared']['level'] = 'WARNING'
LOGGING['loggers']['apps']['propagate'] = True
LOGGING['loggers']['shared']['propagate'] = True
