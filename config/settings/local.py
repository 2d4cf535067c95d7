"""
Local development settings.
"""
from .base import *  # noqa: F401,F403
from .base import LOGGING, env_bool

DEBUG = env_bool('DJANGO_DEBUG', True)

LOGGING['loggers']['apps']['level'] = 'DEBUG'
