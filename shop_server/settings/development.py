"""
Development settings for shop_server project.
"""

from decouple import config
from .base import *  # noqa: F401,F403

DEBUG = config('DEBUG', default=True, cast=bool)

# Show the ledger's window and accumulation details while developing
LOGGING['loggers']['apps']['level'] = config('LOG_LEVEL', default='DEBUG')
