"""
Test settings for shop_server project.
"""

from .base import *  # noqa: F401,F403

# Use SQLite for testing
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}


# Disable migrations for faster testing
class DisableMigrations:
    def __contains__(self, item):
        return True

    def __getitem__(self, item):
        return None


MIGRATION_MODULES = DisableMigrations()

# Use faster password hasher for testing
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# Disable logging during tests
LOGGING_CONFIG = None

SESSION_ENGINE = 'django.contrib.sessions.backends.db'

POINTS_CONFIG = {
    'MONTHLY_TOTAL_SEED': -1,
    'REJECT_UNKNOWN_TIER': False,
}
