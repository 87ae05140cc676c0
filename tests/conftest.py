"""
Test configuration for the coffee shop server.
"""
import os


def pytest_configure():
    """Configure Django settings for testing."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'shop_server.settings.test')
    os.environ.setdefault('ENVIRONMENT', 'test')
