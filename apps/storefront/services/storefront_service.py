"""
Storefront service composing the access gate, catalog and points ledger
into the user-facing operations.

Every operation takes the caller's identity explicitly (a username or None)
and either returns its result or raises a ShopError. Store failures are
logged here with their cause and re-raised without it.
"""
import logging
from contextlib import contextmanager

from django.db import DatabaseError

from apps.common.access import require_authenticated
from apps.common.exceptions import (
    InvalidCredentials, RegistrationFailed, StoreError, ValidationFailed
)
from apps.common.store import ShopStore
from apps.points.services import PointsLedger
from apps.products.services import CatalogService

logger = logging.getLogger(__name__)


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def _require_fields(message, **fields):
    missing = [name for name, value in fields.items() if _is_blank(value)]
    if missing:
        raise ValidationFailed(message)


@contextmanager
def _store_boundary(operation, error_class=StoreError):
    try:
        yield
    except (StoreError, DatabaseError) as e:
        cause = getattr(e, 'cause', None) or e
        logger.error(f"{operation} failed: {cause}", exc_info=cause)
        raise error_class() from e


class StorefrontService:
    """Login, registration, purchases and purchase history"""

    def __init__(self, store=None, ledger=None, catalog=None):
        self.store = store or ShopStore()
        self.ledger = ledger or PointsLedger(store=self.store)
        self.catalog = catalog or CatalogService(store=self.store)

    def login(self, username, password):
        """Return the identity for valid credentials, else InvalidCredentials"""
        _require_fields('Missing username or password', username=username, password=password)

        with _store_boundary('Login'):
            verified = self.store.verify_credentials(username, password)

        if not verified:
            logger.info(f"Rejected login for {username}")
            raise InvalidCredentials()
        logger.info(f"User {username} logged in")
        return username

    def register(self, username, email, password):
        """Create the user and return its identity (registration logs the user in)"""
        _require_fields(
            'Missing username, email, or password',
            username=username, email=email, password=password
        )

        with _store_boundary('Registration', error_class=RegistrationFailed):
            self.store.insert_user(username, email, password)

        logger.info(f"Registered user {username}")
        return username

    def logout(self, identity):
        """Authenticated -> Anonymous"""
        if identity:
            logger.info(f"User {identity} logged out")
        return None

    def list_products(self):
        with _store_boundary('Product listing'):
            return self.catalog.list_products()

    def purchase(self, identity, tier_label):
        """Record a purchase for the logged-in user"""
        username = require_authenticated(identity, 'You must be logged in to purchase.')
        _require_fields('No product specified.', tier_label=tier_label)

        with _store_boundary('Purchase'):
            return self.ledger.record_purchase(username, tier_label)

    def view_all_purchases(self):
        with _store_boundary('Purchase history'):
            return self.ledger.all_purchases()

    def view_my_purchases(self, identity, now=None):
        """Monthly points summary for the logged-in user"""
        username = require_authenticated(identity, 'You must be logged in to view your purchases.')

        with _store_boundary('Monthly points'):
            return self.ledger.monthly_summary(username, now=now)
