"""
Access gate for session identities.

An identity is the logged-in username, or None for an anonymous visitor.
The gate knows nothing about how the identity was transported.
"""
from .exceptions import Unauthenticated


def is_authenticated(identity):
    """True when identity names a logged-in user"""
    return isinstance(identity, str) and bool(identity.strip())


def require_authenticated(identity, message=None):
    """Return the identity, or raise Unauthenticated for anonymous visitors"""
    if not is_authenticated(identity):
        raise Unauthenticated(message)
    return identity
