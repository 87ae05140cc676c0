"""
Session transport for the logged-in identity.
"""

SESSION_IDENTITY_KEY = 'username'


def current_identity(request):
    """Username stored in the session, or None for anonymous visitors"""
    return request.session.get(SESSION_IDENTITY_KEY)


def set_identity(request, identity):
    """Store identity in the session; None ends the session"""
    if identity is None:
        request.session.flush()
        return
    request.session.cycle_key()
    request.session[SESSION_IDENTITY_KEY] = identity
