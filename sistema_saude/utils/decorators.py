from functools import wraps

from flask import g, request

from sistema_saude.services import access
from sistema_saude.services.tokens import token_from_header, verify_token
from sistema_saude.store import get_store


def get_current_user():
    """User attached to the request by @autenticar."""
    return g.get('current_user')


def autenticar(f):
    """
    Require a valid bearer token.
    Loads the caller into g.current_user; auth failures surface as 401.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = token_from_header(request.headers.get('Authorization'))
        g.current_user = verify_token(token, get_store())
        return f(*args, **kwargs)
    return decorated_function


def require_role(*roles):
    """
    Decorator to require specific roles
    Usage: @require_role('admin')
    Must be placed below @autenticar.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            access.require_role(get_current_user(), *roles)
            return f(*args, **kwargs)
        return decorated_function
    return decorator
