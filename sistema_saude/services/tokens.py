"""
Bearer token issuing and verification.

Tokens are stateless JWTs signed with JWT_SECRET_KEY and valid for
JWT_ACCESS_TOKEN_EXPIRES (7 days by default). There is no refresh token:
an expired token means logging in again.
"""
import logging

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from sistema_saude.errors import MissingToken, InvalidToken, UnknownIdentity

logger = logging.getLogger(__name__)

BEARER_PREFIX = 'Bearer '


def issue_token(user):
    """Create an access token carrying the user id (sub) and role (tipo)."""
    return create_access_token(
        identity=str(user.id),
        additional_claims={'tipo': user.role},
    )


def token_from_header(header_value):
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not header_value:
        return None
    if header_value.startswith(BEARER_PREFIX):
        header_value = header_value[len(BEARER_PREFIX):]
    return header_value.strip() or None


def verify_token(token, store):
    """Return the user a token was issued to.

    Raises MissingToken, InvalidToken (bad signature, malformed, expired)
    or UnknownIdentity when the user no longer exists.
    """
    if not token:
        raise MissingToken()

    try:
        claims = decode_token(token)
    except (PyJWTError, JWTExtendedException) as e:
        logger.info("Rejected token: %s", e)
        raise InvalidToken()

    if claims.get('type') != 'access':
        raise InvalidToken()

    user = store.get_user(claims.get('sub'))
    if not user:
        raise UnknownIdentity()
    return user
