"""
Bearer token issuing and verification.

Tokens are signed with ``JWT_SECRET_KEY`` from the application config and
carry ``{user_id, email, role, exp}``. There is no refresh flow: once a token
expires the user logs in again.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from flask import current_app
from flask_jwt_extended import create_access_token, get_jwt, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException, NoAuthorizationError
from jwt.exceptions import ExpiredSignatureError, PyJWTError

from vetclinic.exceptions import Unauthenticated

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Claims:
    """Decoded token payload. Construction fails instead of yielding partial claims."""
    user_id: str
    role: str
    email: Optional[str] = None
    expires_at: Optional[datetime] = None

    @classmethod
    def from_payload(cls, payload, identity_claim='user_id'):
        user_id = payload.get(identity_claim)
        role = payload.get('role')
        if not isinstance(user_id, str) or not user_id:
            raise Unauthenticated('Invalid token claims')
        if not isinstance(role, str) or not role:
            raise Unauthenticated('Invalid token claims')

        email = payload.get('email')
        exp = payload.get('exp')
        expires_at = None
        if isinstance(exp, (int, float)) and not isinstance(exp, bool):
            expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)
        return cls(
            user_id=user_id,
            role=role,
            email=email if isinstance(email, str) else None,
            expires_at=expires_at,
        )


def issue_token(user):
    """Signed access token for an authenticated user."""
    return create_access_token(
        identity=str(user.id),
        additional_claims={
            'email': user.email,
            'role': user.role,
        },
    )


def token_lifetime_seconds():
    return int(current_app.config['JWT_ACCESS_TOKEN_EXPIRES'].total_seconds())


def verify_request_token():
    """
    Validate the bearer token of the current request and return its claims.
    Raises Unauthenticated for a missing, malformed, tampered or expired token.
    """
    try:
        verify_jwt_in_request()
    except NoAuthorizationError:
        raise Unauthenticated('Missing or malformed Authorization header')
    except ExpiredSignatureError:
        raise Unauthenticated('Token has expired')
    except (JWTExtendedException, PyJWTError) as e:
        logger.info(f"Rejected bearer token: {e.__class__.__name__}")
        raise Unauthenticated('Invalid token')

    return Claims.from_payload(get_jwt(), current_app.config['JWT_IDENTITY_CLAIM'])
