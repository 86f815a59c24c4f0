from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from ..config import DEFAULT_APP_CONFIG, AppConfig
from ..exceptions import AuthenticationError, NotFoundError
from .models import User
from .users import get_user


def create_token(user: User, config: AppConfig = DEFAULT_APP_CONFIG) -> str:
    """Issue a signed token carrying ``user_id``, ``email`` and ``exp``."""
    expires = datetime.now(timezone.utc) + timedelta(hours=config.token_ttl_hours)
    claims = {"user_id": user.id, "email": user.email, "exp": expires}
    return jwt.encode(claims, config.jwt_secret, algorithm=config.jwt_algorithm)


def validate_token(token: str, config: AppConfig = DEFAULT_APP_CONFIG) -> User:
    """Decode ``token`` and return the user it names.

    Raises ``AuthenticationError`` for a bad signature, an expired token,
    a missing ``user_id`` claim, or a user that no longer exists.
    """
    try:
        payload = jwt.decode(token, config.jwt_secret, algorithms=[config.jwt_algorithm])
    except ExpiredSignatureError:
        raise AuthenticationError("Token has expired", code="TOKEN_EXPIRED")
    except JWTError:
        raise AuthenticationError("Invalid token", code="INVALID_TOKEN")

    user_id = payload.get("user_id")
    if not isinstance(user_id, str) or not user_id:
        raise AuthenticationError("Invalid token claims", code="INVALID_TOKEN")

    try:
        return get_user(user_id)
    except NotFoundError:
        raise AuthenticationError("Token user no longer exists", code="INVALID_TOKEN")
