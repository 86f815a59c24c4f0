from __future__ import annotations

import itertools
import logging
import threading
from datetime import datetime, timezone

import bcrypt

from ..exceptions import AuthenticationError, ConflictError, NotFoundError
from .models import MAX_PASSWORD_BYTES, RegisterRequest, User, UserPreferences

logger = logging.getLogger(__name__)

_users: dict[str, User] = {}
_lock = threading.Lock()
_ids = itertools.count(1)

_INVALID_CREDENTIALS = "Invalid email or password"


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    secret = plain.encode()
    if len(secret) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(secret, hashed.encode())


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _find_by_email(email: str) -> User | None:
    for user in _users.values():
        if user.email == email:
            return user
    return None


def create_user(body: RegisterRequest) -> User:
    """Store a new user with a bcrypt-hashed password."""
    email = _normalize_email(body.email)
    password_hash = _hash_password(body.password)
    now = datetime.now(timezone.utc)
    with _lock:
        if _find_by_email(email) is not None:
            raise ConflictError("Email address is already registered", code="EMAIL_TAKEN")
        user = User(
            id=f"user_{next(_ids)}",
            name=body.name.strip(),
            email=email,
            password_hash=password_hash,
            gender=body.gender,
            age=body.age,
            created_at=now,
            updated_at=now,
        )
        _users[user.id] = user
    logger.info("Registered user %s", user.id)
    return user.model_copy(deep=True)


def authenticate(email: str, password: str) -> User:
    """Verify credentials. Unknown email and wrong password look the same."""
    with _lock:
        record = _find_by_email(_normalize_email(email))
    if record is None or not _verify_password(password, record.password_hash):
        raise AuthenticationError(_INVALID_CREDENTIALS, code="INVALID_CREDENTIALS")
    return record.model_copy(deep=True)


def get_user(user_id: str) -> User:
    with _lock:
        user = _users.get(user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}", code="USER_NOT_FOUND")
        return user.model_copy(deep=True)


def update_profile(
    user_id: str, name: str, preferences: UserPreferences | None = None
) -> User:
    """Rename the user and, when given, replace their preferences."""
    with _lock:
        user = _users.get(user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}", code="USER_NOT_FOUND")
        updates: dict = {"name": name.strip(), "updated_at": datetime.now(timezone.utc)}
        if preferences is not None:
            updates["preferences"] = preferences.model_copy(deep=True)
        user = user.model_copy(update=updates)
        _users[user_id] = user
        return user.model_copy(deep=True)
