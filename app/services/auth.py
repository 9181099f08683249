from __future__ import annotations

import hashlib
import hmac
import logging
import os
from typing import Any, Callable, Mapping, MutableMapping
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, ValidationError, field_validator
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from data import User, get_session

logger = logging.getLogger(__name__)

SESSION_KEY = "auth_user"
DEFAULT_OWNER_EMAIL = "user@nextmail.com"
DEFAULT_OWNER_PASSWORD = "123456"


class AuthError(Exception):
    """Base error raised by ``sign_in``; ``type`` names the failure category."""

    type = "AuthError"

    def __init__(self, message: str = "", *, type: str | None = None) -> None:
        super().__init__(message or self.type)
        if type:
            self.type = type


class CredentialsSignin(AuthError):
    type = "CredentialsSignin"


class InvalidProvider(AuthError):
    type = "InvalidProvider"


class Credentials(BaseModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        email = value.strip().lower()
        if "@" not in email:
            raise ValueError("Invalid email")
        return email


def _hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def _normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def _owner_email() -> str:
    return _normalize_email(os.getenv("OWNER_EMAIL")) or DEFAULT_OWNER_EMAIL


def _owner_password() -> str:
    return os.getenv("OWNER_PASSWORD") or DEFAULT_OWNER_PASSWORD


def get_user(email: str) -> User | None:
    with get_session() as session:
        return session.exec(select(User).where(User.email == _normalize_email(email))).first()


def ensure_owner_user() -> None:
    owner_email = _owner_email()
    owner_password = _owner_password()
    with get_session() as session:
        user = session.exec(select(User).where(User.email == owner_email)).first()
        if user:
            if user.password_hash != _hash_password(owner_password):
                user.password_hash = _hash_password(owner_password)
                session.add(user)
                session.commit()
            return
        session.add(
            User(
                name="User",
                email=owner_email,
                password_hash=_hash_password(owner_password),
            )
        )
        session.commit()
    logger.info("ensure_owner_user.created", extra={"email": owner_email})


def authorize_credentials(form_data: Mapping[str, Any]) -> User:
    try:
        credentials = Credentials.model_validate(
            {
                "email": form_data.get("email") or "",
                "password": form_data.get("password") or "",
            }
        )
    except ValidationError:
        logger.info("authorize_credentials.invalid_payload")
        raise CredentialsSignin("Invalid credentials payload")

    try:
        user = get_user(credentials.email)
    except SQLAlchemyError as exc:
        logger.exception("authorize_credentials.lookup_failed", extra={"email": credentials.email})
        raise AuthError("Failed to fetch user", type="CallbackRouteError") from exc

    if user is None:
        logger.info("authorize_credentials.unknown_user", extra={"email": credentials.email})
        raise CredentialsSignin("Unknown user")
    if not hmac.compare_digest(user.password_hash, _hash_password(credentials.password)):
        logger.info("authorize_credentials.wrong_password", extra={"email": credentials.email})
        raise CredentialsSignin("Wrong password")
    return user


_PROVIDERS: dict[str, Callable[[Mapping[str, Any]], User]] = {
    "credentials": authorize_credentials,
}


def sign_in(
    provider: str,
    form_data: Mapping[str, Any],
    session_store: MutableMapping[str, Any] | None = None,
) -> str:
    """Authorize ``form_data`` with ``provider`` and record the signed-in email."""
    authorize = _PROVIDERS.get(provider)
    if authorize is None:
        raise InvalidProvider(f"Unknown provider: {provider}")
    user = authorize(form_data)
    if session_store is not None:
        session_store[SESSION_KEY] = user.email
    logger.info("sign_in.success", extra={"email": user.email, "provider": provider})
    return user.email


def sign_out(session_store: MutableMapping[str, Any]) -> None:
    session_store.pop(SESSION_KEY, None)


def is_identifier_allowed(identifier: str | None) -> bool:
    if not _normalize_email(identifier):
        return False
    return get_user(identifier or "") is not None


def safe_callback_url(callback_url: str | None, default: str) -> str:
    """Return ``callback_url`` if it is a same-site path, otherwise ``default``."""
    target = (callback_url or "").strip()
    if not target.startswith("/") or target.startswith("//") or "\\" in target:
        return default
    # Browsers drop tabs and newlines, which can turn "/\t/host" into "//host".
    if any(ord(char) < 32 or char == "\x7f" for char in target):
        return default
    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return default
    return target
