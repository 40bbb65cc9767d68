"""JWT helpers for resolving the signed-in user."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from walletview.core.config import get_settings
from walletview.core.exceptions import InvalidSessionTokenError


def create_access_token(user_id: int, name: Optional[str] = None, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": str(user_id),
        "name": name,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> int:
    """Return the user id carried by ``token``."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise InvalidSessionTokenError("could not validate credentials") from exc

    subject = payload.get("sub")
    if subject is None:
        raise InvalidSessionTokenError("token has no subject")
    try:
        return int(subject)
    except (TypeError, ValueError) as exc:
        raise InvalidSessionTokenError(f"malformed subject: {subject!r}") from exc
