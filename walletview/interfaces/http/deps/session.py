"""Resolve the signed-in user from the request, if any."""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from walletview.core.config import get_settings
from walletview.core.exceptions import InvalidSessionTokenError
from walletview.core.security import decode_access_token

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> Optional[int]:
    """Return the user id from the bearer header or session cookie, or ``None``.

    Pages render an empty state for anonymous visitors instead of failing, so
    a missing or invalid token is not an error here.
    """
    token = credentials.credentials if credentials else request.cookies.get(get_settings().security.cookie_name)
    if not token:
        return None
    try:
        return decode_access_token(token)
    except InvalidSessionTokenError as exc:
        logger.debug("Ignoring invalid session token: %s", exc)
        return None


__all__ = ["get_current_user_id"]
