"""
Token issue and parse.

Tokens are HS256 JWTs carrying {"data": ..., "iat": ..., "nbf": ...}.
Validity is a pure time window: nbf <= now and now - iat <= max age.
Nothing is stored server side, so a token can not be revoked before it
expires.
"""
import logging
import time
from typing import Any, Optional

import jwt

from ..config import settings
from ..errors import SigningError, TokenExpiredError, TokenIllegalError, TokenMalformedError

ALGORITHM = "HS256"

logger = logging.getLogger(__name__)


def _now(now: Optional[float]) -> int:
    return int(time.time() if now is None else now)


def create_token(data: Any, *, secret: Optional[str] = None, now: Optional[float] = None) -> str:
    """
    Issue a signed token carrying data.

    Args:
        data: Any JSON serializable value, usually the integer user id
        secret: Signing secret, defaults to TOKEN_SECRET
        now: Issue time as unix seconds, defaults to the current time

    Raises:
        SigningError: If no secret is configured or data is not serializable
    """
    secret = settings.TOKEN_SECRET if secret is None else secret
    if not secret:
        raise SigningError("token secret is not configured")

    issued_at = _now(now)
    claims = {"data": data, "iat": issued_at, "nbf": issued_at}
    try:
        return jwt.encode(claims, secret, algorithm=ALGORITHM)
    except (TypeError, ValueError) as e:
        raise SigningError(f"can not encode token payload: {e}") from e


def parse_token(
    token: str,
    *,
    secret: Optional[str] = None,
    max_age: Optional[int] = None,
    now: Optional[float] = None,
) -> Any:
    """
    Verify a token and return the data it carries.

    Raises:
        TokenMalformedError: Bad signature or structure
        TokenIllegalError: nbf lies in the future
        TokenExpiredError: More than max_age seconds passed since iat
    """
    secret = settings.TOKEN_SECRET if secret is None else secret
    max_age = settings.TOKEN_EXPIRED_TIME if max_age is None else max_age
    if not secret:
        raise TokenMalformedError("token secret is not configured")

    try:
        # Time checks are done below against our own clock
        claims = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"verify_exp": False, "verify_nbf": False, "verify_iat": False},
        )
    except jwt.InvalidTokenError as e:
        raise TokenMalformedError(f"can not handle this token: {e}") from e

    if "data" not in claims:
        raise TokenMalformedError("token has no data claim")
    try:
        issued_at = int(claims["iat"])
        not_before = int(claims["nbf"])
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        raise TokenMalformedError("token has missing or invalid time claims") from e

    current = _now(now)
    if not_before > current:
        logger.warning("Rejected token not valid before %s (now=%s)", not_before, current)
        raise TokenIllegalError("token is not valid yet")
    if current - issued_at > max_age:
        raise TokenExpiredError("token is expired")

    return claims["data"]
