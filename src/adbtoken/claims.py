"""Inspection of db-token claims."""

from datetime import datetime, timezone
from typing import Any, Optional

import jwt


def token_expiry(token: str) -> Optional[datetime]:
    """Return the token's ``exp`` claim as an aware UTC datetime, if it has one."""
    if not token:
        return None
    try:
        # Signature is checked by the database, not here
        claims: dict[str, Any] = jwt.decode(token.strip(), options={"verify_signature": False})
    except jwt.InvalidTokenError:
        return None
    exp = claims.get("exp")
    if not isinstance(exp, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(exp, tz=timezone.utc)
    except (OverflowError, ValueError, OSError):
        # NaN or outside the platform time_t range
        return None


def is_expired(token: str, now: Optional[datetime] = None) -> bool:
    expiry = token_expiry(token)
    if expiry is None:
        return False
    if now is None:
        now = datetime.now(timezone.utc)
    return expiry <= now
