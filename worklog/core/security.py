# worklog/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union

from jose import jwt

from worklog.core.config import settings


def create_access_token(
        subject: Union[str, Any],
        roles: Optional[List[str]] = None,
        expires_delta: Optional[timedelta] = None
) -> str:
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode: Dict[str, Any] = {"exp": expire, "sub": str(subject)}
    if roles is not None:
        to_encode["roles"] = roles

    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and verify a bearer token.

    Raises:
        JWTError: If the signature is invalid or the token has expired
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def normalize_roles(raw_roles: Any) -> Optional[List[str]]:
    """
    Read the roles claim, which may be a list or a single string.
    Returns None when the claim is absent or unusable.
    """
    if isinstance(raw_roles, list):
        return [str(role) for role in raw_roles]
    if isinstance(raw_roles, str):
        return [raw_roles]
    return None
