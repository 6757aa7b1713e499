"""
Authentication and role-based authorization dependencies.
"""
from typing import Callable, List, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import BaseModel

from worklog.core.errors import AuthenticationError, AuthorizationError
from worklog.core.security import decode_access_token, normalize_roles

DEFAULT_ROLE = "user"

# auto_error is off so missing credentials produce the API's own error envelope
bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Identity resolved from the bearer token."""
    uid: str
    roles: Optional[List[str]] = None


async def authenticate(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> CurrentUser:
    """
    Resolve the caller from the Authorization header.

    Args:
        credentials: Parsed "Bearer <token>" header, or None if absent or malformed

    Returns:
        Authenticated user identity

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    if credentials is None or not credentials.credentials.strip():
        raise AuthenticationError("Missing or invalid Authorization header.")

    try:
        payload = decode_access_token(credentials.credentials.strip())
    except JWTError:
        raise AuthenticationError("Authentication failed. Please provide a valid token.")

    uid = payload.get("sub")
    if not uid:
        raise AuthenticationError("Authentication failed. Please provide a valid token.")

    return CurrentUser(uid=str(uid), roles=normalize_roles(payload.get("roles")))


class RoleChecker:
    """
    Role checking for authenticated callers.
    Callers whose token carries no roles claim are treated as basic users.
    """

    def effective_roles(self, user: CurrentUser) -> List[str]:
        if user.roles is not None:
            return user.roles
        return [DEFAULT_ROLE]

    def is_allowed(self, user: CurrentUser, required_roles: List[str]) -> bool:
        """
        Check whether the user holds at least one of the required roles.
        An empty requirement list allows every authenticated caller.
        """
        if not required_roles:
            return True
        roles = self.effective_roles(user)
        return any(role in roles for role in required_roles)

    def requires_role(self, required_roles: List[str]) -> Callable:
        """
        FastAPI dependency for routes that require one of the given roles.

        Args:
            required_roles: Roles accepted for the route

        Returns:
            Dependency function
        """

        async def dependency(current_user: CurrentUser = Depends(authenticate)) -> CurrentUser:
            if not self.is_allowed(current_user, required_roles):
                raise AuthorizationError("Forbidden. Required role is missing.")
            return current_user

        return dependency


role_checker = RoleChecker()


def authorize(has_role: List[str]) -> Callable:
    """
    Dependency to check that the current user has one of the required roles.

    Args:
        has_role: Roles accepted for the route

    Returns:
        Dependency function
    """
    return role_checker.requires_role(list(has_role))
