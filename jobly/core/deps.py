"""
FastAPI dependencies for authentication and authorization.

Tokens are optional on the wire: public endpoints simply don't depend on
these. Protected endpoints use one of:

- get_current_user: any valid token (401 otherwise)
- get_admin_user: token of an admin (403 for other users)
- ensure_admin_or_current_user: admin, or the user named in the path

Repositories are provided the same way, built on the store client from
get_store so tests can swap the store with app.dependency_overrides.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from jobly.core.database import get_store
from jobly.core.security import decode_token
from jobly.core.store import Store
from jobly.crud import CompanyRepository, JobRepository, UserRepository

# HTTP Bearer token scheme (Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class TokenUser:
    """Identity carried by a validated token."""
    username: str
    is_admin: bool = False


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenUser:
    """
    Extract and validate the current user from the JWT token.

    Raises:
        HTTPException 401: If the token is missing or invalid
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise credentials_exception

    username: Optional[str] = payload.get("sub")
    if username is None:
        raise credentials_exception

    return TokenUser(username=username, is_admin=bool(payload.get("is_admin", False)))


async def get_admin_user(user: TokenUser = Depends(get_current_user)) -> TokenUser:
    """
    Require an admin token.

    Raises:
        HTTPException 403: If the user is not an admin
    """
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required"
        )
    return user


async def ensure_admin_or_current_user(
    username: str,
    user: TokenUser = Depends(get_current_user),
) -> TokenUser:
    """
    Require an admin token or a token for the `username` path parameter.

    Raises:
        HTTPException 403: If the token belongs to another non-admin user
    """
    if not (user.is_admin or user.username == username):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not permitted to access this user"
        )
    return user


def get_company_repository(store: Store = Depends(get_store)) -> CompanyRepository:
    return CompanyRepository(store)


def get_job_repository(store: Store = Depends(get_store)) -> JobRepository:
    return JobRepository(store)


def get_user_repository(store: Store = Depends(get_store)) -> UserRepository:
    return UserRepository(store)
