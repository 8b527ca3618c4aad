"""
Authentication endpoints.

- POST /token: Exchange username/password for a JWT
- POST /register: Create a (non-admin) account and receive a JWT
"""

import logging
from fastapi import APIRouter, Depends

from jobly.core.deps import get_user_repository
from jobly.core.security import create_access_token
from jobly.crud import UserRepository
from jobly.schemas.user import TokenRequest, TokenResponse, UserRegisterRequest

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=TokenResponse)
def login(request: TokenRequest, users: UserRepository = Depends(get_user_repository)):
    """
    Authenticate a user and return a JWT for further requests.

    Returns 401 for an unknown user or wrong password.
    """
    user = users.authenticate(request.username, request.password)
    logger.info(f"User logged in: {user.username}")
    return TokenResponse(token=create_access_token(user.username, user.is_admin))


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(request: UserRegisterRequest, users: UserRepository = Depends(get_user_repository)):
    """
    Register a new user account.

    Accounts created here are never admins. Returns a JWT for immediate use.
    """
    user = users.register(
        username=request.username,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        is_admin=False,
    )
    logger.info(f"New user registered: {user.username}")
    return TokenResponse(token=create_access_token(user.username, user.is_admin))
