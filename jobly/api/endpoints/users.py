"""
User management endpoints.

POST / is for admins adding users (not self-registration, see /auth/register).
Everything under /{username} is open to admins and to that user.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status

from jobly.core.deps import (
    TokenUser,
    ensure_admin_or_current_user,
    get_admin_user,
    get_user_repository,
)
from jobly.core.security import create_access_token, generate_password
from jobly.crud import UserRepository
from jobly.schemas.user import (
    ApplicationResponse,
    UserCreateRequest,
    UserCreatedResponse,
    UserDeletedResponse,
    UserDetailEnvelope,
    UserEnvelope,
    UserJobListResponse,
    UserListResponse,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=UserCreatedResponse)
def create_user(
    request: UserCreateRequest,
    users: UserRepository = Depends(get_user_repository),
    admin: TokenUser = Depends(get_admin_user),
):
    """
    Add a user with a generated password.

    The returned token lets the new user sign in and set their own password.

    Authorization required: admin
    """
    user = users.register(
        username=request.username,
        password=generate_password(),
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        is_admin=request.is_admin,
    )
    logger.info(f"Admin {admin.username} created user {user.username} (admin: {user.is_admin})")
    return {"user": user, "token": create_access_token(user.username, user.is_admin)}


@router.get("/", response_model=UserListResponse)
def list_users(
    users: UserRepository = Depends(get_user_repository),
    admin: TokenUser = Depends(get_admin_user),
):
    """
    List all users.

    Authorization required: admin
    """
    return {"users": users.find_all()}


@router.get("/{username}", response_model=UserDetailEnvelope)
def get_user(
    username: str,
    users: UserRepository = Depends(get_user_repository),
    current: TokenUser = Depends(ensure_admin_or_current_user),
):
    """
    Retrieve a user and the ids of the jobs they applied for.

    Authorization required: admin or the same user
    """
    return {"user": users.get(username)}


@router.patch("/{username}", response_model=UserEnvelope)
def update_user(
    username: str,
    request: UserUpdateRequest,
    users: UserRepository = Depends(get_user_repository),
    current: TokenUser = Depends(ensure_admin_or_current_user),
):
    """
    Partially update a user. Fields can be: { firstName, lastName, email, password, isAdmin }

    Authorization required: admin or the same user; isAdmin is admin-only
    """
    changes = request.model_dump(exclude_none=True, by_alias=True)
    if "isAdmin" in changes and not current.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only admins can change admin status"
        )

    user = users.update(username, changes)
    logger.info(f"Updated user {username} (by {current.username})")
    return {"user": user}


@router.delete("/{username}", response_model=UserDeletedResponse)
def delete_user(
    username: str,
    users: UserRepository = Depends(get_user_repository),
    current: TokenUser = Depends(ensure_admin_or_current_user),
):
    """
    Delete a user.

    Authorization required: admin or the same user
    """
    users.remove(username)
    logger.info(f"Deleted user {username} (by {current.username})")
    return {"deleted": username}


@router.get("/{username}/jobs", response_model=UserJobListResponse)
def list_user_jobs(
    username: str,
    users: UserRepository = Depends(get_user_repository),
    current: TokenUser = Depends(ensure_admin_or_current_user),
):
    """
    List the jobs a user applied for, with company name and description.

    Authorization required: admin or the same user
    """
    return {"jobs": users.get_jobs(username)}


@router.post("/{username}/jobs/{job_id}", status_code=201, response_model=ApplicationResponse)
def apply_for_job(
    username: str,
    job_id: int,
    users: UserRepository = Depends(get_user_repository),
    current: TokenUser = Depends(ensure_admin_or_current_user),
):
    """
    Record that the user applied for a job.

    Authorization required: admin or the same user
    """
    users.apply_to_job(username, job_id)
    logger.info(f"User {username} applied for job {job_id}")
    return {"applied": job_id}
