"""
Pydantic schemas for users and authentication.
"""

from typing import List, Optional

from pydantic import EmailStr, Field

from jobly.schemas.base import CamelModel, RequestModel
from jobly.schemas.job import CompanyJobResponse


class UserRegisterRequest(RequestModel):
    """Request schema for self-registration; new accounts are never admins."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(
        ...,
        min_length=5,
        max_length=72,  # bcrypt limit
    )
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class UserCreateRequest(RequestModel):
    """
    Request schema for an admin adding a user.

    No password is accepted: one is generated and the returned token lets
    the new user log in and set their own.
    """
    username: str = Field(..., min_length=1, max_length=25)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    is_admin: bool = False


class UserUpdateRequest(RequestModel):
    """Partial user update. Only admins may change isAdmin."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=5, max_length=72)
    is_admin: Optional[bool] = None


class TokenRequest(RequestModel):
    """Request schema for logging in."""
    username: str
    password: str


class TokenResponse(CamelModel):
    """JWT token response."""
    token: str


class UserResponse(CamelModel):
    """User profile response (no password hash)."""
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserDetailResponse(UserResponse):
    """User profile with the ids of jobs applied for."""
    jobs: List[int] = []


class UserJobResponse(CompanyJobResponse):
    """A job the user applied for, with the applicant and the hiring company."""
    username: str
    first_name: str
    last_name: str
    name: str
    description: str


class UserCreatedResponse(CamelModel):
    user: UserResponse
    token: str


class UserEnvelope(CamelModel):
    user: UserResponse


class UserDetailEnvelope(CamelModel):
    user: UserDetailResponse


class UserListResponse(CamelModel):
    users: List[UserResponse]


class UserDeletedResponse(CamelModel):
    deleted: str


class ApplicationResponse(CamelModel):
    applied: int


class UserJobListResponse(CamelModel):
    jobs: List[UserJobResponse]
