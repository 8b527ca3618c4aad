"""
Repository for users and their job applications.

Passwords are stored as bcrypt hashes and never returned.
"""

from typing import Any, Dict, List, Mapping

from jobly.core.errors import NotFoundError, UnauthorizedError, ValidationError
from jobly.core.security import get_password_hash, verify_password
from jobly.core.store import Store
from jobly.helpers.sql import sql_for_partial_update
from jobly.schemas.user import UserDetailResponse, UserJobResponse, UserResponse

USER_COLUMNS = "username, first_name, last_name, email, is_admin"

USER_FIELD_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}
USER_UPDATABLE = frozenset({"firstName", "lastName", "email", "password", "isAdmin"})


class UserRepository:
    """Register, authenticate, read, update and delete users."""

    def __init__(self, store: Store):
        self.store = store

    def authenticate(self, username: str, password: str) -> UserResponse:
        """
        Return the user if `password` is correct.

        Raises:
            UnauthorizedError: If the user is missing or the password is wrong
        """
        rows = self.store.execute(
            f"SELECT {USER_COLUMNS}, password FROM users WHERE username = $1",
            [username],
        )
        if rows and verify_password(password, rows[0]["password"]):
            return UserResponse.model_validate(rows[0])

        raise UnauthorizedError("Invalid username/password")

    def register(
        self,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
        is_admin: bool = False,
    ) -> UserResponse:
        """
        Create a user with a hashed password.

        Raises:
            ValidationError: If the username is taken
        """
        duplicate = self.store.execute(
            "SELECT username FROM users WHERE username = $1",
            [username],
        )
        if duplicate:
            raise ValidationError(f"Duplicate username: {username}")

        rows = self.store.execute(
            f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
                VALUES ($1, $2, $3, $4, $5, $6)
                RETURNING {USER_COLUMNS}""",
            [username, get_password_hash(password), first_name, last_name, email, is_admin],
        )
        return UserResponse.model_validate(rows[0])

    def find_all(self) -> List[UserResponse]:
        """Return all users ordered by username."""
        rows = self.store.execute(
            f"SELECT {USER_COLUMNS} FROM users ORDER BY username"
        )
        return [UserResponse.model_validate(row) for row in rows]

    def get(self, username: str) -> UserDetailResponse:
        """
        Return a user with the ids of the jobs they applied for.

        Raises:
            NotFoundError: If there is no such user
        """
        rows = self.store.execute(
            f"SELECT {USER_COLUMNS} FROM users WHERE username = $1",
            [username],
        )
        if not rows:
            raise NotFoundError(f"No user: {username}")

        applications = self.store.execute(
            "SELECT job_id FROM applications WHERE username = $1 ORDER BY job_id",
            [username],
        )
        return UserDetailResponse(
            **UserResponse.model_validate(rows[0]).model_dump(),
            jobs=[row["job_id"] for row in applications],
        )

    def get_jobs(self, username: str) -> List[UserJobResponse]:
        """
        Return the jobs `username` applied for, ordered by job id, each with
        the applicant's name and the company's name and description.

        Raises:
            NotFoundError: If there is no such user
        """
        if not self.store.execute("SELECT username FROM users WHERE username = $1", [username]):
            raise NotFoundError(f"No user: {username}")

        rows = self.store.execute(
            """SELECT u.username, u.first_name, u.last_name,
                      j.id, j.title, j.salary, j.equity,
                      c.name, c.description
               FROM applications AS a
               JOIN users AS u ON u.username = a.username
               JOIN jobs AS j ON j.id = a.job_id
               JOIN companies AS c ON c.handle = j.company_handle
               WHERE a.username = $1
               ORDER BY j.id""",
            [username],
        )
        return [UserJobResponse.model_validate(row) for row in rows]

    def update(self, username: str, data: Mapping[str, Any]) -> UserResponse:
        """
        Partially update a user.

        Data can include: firstName, lastName, email, password, isAdmin.
        A new password is hashed before it is stored.

        Raises:
            ValidationError: If data is empty or names another field
            NotFoundError: If there is no such user
        """
        changes: Dict[str, Any] = dict(data)
        if changes.get("password") is not None:
            changes["password"] = get_password_hash(changes["password"])

        fragment = sql_for_partial_update(changes, USER_FIELD_MAP, USER_UPDATABLE)
        rows = self.store.execute(
            f"""UPDATE users
                SET {fragment.clause}
                WHERE username = {fragment.next_placeholder}
                RETURNING {USER_COLUMNS}""",
            [*fragment.values, username],
        )
        if not rows:
            raise NotFoundError(f"No user: {username}")
        return UserResponse.model_validate(rows[0])

    def remove(self, username: str) -> None:
        """
        Delete a user.

        Raises:
            NotFoundError: If there is no such user
        """
        rows = self.store.execute(
            "DELETE FROM users WHERE username = $1 RETURNING username",
            [username],
        )
        if not rows:
            raise NotFoundError(f"No user: {username}")

    def apply_to_job(self, username: str, job_id: int) -> None:
        """
        Record that `username` applied for `job_id`. Applying twice is a no-op.

        Raises:
            NotFoundError: If the job or the user does not exist
        """
        if not self.store.execute("SELECT id FROM jobs WHERE id = $1", [job_id]):
            raise NotFoundError(f"No job: {job_id}")
        if not self.store.execute("SELECT username FROM users WHERE username = $1", [username]):
            raise NotFoundError(f"No user: {username}")

        self.store.execute(
            """INSERT INTO applications (username, job_id)
               VALUES ($1, $2)
               ON CONFLICT DO NOTHING""",
            [username, job_id],
        )
