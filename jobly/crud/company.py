"""
Repository for companies.
"""

from typing import Any, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError

from jobly.core.errors import NotFoundError, ValidationError
from jobly.core.store import Store
from jobly.helpers.sql import sql_for_company_filter, sql_for_partial_update
from jobly.schemas.company import (
    CompanyCreateRequest,
    CompanyDetailResponse,
    CompanyFilterCriteria,
    CompanyResponse,
)
from jobly.schemas.job import CompanyJobResponse

COMPANY_COLUMNS = "handle, name, description, num_employees, logo_url"

COMPANY_FIELD_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}
COMPANY_UPDATABLE = frozenset({"name", "description", "numEmployees", "logoUrl"})


class CompanyRepository:
    """Create, search, read, update and delete companies."""

    def __init__(self, store: Store):
        self.store = store

    def create(self, data: CompanyCreateRequest) -> CompanyResponse:
        """
        Create a company.

        Raises:
            ValidationError: If a company with the same handle already exists
        """
        duplicate = self.store.execute(
            "SELECT handle FROM companies WHERE handle = $1",
            [data.handle],
        )
        if duplicate:
            raise ValidationError(f"Duplicate company: {data.handle}")

        try:
            rows = self.store.execute(
                f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                    VALUES ($1, $2, $3, $4, $5)
                    RETURNING {COMPANY_COLUMNS}""",
                [data.handle, data.name, data.description, data.num_employees, data.logo_url],
            )
        except IntegrityError as e:
            raise ValidationError(f"Duplicate company name: {data.name}") from e
        return CompanyResponse.model_validate(rows[0])

    def find_all(self, criteria: Optional[CompanyFilterCriteria] = None) -> List[CompanyResponse]:
        """
        Return companies matching `criteria`, ordered by name.

        Raises:
            ValidationError: If minEmployees is greater than maxEmployees
        """
        fragment = sql_for_company_filter(criteria or CompanyFilterCriteria())
        rows = self.store.execute(
            f"SELECT {COMPANY_COLUMNS} FROM companies {fragment.clause}",
            fragment.values,
        )
        return [CompanyResponse.model_validate(row) for row in rows]

    def get(self, handle: str) -> CompanyDetailResponse:
        """
        Return a company together with its jobs.

        Raises:
            NotFoundError: If there is no such company
        """
        rows = self.store.execute(
            f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        job_rows = self.store.execute(
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = $1
               ORDER BY id""",
            [handle],
        )
        return CompanyDetailResponse(
            **CompanyResponse.model_validate(rows[0]).model_dump(),
            jobs=[CompanyJobResponse.model_validate(row) for row in job_rows],
        )

    def update(self, handle: str, data: Mapping[str, Any]) -> CompanyResponse:
        """
        Partially update a company.

        Data can include: name, description, numEmployees, logoUrl.

        Raises:
            ValidationError: If data is empty or names another field
            NotFoundError: If there is no such company
        """
        fragment = sql_for_partial_update(data, COMPANY_FIELD_MAP, COMPANY_UPDATABLE)
        try:
            rows = self.store.execute(
                f"""UPDATE companies
                    SET {fragment.clause}
                    WHERE handle = {fragment.next_placeholder}
                    RETURNING {COMPANY_COLUMNS}""",
                [*fragment.values, handle],
            )
        except IntegrityError as e:
            raise ValidationError(f"Invalid update for company {handle}") from e
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        return CompanyResponse.model_validate(rows[0])

    def remove(self, handle: str) -> None:
        """
        Delete a company and, through the foreign key, its jobs.

        Raises:
            NotFoundError: If there is no such company
        """
        rows = self.store.execute(
            "DELETE FROM companies WHERE handle = $1 RETURNING handle",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
