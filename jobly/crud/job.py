"""
Repository for jobs.

All statements are plain SQL run through the injected store client; the
SET and WHERE parts are built by jobly.helpers.sql.
"""

from typing import Any, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError

from jobly.core.errors import NotFoundError, ValidationError
from jobly.core.store import Store
from jobly.helpers.sql import sql_for_job_filter, sql_for_partial_update
from jobly.schemas.job import JobCreateRequest, JobFilterCriteria, JobResponse

JOB_COLUMNS = "id, title, salary, equity, company_handle"

# External field name -> column; jobs use identical names
JOB_FIELD_MAP = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}
JOB_UPDATABLE = frozenset(JOB_FIELD_MAP)


class JobRepository:
    """Create, search, read, update and delete jobs."""

    def __init__(self, store: Store):
        self.store = store

    def create(self, data: JobCreateRequest) -> JobResponse:
        """
        Create a job and return it with its generated id.

        Raises:
            ValidationError: If the company does not exist or a column
                constraint is violated
        """
        try:
            rows = self.store.execute(
                f"""INSERT INTO jobs (title, salary, equity, company_handle)
                    VALUES ($1, $2, $3, $4)
                    RETURNING {JOB_COLUMNS}""",
                [data.title, data.salary, data.equity, data.company_handle],
            )
        except IntegrityError as e:
            raise ValidationError(f"Invalid job for company {data.company_handle}") from e
        return JobResponse.model_validate(rows[0])

    def find_all(self, criteria: Optional[JobFilterCriteria] = None) -> List[JobResponse]:
        """
        Return jobs matching `criteria` (all jobs when None), ordered by title.
        """
        fragment = sql_for_job_filter(criteria or JobFilterCriteria())
        rows = self.store.execute(
            f"SELECT {JOB_COLUMNS} FROM jobs {fragment.clause}",
            fragment.values,
        )
        return [JobResponse.model_validate(row) for row in rows]

    def get(self, job_id: int) -> JobResponse:
        """
        Return the job with `job_id`.

        Raises:
            NotFoundError: If there is no such job
        """
        rows = self.store.execute(
            f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        return JobResponse.model_validate(rows[0])

    def update(self, job_id: int, data: Mapping[str, Any]) -> JobResponse:
        """
        Partially update a job; only the fields present in `data` change.

        Data can include: title, salary, equity.

        Raises:
            ValidationError: If data is empty or names another field
            NotFoundError: If there is no such job
        """
        fragment = sql_for_partial_update(data, JOB_FIELD_MAP, JOB_UPDATABLE)
        try:
            rows = self.store.execute(
                f"""UPDATE jobs
                    SET {fragment.clause}
                    WHERE id = {fragment.next_placeholder}
                    RETURNING {JOB_COLUMNS}""",
                [*fragment.values, job_id],
            )
        except IntegrityError as e:
            raise ValidationError(f"Invalid update for job {job_id}") from e
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        return JobResponse.model_validate(rows[0])

    def remove(self, job_id: int) -> None:
        """
        Delete a job.

        Raises:
            NotFoundError: If there is no such job
        """
        rows = self.store.execute(
            "DELETE FROM jobs WHERE id = $1 RETURNING id",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
