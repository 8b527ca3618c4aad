import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from jobly.core.deps import TokenUser, get_admin_user, get_job_repository
from jobly.crud import JobRepository
from jobly.schemas.job import (
    JobCreateRequest,
    JobDeletedResponse,
    JobEnvelope,
    JobFilterCriteria,
    JobListResponse,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    jobs: JobRepository = Depends(get_job_repository),
    admin: TokenUser = Depends(get_admin_user),
):
    """
    Create a job posting.

    Returns { job: { id, title, salary, equity, companyHandle } }

    Authorization required: admin
    """
    job = jobs.create(request)
    logger.info(f"Created job {job.id}: {job.title} at {job.company_handle} (by {admin.username})")
    return {"job": job}


@router.get("/", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = Query(None, description="Case-insensitive substring of the title"),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(None, alias="hasEquity"),
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    List jobs ordered by title, optionally filtered.

    Filters:
        title: case-insensitive substring match
        minSalary: salary at least this amount
        hasEquity: true limits results to jobs with non-zero equity

    Authorization required: none
    """
    criteria = JobFilterCriteria(title=title, min_salary=min_salary, has_equity=has_equity)
    return {"jobs": jobs.find_all(criteria)}


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: int, jobs: JobRepository = Depends(get_job_repository)):
    """
    Retrieve a job by ID.

    Authorization required: none
    """
    return {"job": jobs.get(job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    jobs: JobRepository = Depends(get_job_repository),
    admin: TokenUser = Depends(get_admin_user),
):
    """
    Partially update a job. Fields can be: { title, salary, equity }

    Authorization required: admin
    """
    job = jobs.update(job_id, request.model_dump(exclude_unset=True, by_alias=True))
    logger.info(f"Updated job {job_id} (by {admin.username})")
    return {"job": job}


@router.delete("/{job_id}", response_model=JobDeletedResponse)
def delete_job(
    job_id: int,
    jobs: JobRepository = Depends(get_job_repository),
    admin: TokenUser = Depends(get_admin_user),
):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    jobs.remove(job_id)
    logger.info(f"Deleted job {job_id} (by {admin.username})")
    return {"deleted": job_id}
