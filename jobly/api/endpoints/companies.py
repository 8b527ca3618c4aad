import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from jobly.core.deps import TokenUser, get_admin_user, get_company_repository
from jobly.crud import CompanyRepository
from jobly.schemas.company import (
    CompanyCreateRequest,
    CompanyDeletedResponse,
    CompanyDetailEnvelope,
    CompanyEnvelope,
    CompanyFilterCriteria,
    CompanyListResponse,
    CompanyUpdateRequest,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=CompanyEnvelope)
def create_company(
    request: CompanyCreateRequest,
    companies: CompanyRepository = Depends(get_company_repository),
    admin: TokenUser = Depends(get_admin_user),
):
    """
    Create a company.

    Authorization required: admin
    """
    company = companies.create(request)
    logger.info(f"Created company {company.handle} (by {admin.username})")
    return {"company": company}


@router.get("/", response_model=CompanyListResponse)
def list_companies(
    name_like: Optional[str] = Query(None, alias="nameLike"),
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=0),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """
    List companies ordered by name, optionally filtered by nameLike,
    minEmployees and maxEmployees.

    Authorization required: none
    """
    criteria = CompanyFilterCriteria(
        name_like=name_like,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    return {"companies": companies.find_all(criteria)}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, companies: CompanyRepository = Depends(get_company_repository)):
    """
    Retrieve a company and its jobs.

    Authorization required: none
    """
    return {"company": companies.get(handle)}


@router.patch("/{handle}", response_model=CompanyEnvelope)
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    companies: CompanyRepository = Depends(get_company_repository),
    admin: TokenUser = Depends(get_admin_user),
):
    """
    Partially update a company. Fields can be: { name, description, numEmployees, logoUrl }

    Authorization required: admin
    """
    company = companies.update(handle, request.model_dump(exclude_unset=True, by_alias=True))
    logger.info(f"Updated company {handle} (by {admin.username})")
    return {"company": company}


@router.delete("/{handle}", response_model=CompanyDeletedResponse)
def delete_company(
    handle: str,
    companies: CompanyRepository = Depends(get_company_repository),
    admin: TokenUser = Depends(get_admin_user),
):
    """
    Delete a company together with its jobs.

    Authorization required: admin
    """
    companies.remove(handle)
    logger.info(f"Deleted company {handle} (by {admin.username})")
    return {"deleted": handle}
