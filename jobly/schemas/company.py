from typing import List, Optional

from pydantic import Field

from jobly.schemas.base import CamelModel, RequestModel
from jobly.schemas.job import CompanyJobResponse


class CompanyCreateRequest(RequestModel):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdateRequest(RequestModel):
    """Schema for a partial company update; the handle cannot change"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyFilterCriteria(CamelModel):
    """Optional company search filters; a filter applies whenever it is given"""
    name_like: Optional[str] = None
    min_employees: Optional[int] = Field(None, ge=0)
    max_employees: Optional[int] = Field(None, ge=0)


class CompanyResponse(CamelModel):
    """Schema for company response"""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyDetailResponse(CompanyResponse):
    """Company with the jobs it has posted"""
    jobs: List[CompanyJobResponse] = []


class CompanyEnvelope(CamelModel):
    company: CompanyResponse


class CompanyDetailEnvelope(CamelModel):
    company: CompanyDetailResponse


class CompanyListResponse(CamelModel):
    companies: List[CompanyResponse]


class CompanyDeletedResponse(CamelModel):
    deleted: str
