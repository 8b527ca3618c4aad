from decimal import Decimal
from typing import List, Optional, Union

from pydantic import Field, field_validator

from jobly.schemas.base import CamelModel, RequestModel

# A fraction between 0 and 1, written as a decimal string ("0", "0.25", "1.0")
EQUITY_PATTERN = r"^(0(\.\d+)?|1(\.0+)?|\.\d+)$"


class JobCreateRequest(RequestModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(RequestModel):
    """Schema for a partial job update; only the fields sent are changed"""
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)


class JobFilterCriteria(CamelModel):
    """
    Optional job search filters.

    A filter applies whenever it is given, including minSalary=0.
    hasEquity=true limits results to jobs with non-zero equity;
    false or missing applies no equity filter.
    """
    title: Optional[str] = None
    min_salary: Optional[int] = Field(None, ge=0)
    has_equity: Optional[bool] = None


class CompanyJobResponse(CamelModel):
    """Job as listed on a company's detail page"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None

    @field_validator("equity", mode="before")
    @classmethod
    def equity_as_string(cls, v: Union[str, Decimal, float, int, None]) -> Optional[str]:
        """
        NUMERIC columns come back as Decimal (PostgreSQL) or float/int (SQLite).

        Decimal keeps the stored scale ("0.50" stays "0.50"); SQLite's numeric
        affinity does not, so "0.50" reads back as "0.5" and "1.0" as "1".
        """
        if v is None:
            return None
        return str(v)


class JobResponse(CompanyJobResponse):
    """Schema for job response"""
    company_handle: str


class JobEnvelope(CamelModel):
    job: JobResponse


class JobListResponse(CamelModel):
    jobs: List[JobResponse]


class JobDeletedResponse(CamelModel):
    deleted: int
