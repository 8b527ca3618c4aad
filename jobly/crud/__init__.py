"""
Repositories (Create, Read, Update, Delete) for the Jobly tables.

Each repository is constructed with a store client and issues plain SQL
through it, keeping SQL out of the API routes.
"""

from jobly.crud.company import CompanyRepository
from jobly.crud.job import JobRepository
from jobly.crud.user import UserRepository

__all__ = ["CompanyRepository", "JobRepository", "UserRepository"]
