"""Jobly: a REST backend for companies, jobs and users."""

__version__ = "1.0.0"
