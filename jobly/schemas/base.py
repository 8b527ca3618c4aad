"""
Shared pydantic configuration.

Python code uses snake_case field names; the JSON API uses camelCase
(companyHandle, numEmployees, isAdmin, ...).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialised with camelCase aliases"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Base schema for request bodies; unknown fields are rejected"""
    model_config = ConfigDict(extra="forbid")
