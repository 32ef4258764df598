"""
Pydantic schemas for user profile endpoints.
"""
from typing import Optional
from pydantic import Field

from app.db.models.enums import JobRole
from app.schemas.base import CamelModel


class UpdateRoleRequest(CamelModel):
    # Plain string: parsed into JobRole by the service so an unknown value
    # is reported as a validation failure with the offending value
    role: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    job_role: Optional[JobRole] = None
    resume_url: Optional[str] = None
