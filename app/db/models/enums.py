"""
Enumerations shared by models and request schemas.
"""
import enum


class UserRole(str, enum.Enum):
    """Account privilege level."""
    ADMIN = "ADMIN"
    USER = "USER"


class JobRole(str, enum.Enum):
    """Target role a user practices for; keys the question bank."""
    FRONTEND_DEVELOPER = "FRONTEND_DEVELOPER"
    BACKEND_DEVELOPER = "BACKEND_DEVELOPER"
    DATA_SCIENTIST = "DATA_SCIENTIST"
    PRODUCT_MANAGER = "PRODUCT_MANAGER"
    UX_DESIGNER = "UX_DESIGNER"


class ExperienceLevel(str, enum.Enum):
    """Seniority a behavioral interview is pitched at."""
    ENTRY = "ENTRY"
    MID = "MID"
    SENIOR = "SENIOR"
