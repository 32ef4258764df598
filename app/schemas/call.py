"""
Pydantic schemas for voice-call registration.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class RegisterCallRequest(BaseModel):
    """Body of POST /api/register-call (snake_case on the wire)."""
    interviewer_id: str = Field(..., min_length=1)
    dynamic_data: Optional[Dict[str, Any]] = Field(default=None, description="Variables injected into the agent prompt")
