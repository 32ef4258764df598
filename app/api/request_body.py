"""
Raw JSON body access for routes whose schema is validated behind the auth gate.
"""
from typing import Any, Dict, Type

from fastapi import Request
from pydantic import BaseModel


async def read_json_body(request: Request) -> Any:
    """The decoded JSON body, or None when it is missing or malformed."""
    try:
        return await request.json()
    except ValueError:
        return None


def json_body_docs(model: Type[BaseModel]) -> Dict[str, Any]:
    """``openapi_extra`` documenting a body the route reads itself."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema(by_alias=True)}},
        }
    }
