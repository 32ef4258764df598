"""
Shared pydantic base for wire schemas.

Field names are snake_case in Python and camelCase on the wire.
"""
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from app.core.errors import ValidationFailureError

M = TypeVar("M", bound=BaseModel)


class CamelModel(BaseModel):
    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


def validate_body(model: Type[M], body: Any, message: Optional[str] = None) -> M:
    """
    Validate a raw request body against a schema.

    User-scoped routes take the body unparsed so identity is checked first;
    the gated service validates it here.

    Raises:
        ValidationFailureError: with ``message``, or the first schema error
    """
    try:
        return model.model_validate(body if body is not None else {})
    except ValidationError as e:
        if message:
            raise ValidationFailureError(message) from e
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        raise ValidationFailureError(f"Invalid {field}: {first['msg']}") from e
