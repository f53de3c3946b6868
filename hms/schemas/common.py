from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")

class APIModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

class Envelope(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None

class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str

def ok(data=None, message: Optional[str] = None) -> dict:
    return {"success": True, "data": data, "message": message}

# Documented on every router; bodies come from the handlers in main.py
ERROR_RESPONSES = {
    code: {"model": ErrorResponse}
    for code in (401, 403, 404, 409, 422)
}
