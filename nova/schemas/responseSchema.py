from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Envelope shared by every JSON response."""
    success: bool
    message: Optional[str] = None
    data: Optional[T] = None


class HealthStatus(BaseModel):
    version: str
    status: str
