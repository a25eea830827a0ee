from datetime import datetime, timezone
from pydantic import BaseModel, field_validator


class ContactSubmissionRequest(BaseModel):
    """Request schema for contact form submission.

    Missing and null fields decode as empty strings so the service reports
    them the same way as blank ones.
    """
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""

    @field_validator("name", "email", "subject", "message", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("name", "email", "subject", "message")
    @classmethod
    def encodable_as_utf8(cls, value: str) -> str:
        # Lone surrogates survive JSON decoding but cannot be stored
        value.encode("utf-8")
        return value


class ContactSubmissionResponse(BaseModel):
    """Payload returned after a successful submission."""
    id: int


class ContactRecord(BaseModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime

    class Config:
        from_attributes = True

    @field_validator("created_at")
    @classmethod
    def stored_as_utc(cls, value: datetime) -> datetime:
        """The store writes CURRENT_TIMESTAMP, which is UTC without an offset."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
