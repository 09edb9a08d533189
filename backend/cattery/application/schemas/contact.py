"""Pydantic DTO for the contact form."""

from pydantic import BaseModel, Field


class ContactRequest(BaseModel):
    """Required fields are checked by ContactService so blanks and absences read the same."""

    name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    subject: str | None = Field(None, max_length=200)
    message: str | None = Field(None, max_length=5000)
