"""Schemas for profiles and talent browsing."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    full_name: str | None
    role: str
    bio: str | None
    location: str | None
    hourly_rate: float | None
    skills: list[str]
    created_at: datetime


class ProfileUpdate(BaseModel):
    """Self-editable profile fields; unset fields are left unchanged."""

    full_name: str | None = Field(default=None, max_length=255)
    bio: str | None = None
    location: str | None = Field(default=None, max_length=255)
    hourly_rate: float | None = Field(default=None, ge=0)
    skills: list[str] | None = None

    @field_validator("skills")
    @classmethod
    def strip_skills(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [skill.strip() for skill in value if skill and skill.strip()]


class ContactRequest(BaseModel):
    """Message from a client to a freelancer."""

    message: str = Field(..., max_length=2000)

    @field_validator("message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please enter a message")
        return value.strip()


class ContactResponse(BaseModel):
    status: str
    message: str
