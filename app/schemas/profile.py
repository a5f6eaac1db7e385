from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.user import UserSummary


SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def _required(message: str):
    def check(v: Any) -> str:
        value = ("" if v is None else str(v)).strip()
        if not value:
            raise ValueError(message)
        return value

    return check


def split_skills(raw: str | list[str] | None) -> list[str]:
    """Split a comma-separated skills string into trimmed, non-blank items."""
    if raw is None:
        return []
    parts = raw if isinstance(raw, list) else str(raw).split(",")
    return [str(part).strip() for part in parts if str(part).strip()]


class SocialLinks(BaseModel):
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ProfileUpsert(BaseModel):
    """Create-or-update payload.

    Only fields present in the request body are written on update; use
    ``model_dump(exclude_unset=True)`` to read them.
    """

    position: str
    skills: list[str]
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    @field_validator("position", mode="before")
    @classmethod
    def _position_required(cls, v: Any) -> str:
        return _required("Position is required")(v)

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, v: Any) -> list[str]:
        if v is not None and not isinstance(v, (str, list)):
            raise ValueError("Skills must be a comma-separated string or a list of strings")
        skills = split_skills(v)
        if not skills:
            raise ValueError("Skills is required")
        return skills


class _EntryBase(BaseModel):
    from_date: date = Field(alias="from")
    to: date | None = None
    current: bool = False
    description: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class ExperienceCreate(_EntryBase):
    title: str
    company: str
    location: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _title_required(cls, v: Any) -> str:
        return _required("Title is required")(v)

    @field_validator("company", mode="before")
    @classmethod
    def _company_required(cls, v: Any) -> str:
        return _required("Company is required")(v)


class EducationCreate(_EntryBase):
    school: str
    degree: str
    fieldofstudy: str

    @field_validator("school", mode="before")
    @classmethod
    def _school_required(cls, v: Any) -> str:
        return _required("School is required")(v)

    @field_validator("degree", mode="before")
    @classmethod
    def _degree_required(cls, v: Any) -> str:
        return _required("Degree is required")(v)

    @field_validator("fieldofstudy", mode="before")
    @classmethod
    def _field_of_study_required(cls, v: Any) -> str:
        return _required("Field of study is required")(v)


class ExperienceRead(ExperienceCreate):
    id: str


class EducationRead(EducationCreate):
    id: str


class ProfileRead(BaseModel):
    id: int
    user: UserSummary
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    position: str
    github_username: str | None = None
    skills: list[str] = Field(default_factory=list)
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: list[ExperienceRead] = Field(default_factory=list)
    education: list[EducationRead] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("social", mode="before")
    @classmethod
    def _coerce_social(cls, v: Any) -> Any:
        return v or {}

    @field_validator("skills", "experience", "education", mode="before")
    @classmethod
    def _coerce_lists(cls, v: Any) -> Any:
        return v or []
