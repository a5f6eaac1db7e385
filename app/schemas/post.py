from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _require_text(v: str) -> str:
    value = (v or "").strip()
    if not value:
        raise ValueError("Text is required")
    return value


class PostCreate(BaseModel):
    text: str

    @field_validator("text")
    @classmethod
    def _text_required(cls, v: str) -> str:
        return _require_text(v)


class CommentCreate(PostCreate):
    pass


class Like(BaseModel):
    user: int


class Comment(BaseModel):
    id: str
    user: int
    text: str
    name: str | None = None
    avatar: str | None = None
    date: datetime


class PostRead(BaseModel):
    id: int
    user: int | None = Field(default=None, validation_alias=AliasChoices("user_id", "user"))
    text: str
    name: str | None = None
    avatar: str | None = None
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    date: datetime

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    msg: str
