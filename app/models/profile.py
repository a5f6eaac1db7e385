# profile.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from app.database import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    company = Column(String(255), nullable=True)
    website = Column(String(512), nullable=True)
    location = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)
    position = Column(String(255), nullable=False)
    github_username = Column(String(255), nullable=True)
    skills = Column(JSON, nullable=False, default=list)
    social = Column(JSON, nullable=False, default=dict)

    # Newest entry first. Each item carries its own "id" used for removal.
    experience = Column(JSON, nullable=False, default=list)
    education = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), default=_utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utc_now, onupdate=_utc_now, nullable=False)

    user = relationship("User", back_populates="profile")
