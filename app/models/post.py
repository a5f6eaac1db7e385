# post.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Text
from app.database import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    # Null once the author account is deleted and its posts are kept.
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    text = Column(Text, nullable=False)

    # Author snapshot taken when the post is created.
    name = Column(String(255), nullable=True)
    avatar = Column(String(512), nullable=True)

    likes = Column(JSON, nullable=False, default=list)
    comments = Column(JSON, nullable=False, default=list)
    date = Column(DateTime(timezone=True), default=_utc_now, nullable=False, index=True)
