# profile_service.py
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session, joinedload

from app.config import settings
from app.models.post import Post
from app.models.profile import Profile
from app.models.user import User
from app.schemas.profile import SOCIAL_FIELDS, EducationCreate, ExperienceCreate, ProfileUpsert
from app.utils.identifiers import new_entry_id


logger = logging.getLogger(__name__)

# Which Profile column holds each kind of sub-record.
EXPERIENCE = "experience"
EDUCATION = "education"


class ProfileNotFoundError(LookupError):
    pass


class EntryNotFoundError(LookupError):
    def __init__(self, kind: str, entry_id: str) -> None:
        super().__init__(f"{kind} entry {entry_id!r} not found")
        self.kind = kind
        self.entry_id = entry_id


def get_profile_by_user_id(db: Session, user_id: int) -> Profile | None:
    return (
        db.query(Profile)
        .options(joinedload(Profile.user))
        .filter(Profile.user_id == user_id)
        .one_or_none()
    )


def list_profiles(db: Session) -> list[Profile]:
    return db.query(Profile).options(joinedload(Profile.user)).order_by(Profile.id.asc()).all()


def build_profile_fields(payload: ProfileUpsert) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a create-or-update payload into column values and social links.

    Only keys the caller actually sent are returned, so an omitted field is left
    alone on update while an explicit empty string or null is written through.
    """
    supplied = payload.model_dump(exclude_unset=True)
    social = {key: supplied.pop(key) for key in SOCIAL_FIELDS if key in supplied}
    return supplied, social


def upsert_profile(db: Session, user: User, payload: ProfileUpsert) -> Profile:
    fields, social = build_profile_fields(payload)
    profile = get_profile_by_user_id(db, user.id)

    if profile is None:
        profile = Profile(user_id=user.id, skills=[], social={}, experience=[], education=[])
        db.add(profile)
        logger.info("profile.create user_id=%s", user.id)
    else:
        logger.info("profile.update user_id=%s fields=%s", user.id, sorted(fields) + sorted(social))

    for field, value in fields.items():
        setattr(profile, field, value)
    if social:
        profile.social = {**(profile.social or {}), **social}

    db.commit()
    db.refresh(profile)
    return profile


def delete_account(db: Session, user: User) -> None:
    """Remove the user's profile and account (and posts, when cascading is on)."""
    posts = db.query(Post).filter(Post.user_id == user.id)
    if settings.cascade_delete_posts:
        removed = posts.delete(synchronize_session=False)
        logger.info("account.delete user_id=%s posts_removed=%s", user.id, removed)
    else:
        kept = posts.update({Post.user_id: None}, synchronize_session=False)
        logger.info("account.delete user_id=%s posts_orphaned=%s", user.id, kept)
    db.query(Profile).filter(Profile.user_id == user.id).delete(synchronize_session=False)
    db.query(User).filter(User.id == user.id).delete(synchronize_session=False)
    db.commit()


def _require_profile(db: Session, user: User) -> Profile:
    profile = get_profile_by_user_id(db, user.id)
    if profile is None:
        raise ProfileNotFoundError(f"no profile for user {user.id}")
    return profile


def _prepend_entry(db: Session, user: User, kind: str, entry: dict[str, Any]) -> Profile:
    profile = _require_profile(db, user)
    entry = {"id": new_entry_id(), **entry}
    # Assign a new list; in-place mutation of a JSON column is not tracked.
    setattr(profile, kind, [entry, *(getattr(profile, kind) or [])])
    db.commit()
    db.refresh(profile)
    return profile


def _remove_entry(db: Session, user: User, kind: str, entry_id: str) -> Profile:
    profile = _require_profile(db, user)
    entries = list(getattr(profile, kind) or [])
    remaining = [item for item in entries if item.get("id") != entry_id]
    if len(remaining) == len(entries):
        raise EntryNotFoundError(kind, entry_id)
    setattr(profile, kind, remaining)
    db.commit()
    db.refresh(profile)
    return profile


def add_experience(db: Session, user: User, payload: ExperienceCreate) -> Profile:
    return _prepend_entry(db, user, EXPERIENCE, payload.model_dump(mode="json", by_alias=True))


def remove_experience(db: Session, user: User, entry_id: str) -> Profile:
    return _remove_entry(db, user, EXPERIENCE, entry_id)


def add_education(db: Session, user: User, payload: EducationCreate) -> Profile:
    return _prepend_entry(db, user, EDUCATION, payload.model_dump(mode="json", by_alias=True))


def remove_education(db: Session, user: User, entry_id: str) -> Profile:
    return _remove_entry(db, user, EDUCATION, entry_id)
