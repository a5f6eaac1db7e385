# post_service.py
from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from app.models.post import Post
from app.models.user import User
from app.utils.identifiers import new_entry_id, parse_row_id


logger = logging.getLogger(__name__)


class PostNotFoundError(LookupError):
    pass


class CommentNotFoundError(LookupError):
    pass


class NotOwnerError(PermissionError):
    pass


class AlreadyLikedError(ValueError):
    pass


class NotLikedError(ValueError):
    pass


def create_post(db: Session, user: User, text: str) -> Post:
    post = Post(user_id=user.id, text=text, name=user.name, avatar=user.avatar, likes=[], comments=[])
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info("post.create id=%s user_id=%s", post.id, user.id)
    return post


def list_posts(db: Session) -> list[Post]:
    return db.query(Post).order_by(Post.date.desc(), Post.id.desc()).all()


def get_post(db: Session, raw_id: str) -> Post:
    post_id = parse_row_id(raw_id)
    post = db.query(Post).filter(Post.id == post_id).one_or_none() if post_id is not None else None
    if post is None:
        raise PostNotFoundError(raw_id)
    return post


def delete_post(db: Session, user: User, raw_id: str) -> None:
    # Existence is checked before ownership.
    post = get_post(db, raw_id)
    if post.user_id != user.id:
        raise NotOwnerError(f"user {user.id} does not own post {post.id}")
    db.delete(post)
    db.commit()
    logger.info("post.delete id=%s user_id=%s", post.id, user.id)


def like_post(db: Session, user: User, raw_id: str) -> list[dict]:
    post = get_post(db, raw_id)
    likes = list(post.likes or [])
    if any(like.get("user") == user.id for like in likes):
        raise AlreadyLikedError(post.id)
    post.likes = [{"user": user.id}, *likes]
    db.commit()
    db.refresh(post)
    return post.likes


def unlike_post(db: Session, user: User, raw_id: str) -> list[dict]:
    post = get_post(db, raw_id)
    likes = list(post.likes or [])
    remaining = [like for like in likes if like.get("user") != user.id]
    if len(remaining) == len(likes):
        raise NotLikedError(post.id)
    post.likes = remaining
    db.commit()
    db.refresh(post)
    return post.likes


def add_comment(db: Session, user: User, raw_id: str, text: str) -> list[dict]:
    post = get_post(db, raw_id)
    comment = {
        "id": new_entry_id(),
        "user": user.id,
        "text": text,
        "name": user.name,
        "avatar": user.avatar,
        "date": datetime.now(timezone.utc).isoformat(),
    }
    post.comments = [comment, *(post.comments or [])]
    db.commit()
    db.refresh(post)
    return post.comments


def remove_comment(db: Session, user: User, raw_id: str, comment_id: str) -> list[dict]:
    post = get_post(db, raw_id)
    comments = list(post.comments or [])
    comment = next((c for c in comments if c.get("id") == comment_id), None)
    if comment is None:
        raise CommentNotFoundError(comment_id)
    if comment.get("user") != user.id:
        raise NotOwnerError(f"user {user.id} does not own comment {comment_id}")
    post.comments = [c for c in comments if c.get("id") != comment_id]
    db.commit()
    db.refresh(post)
    return post.comments
