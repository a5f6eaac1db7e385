from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.routers.dependencies import get_current_user
from app.schemas.post import Comment, CommentCreate, Like, MessageResponse, PostCreate, PostRead
from app.services import post_service
from app.services.post_service import (
    AlreadyLikedError,
    CommentNotFoundError,
    NotLikedError,
    NotOwnerError,
    PostNotFoundError,
)


router = APIRouter(prefix="/posts", tags=["posts"])


def _post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


def _not_authorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not authorized")


@router.post("", response_model=PostRead)
def create_post(
    payload: PostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PostRead:
    post = post_service.create_post(db, current_user, payload.text)
    return PostRead.model_validate(post)


@router.get("", response_model=list[PostRead])
def list_posts(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[PostRead]:
    return [PostRead.model_validate(p) for p in post_service.list_posts(db)]


@router.get("/{post_id}", response_model=PostRead)
def get_post(
    post_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PostRead:
    try:
        post = post_service.get_post(db, post_id)
    except PostNotFoundError as exc:
        raise _post_not_found() from exc
    return PostRead.model_validate(post)


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    try:
        post_service.delete_post(db, current_user, post_id)
    except PostNotFoundError as exc:
        raise _post_not_found() from exc
    except NotOwnerError as exc:
        raise _not_authorized() from exc
    return MessageResponse(msg="Post removed")


@router.put("/like/{post_id}", response_model=list[Like])
def like_post(
    post_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[Like]:
    try:
        likes = post_service.like_post(db, current_user, post_id)
    except PostNotFoundError as exc:
        raise _post_not_found() from exc
    except AlreadyLikedError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Post already liked") from exc
    return [Like.model_validate(item) for item in likes]


@router.put("/unlike/{post_id}", response_model=list[Like])
def unlike_post(
    post_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[Like]:
    try:
        likes = post_service.unlike_post(db, current_user, post_id)
    except PostNotFoundError as exc:
        raise _post_not_found() from exc
    except NotLikedError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Post has not yet been liked") from exc
    return [Like.model_validate(item) for item in likes]


@router.post("/comment/{post_id}", response_model=list[Comment])
def add_comment(
    post_id: str,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[Comment]:
    try:
        comments = post_service.add_comment(db, current_user, post_id, payload.text)
    except PostNotFoundError as exc:
        raise _post_not_found() from exc
    return [Comment.model_validate(item) for item in comments]


@router.delete("/comment/{post_id}/{comment_id}", response_model=list[Comment])
def remove_comment(
    post_id: str,
    comment_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[Comment]:
    try:
        comments = post_service.remove_comment(db, current_user, post_id, comment_id)
    except PostNotFoundError as exc:
        raise _post_not_found() from exc
    except CommentNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment does not exist") from exc
    except NotOwnerError as exc:
        raise _not_authorized() from exc
    return [Comment.model_validate(item) for item in comments]
