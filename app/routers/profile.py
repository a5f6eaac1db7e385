from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.routers.dependencies import get_current_user
from app.schemas.post import MessageResponse
from app.schemas.profile import EducationCreate, ExperienceCreate, ProfileRead, ProfileUpsert
from app.services import profile_service
from app.services.github_service import GithubLookupError, fetch_user_repos
from app.services.profile_service import EntryNotFoundError, ProfileNotFoundError
from app.utils.identifiers import parse_row_id


router = APIRouter(prefix="/profile", tags=["profile"])


def _no_profile() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="There is no profile for this user")


@router.get("/me", response_model=ProfileRead)
def read_my_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    profile = profile_service.get_profile_by_user_id(db, current_user.id)
    if profile is None:
        raise _no_profile()
    return ProfileRead.model_validate(profile)


@router.post("", response_model=ProfileRead)
def upsert_my_profile(
    payload: ProfileUpsert,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    profile = profile_service.upsert_profile(db, current_user, payload)
    return ProfileRead.model_validate(profile)


@router.get("", response_model=list[ProfileRead])
def list_profiles(db: Session = Depends(get_db)) -> list[ProfileRead]:
    return [ProfileRead.model_validate(p) for p in profile_service.list_profiles(db)]


@router.get("/user/{user_id}", response_model=ProfileRead)
def read_profile_by_user(user_id: str, db: Session = Depends(get_db)) -> ProfileRead:
    uid = parse_row_id(user_id)
    profile = profile_service.get_profile_by_user_id(db, uid) if uid is not None else None
    if profile is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Profile not found")
    return ProfileRead.model_validate(profile)


@router.delete("", response_model=MessageResponse)
def delete_my_account(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    profile_service.delete_account(db, current_user)
    return MessageResponse(msg="User deleted")


@router.put("/experience", response_model=ProfileRead)
def add_experience(
    payload: ExperienceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    try:
        profile = profile_service.add_experience(db, current_user, payload)
    except ProfileNotFoundError as exc:
        raise _no_profile() from exc
    return ProfileRead.model_validate(profile)


@router.delete("/experience/{exp_id}", response_model=ProfileRead)
def remove_experience(
    exp_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    try:
        profile = profile_service.remove_experience(db, current_user, exp_id)
    except ProfileNotFoundError as exc:
        raise _no_profile() from exc
    except EntryNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Experience not found") from exc
    return ProfileRead.model_validate(profile)


@router.put("/education", response_model=ProfileRead)
def add_education(
    payload: EducationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    try:
        profile = profile_service.add_education(db, current_user, payload)
    except ProfileNotFoundError as exc:
        raise _no_profile() from exc
    return ProfileRead.model_validate(profile)


@router.delete("/education/{educ_id}", response_model=ProfileRead)
def remove_education(
    educ_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProfileRead:
    try:
        profile = profile_service.remove_education(db, current_user, educ_id)
    except ProfileNotFoundError as exc:
        raise _no_profile() from exc
    except EntryNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Education not found") from exc
    return ProfileRead.model_validate(profile)


@router.get("/github/{username}")
def read_github_repos(username: str) -> Any:
    try:
        return fetch_user_repos(username)
    except GithubLookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No Github profile found") from exc
