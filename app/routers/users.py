# users.py
from fastapi import APIRouter, Depends
from app.models.user import User
from app.routers.dependencies import get_current_user
from app.schemas.user import UserRead


router = APIRouter()


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)
