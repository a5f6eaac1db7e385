# auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.routers.dependencies import get_current_user
from app.schemas.user import Token, UserCreate, UserLogin, UserRead
from app.utils.avatar import gravatar_url
from app.utils.jwt_handler import create_access_token
from app.utils.password_hash import hash_password, verify_password


router = APIRouter()

logger = logging.getLogger(__name__)


def _issue_token(user: User) -> Token:
    return Token(access_token=create_access_token({"sub": str(user.id)}), token_type="bearer")


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)) -> Token:
    existing_user = db.query(User).filter(User.email == user_in.email).first()
    if existing_user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")
    user = User(
        email=user_in.email,
        password=hash_password(user_in.password),
        name=user_in.name,
        avatar=gravatar_url(user_in.email),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("auth.register user_id=%s", user.id)
    return _issue_token(user)


@router.post("/login", response_model=Token)
def login_user(user_in: UserLogin, db: Session = Depends(get_db)) -> Token:
    user = db.query(User).filter(User.email == user_in.email).first()
    if not user or not verify_password(user_in.password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return _issue_token(user)


@router.get("", response_model=UserRead)
def read_authenticated_user(current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)
