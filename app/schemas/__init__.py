# __init__.py
from app.schemas.post import Comment, CommentCreate, Like, MessageResponse, PostCreate, PostRead
from app.schemas.profile import (
	EducationCreate,
	EducationRead,
	ExperienceCreate,
	ExperienceRead,
	ProfileRead,
	ProfileUpsert,
	SocialLinks,
)
from app.schemas.user import Token, TokenData, UserCreate, UserLogin, UserRead, UserSummary

__all__ = [
	"Comment",
	"CommentCreate",
	"Like",
	"MessageResponse",
	"PostCreate",
	"PostRead",
	"EducationCreate",
	"EducationRead",
	"ExperienceCreate",
	"ExperienceRead",
	"ProfileRead",
	"ProfileUpsert",
	"SocialLinks",
	"Token",
	"TokenData",
	"UserCreate",
	"UserLogin",
	"UserRead",
	"UserSummary",
]
