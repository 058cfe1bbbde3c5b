"""
Request schemas, one per use case.

FastAPI validates JSON bodies against these models directly; the multipart blog
form goes through `safe_parse` so the rules live in one place either way.
"""
from typing import Any, NamedTuple, Optional

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, ValidationInfo, field_validator

from blogsphere.models.blog import Category

DEFAULT_BLOG_BODY_MIN_LENGTH = 10


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SignupRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=20)
    email: EmailStr
    password: str = Field(..., min_length=5)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=5)


class BlogCreate(CamelModel):
    title: str = Field(..., min_length=5, max_length=500)
    body: str
    category: Category
    user_id: Optional[int] = Field(None, alias="userId")
    file_path: Optional[str] = Field(None, alias="filePath")

    @field_validator("body")
    @classmethod
    def validate_body_length(cls, v: str, info: ValidationInfo) -> str:
        min_length = (info.context or {}).get("body_min_length", DEFAULT_BLOG_BODY_MIN_LENGTH)
        if len(v) < min_length:
            raise ValueError(f"String should have at least {min_length} characters")
        return v


class LikeRequest(CamelModel):
    user_id: int = Field(..., alias="userId")
    blog_id: int = Field(..., alias="blogId")


class SaveRequest(LikeRequest):
    pass


class CommentRequest(LikeRequest):
    body: str = Field(..., min_length=5, max_length=100000)


class DeleteCommentRequest(CamelModel):
    comment_id: int = Field(..., alias="commentId")


class DeleteLikeRequest(CamelModel):
    like_id: int = Field(..., alias="likeId")


class DeleteSaveRequest(CamelModel):
    savedblog_id: int = Field(..., alias="savedblogId")


class FollowRequest(CamelModel):
    user_id: int = Field(..., alias="userId")
    to_follow_user_id: int = Field(..., alias="toFollowUserId")


class UnfollowRequest(CamelModel):
    user_id: int = Field(..., alias="userId")
    to_remove_following_a_user: int = Field(..., alias="toRemoveFollowingAUser")


# --- Safe parsing ---

class ParseResult(NamedTuple):
    success: bool
    data: Optional[BaseModel] = None
    error: Optional[dict] = None


def format_validation_error(errors) -> dict:
    """Structured description of every violated constraint."""
    return {"name": "ValidationError", "issues": jsonable_encoder(errors)}


def safe_parse(schema: type[BaseModel], data: Any, context: Optional[dict] = None) -> ParseResult:
    try:
        return ParseResult(True, schema.model_validate(data, context=context))
    except ValidationError as e:
        return ParseResult(False, error=format_validation_error(e.errors()))
