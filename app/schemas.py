from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


# --- Post ---

class PostBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)


class PostCreate(PostBase):
    password: str = Field(min_length=1, max_length=128)


class PostUpdate(BaseModel):
    # Missing or empty values leave the stored field untouched.
    title: str | None = Field(None, max_length=200)
    content: str | None = None
    password: str | None = Field(None, max_length=128)


class PostPasswordCheck(BaseModel):
    password: str = Field(max_length=128)


class PostResponse(BaseModel):
    id: int
    title: str
    content: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class PasswordCheckResponse(BaseModel):
    is_correct: bool


# --- Pagination ---

class CursorPage(BaseModel):
    items: list[PostResponse]
    next_cursor: int | None = None
