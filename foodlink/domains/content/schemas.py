# foodlink/domains/content/schemas.py

"""
'content' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
목록 응답은 본문 대신 HTML을 제거한 미리보기(excerpt)를 담습니다.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from foodlink.core.validators import validate_url, validate_url_list

MAX_IMAGE_URLS = 20


def _check_image_urls(v: Optional[List[str]]) -> Optional[List[str]]:
    if v is None:
        return None
    if len(v) > MAX_IMAGE_URLS:
        raise ValueError(f"at most {MAX_IMAGE_URLS} images are allowed")
    return validate_url_list(v)


class ContentCreate(SQLModel):
    title: str = Field(..., min_length=2, max_length=200)
    thumbnail_url: Optional[str] = Field(None, max_length=500)
    content: str = Field(..., min_length=10)
    image_urls: List[str] = Field(default_factory=list)
    is_pinned: bool = False
    password: Optional[str] = Field(None, min_length=4, max_length=50)

    @field_validator("thumbnail_url")
    @classmethod
    def check_thumbnail_url(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)

    @field_validator("image_urls")
    @classmethod
    def check_image_urls(cls, v: List[str]) -> List[str]:
        return _check_image_urls(v)


class ContentUpdate(SQLModel):
    """부분 수정 요청. `password`가 있으면 게시글 비밀번호를 새 값으로 교체합니다."""
    title: Optional[str] = Field(None, min_length=2, max_length=200)
    thumbnail_url: Optional[str] = Field(None, max_length=500)
    content: Optional[str] = Field(None, min_length=10)
    image_urls: Optional[List[str]] = None
    is_pinned: Optional[bool] = None
    password: Optional[str] = Field(None, min_length=4, max_length=50)

    @field_validator("thumbnail_url")
    @classmethod
    def check_thumbnail_url(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)

    @field_validator("image_urls")
    @classmethod
    def check_image_urls(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _check_image_urls(v)


class ContentListRead(SQLModel):
    id: int
    title: str
    thumbnail_url: Optional[str] = None
    excerpt: str
    view_count: int
    is_pinned: bool
    is_new: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ContentRead(SQLModel):
    id: int
    title: str
    thumbnail_url: Optional[str] = None
    content: str
    image_urls: List[str] = []
    view_count: int
    is_pinned: bool
    is_new: bool
    has_password: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PasswordVerifyResult(SQLModel):
    verified: bool = True
