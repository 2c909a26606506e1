# foodlink/domains/banner/schemas.py

"""
'banner' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from datetime import datetime
from typing import Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from foodlink.core.validators import validate_url


class HomeBannerCreate(SQLModel):
    image_url: str = Field(..., max_length=500)
    display_order: int = Field(0, ge=0)
    is_active: bool = True
    link_url: Optional[str] = Field(None, max_length=500)
    alt_text: Optional[str] = Field(None, max_length=200)

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, v: str) -> str:
        url = validate_url(v)
        if not url:
            raise ValueError("image_url is required")
        return url

    @field_validator("link_url")
    @classmethod
    def check_link_url(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)


class HomeBannerUpdate(SQLModel):
    image_url: Optional[str] = Field(None, max_length=500)
    display_order: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None
    link_url: Optional[str] = Field(None, max_length=500)
    alt_text: Optional[str] = Field(None, max_length=200)

    @field_validator("image_url", "link_url")
    @classmethod
    def check_urls(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)


class HomeBannerRead(SQLModel):
    id: int
    image_url: str
    display_order: int
    is_active: bool
    link_url: Optional[str] = None
    alt_text: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
