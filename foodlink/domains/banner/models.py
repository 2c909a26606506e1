# foodlink/domains/banner/models.py

"""
'banner' 도메인의 데이터베이스 ORM 모델 (t_home_banners)을 정의하는 모듈입니다.
"""

from datetime import datetime, UTC
from typing import Optional

from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Column, Field, SQLModel


class HomeBannerBase(SQLModel):
    image_url: str = Field(max_length=500, description="배너 이미지 URL")
    display_order: int = Field(default=0, index=True, description="표시 순서 (오름차순)")
    is_active: bool = Field(default=True, description="활성화 여부")
    link_url: Optional[str] = Field(default=None, max_length=500, description="클릭 시 이동할 URL")
    alt_text: Optional[str] = Field(default=None, max_length=200, description="이미지 대체 텍스트")


class HomeBanner(HomeBannerBase, table=True):
    """
    t_home_banners 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "t_home_banners"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
