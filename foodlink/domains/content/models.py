# foodlink/domains/content/models.py

"""
'content' 도메인의 데이터베이스 ORM 모델 (t_contents)을 정의하는 모듈입니다.
"""

from datetime import datetime, timedelta, UTC
from typing import List, Optional

from sqlalchemy import JSON, Text
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Column, Field, SQLModel

NEW_BADGE_PERIOD = timedelta(hours=24)


class Content(SQLModel, table=True):
    """
    t_contents 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    `password_hash`가 비어 있으면 마스터 패스워드로만 수정/삭제할 수 있습니다.
    """
    __tablename__ = "t_contents"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=200, description="제목")
    thumbnail_url: Optional[str] = Field(default=None, max_length=500, description="썸네일 이미지 URL")
    content: str = Field(sa_column=Column(Text, nullable=False), description="본문 (HTML 허용)")
    image_urls: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    is_pinned: bool = Field(default=False, index=True, description="상단 고정 여부")
    view_count: int = Field(default=0, description="조회수")
    password_hash: Optional[str] = Field(default=None, max_length=255, description="게시글 비밀번호 해시")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )

    def is_new(self, now: Optional[datetime] = None) -> bool:
        """생성된 지 24시간 이내인지 확인합니다 ('NEW' 뱃지)."""
        if self.created_at is None:
            return False
        created_at = self.created_at
        if created_at.tzinfo is None:  # SQLite는 타임존 정보를 저장하지 않음
            created_at = created_at.replace(tzinfo=UTC)
        return (now or datetime.now(UTC)) - created_at < NEW_BADGE_PERIOD
