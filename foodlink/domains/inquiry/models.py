# foodlink/domains/inquiry/models.py

"""
'inquiry' 도메인의 데이터베이스 ORM 모델 (t_inquiries)을 정의하는 모듈입니다.
"""

import enum
from datetime import datetime, UTC
from typing import List, Optional

from sqlalchemy import JSON, ForeignKey, Integer
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Column, Field, SQLModel


class InquiryCategory(str, enum.Enum):
    PURCHASE = "purchase"        # 구매 문의
    PARTNERSHIP = "partnership"  # 제휴 문의
    OTHER = "other"              # 기타 제안


class Inquiry(SQLModel, table=True):
    """
    t_inquiries 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    개인정보(연락처, IP 등)는 관리자용 응답에만 포함합니다.
    """
    __tablename__ = "t_inquiries"

    id: Optional[int] = Field(default=None, primary_key=True)
    category: str = Field(max_length=20, index=True, description="문의 분류")
    content: str = Field(max_length=2000, description="문의 내용")
    attachments: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    name: str = Field(max_length=50, description="문의자 이름")
    phone: str = Field(max_length=20, description="문의자 연락처")
    email: str = Field(max_length=100, description="문의자 이메일")
    password_hash: str = Field(max_length=255, description="문의 비밀번호 해시")
    company_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("t_companies.id", ondelete="SET NULL"), index=True, nullable=True),
        description="문의 대상 파트너사 (선택). 파트너사 삭제 시 NULL",
    )
    ip_address: Optional[str] = Field(default=None, max_length=45)
    user_agent: Optional[str] = Field(default=None, max_length=500)
    is_answered: bool = Field(default=False, index=True, description="답변 완료 여부")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
