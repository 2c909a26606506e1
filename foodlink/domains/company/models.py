# foodlink/domains/company/models.py

"""
'company' 도메인 (파트너사)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 파트너사 관련 테이블 (t_companies, t_company_categories,
t_company_details)에 대한 SQLModel 클래스를 포함합니다.
카테고리는 배열 컬럼 대신 연결 테이블로 저장하여, 어떤 데이터베이스에서도
"하나 이상 겹치면 매칭" 필터를 동일한 서브쿼리로 표현할 수 있게 합니다.
"""

import enum
from datetime import datetime, UTC
from typing import List, Optional

from sqlalchemy import JSON
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Column, Field, Relationship, SQLModel


class ApprovalStatus(str, enum.Enum):
    """파트너사 승인 상태. 생성 시 항상 PENDING으로 시작합니다."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class CategoryKind(str, enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


# 1차 카테고리 (업종)
PRIMARY_CATEGORIES = ("manufacturing", "packaging", "analysis", "logistics", "marketing")
# 2차 카테고리 (제품군)
SECONDARY_CATEGORIES = ("processed", "beverage", "health", "general", "inquiry")


# =============================================================================
# 1. t_company_categories (파트너사-카테고리 연결 테이블)
# =============================================================================
class CompanyCategory(SQLModel, table=True):
    """
    파트너사와 카테고리 값의 연결 테이블 모델입니다.
    `kind`로 1차/2차 카테고리를 구분합니다.
    """
    __tablename__ = "t_company_categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    company_id: Optional[int] = Field(default=None, foreign_key="t_companies.id", index=True, description="파트너사 ID (FK)")
    kind: str = Field(max_length=20, index=True, description="카테고리 종류 (primary/secondary)")
    value: str = Field(max_length=50, index=True, description="카테고리 값")

    company: Optional["Company"] = Relationship(back_populates="categories")


# =============================================================================
# 2. t_companies 테이블 모델
# =============================================================================
class Company(SQLModel, table=True):
    """
    t_companies 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    `password_hash`는 응답 스키마에 절대 포함하지 않습니다.
    """
    __tablename__ = "t_companies"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, description="파트너사명")
    image_url: Optional[str] = Field(default=None, max_length=500, description="대표 이미지 URL")
    password_hash: str = Field(max_length=255, description="파트너사 비밀번호 해시 (bcrypt)")
    approval_status: str = Field(
        default=ApprovalStatus.PENDING.value,
        max_length=20,
        index=True,
        description="승인 상태 (pending/approved/rejected)",
    )

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시",
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 마지막 업데이트 일시",
    )

    categories: List[CompanyCategory] = Relationship(
        back_populates="company",
        sa_relationship_kwargs={"lazy": "selectin", "cascade": "all, delete-orphan"},
    )
    detail: Optional["CompanyDetail"] = Relationship(
        back_populates="company",
        sa_relationship_kwargs={"lazy": "selectin", "uselist": False, "cascade": "all, delete-orphan"},
    )

    def _category_values(self, kind: CategoryKind) -> List[str]:
        return [c.value for c in self.categories if c.kind == kind.value]

    @property
    def primary_category(self) -> List[str]:
        return self._category_values(CategoryKind.PRIMARY)

    @property
    def secondary_category(self) -> List[str]:
        return self._category_values(CategoryKind.SECONDARY)

    @property
    def is_approved(self) -> bool:
        return self.approval_status == ApprovalStatus.APPROVED.value


# =============================================================================
# 3. t_company_details 테이블 모델 (1:1)
# =============================================================================
class CompanyDetail(SQLModel, table=True):
    """파트너사 상세 정보. 파트너사 삭제 시 함께 삭제됩니다."""
    __tablename__ = "t_company_details"

    id: Optional[int] = Field(default=None, primary_key=True)
    company_id: Optional[int] = Field(default=None, foreign_key="t_companies.id", unique=True, index=True)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[str] = Field(default=None, max_length=100)
    detail_images: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    detail_text: Optional[str] = Field(default=None, max_length=10000)

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )

    company: Optional[Company] = Relationship(back_populates="detail")
