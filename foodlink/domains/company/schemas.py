# foodlink/domains/company/schemas.py

"""
'company' 도메인 (파트너사)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
응답 스키마는 '...Read' 패턴을 사용하며, 비밀번호 해시는 어떤 응답에도 포함하지 않습니다.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import EmailStr, field_validator
from sqlmodel import Field, SQLModel

from foodlink.core.validators import unique, validate_phone, validate_url, validate_url_list
from .models import ApprovalStatus

PrimaryCategory = Literal["manufacturing", "packaging", "analysis", "logistics", "marketing"]
SecondaryCategory = Literal["processed", "beverage", "health", "general", "inquiry"]

MAX_DETAIL_IMAGES = 20


# =============================================================================
# 1. 파트너사 상세 정보 (CompanyDetail) 스키마
# =============================================================================
class CompanyDetailIn(SQLModel):
    phone: Optional[str] = Field(None, min_length=8, max_length=20)
    email: Optional[EmailStr] = Field(None, max_length=100)
    detail_images: List[str] = Field(default_factory=list)
    detail_text: Optional[str] = Field(None, max_length=10000)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: Optional[str]) -> Optional[str]:
        return validate_phone(v)

    @field_validator("detail_images")
    @classmethod
    def check_detail_images(cls, v: List[str]) -> List[str]:
        if len(v) > MAX_DETAIL_IMAGES:
            raise ValueError(f"at most {MAX_DETAIL_IMAGES} images are allowed")
        return validate_url_list(v)


# =============================================================================
# 2. 파트너사 (Company) 스키마
# =============================================================================
class CompanyBase(SQLModel):
    name: str = Field(..., min_length=2, max_length=100)
    image_url: Optional[str] = Field(None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)


class CompanyCreate(CompanyBase):
    """
    파트너사 등록 요청. 승인 상태는 입력받지 않으며 항상 'pending'으로 생성됩니다.
    """
    password: str = Field(..., min_length=4, max_length=50)
    primary_category: List[PrimaryCategory] = Field(..., min_length=1)
    secondary_category: List[SecondaryCategory] = Field(..., min_length=1)
    detail: Optional[CompanyDetailIn] = None

    @field_validator("primary_category", "secondary_category")
    @classmethod
    def dedupe_categories(cls, v: List[str]) -> List[str]:
        return unique(v)


class CompanyUpdate(SQLModel):
    """
    부분 수정 요청 (PATCH). 전달된 필드만 변경됩니다.
    `password`가 있으면 새 비밀번호로 교체합니다.
    """
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    image_url: Optional[str] = Field(None, max_length=500)
    password: Optional[str] = Field(None, min_length=4, max_length=50)
    primary_category: Optional[List[PrimaryCategory]] = Field(None, min_length=1)
    secondary_category: Optional[List[SecondaryCategory]] = Field(None, min_length=1)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)

    @field_validator("primary_category", "secondary_category")
    @classmethod
    def dedupe_categories(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return unique(v) if v is not None else None


class CompanyRead(SQLModel):
    """
    파트너사 응답 스키마. 공개 목록에서는 승인 상태에 따라 마스킹된 값이 담깁니다.
    """
    id: int
    name: str
    image_url: Optional[str] = None
    approval_status: ApprovalStatus
    description: Optional[str] = None
    primary_category: List[str] = []
    secondary_category: List[str] = []
    phone: Optional[str] = None
    email: Optional[str] = None
    detail_images: List[str] = []
    detail_text: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ApprovalStatusUpdate(SQLModel):
    approval_status: ApprovalStatus


class PasswordVerifyResult(SQLModel):
    verified: bool = True
