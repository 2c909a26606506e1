# foodlink/domains/inquiry/schemas.py

"""
'inquiry' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.

- InquirySummaryRead: 공개 목록 (개인정보 및 본문 제외)
- InquiryRead: 비밀번호 확인 후 작성자에게 보여주는 전체 내용
- InquiryAdminRead: 관리자용 (IP, User-Agent 포함)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, field_validator
from sqlmodel import Field, SQLModel

from foodlink.core.validators import validate_phone, validate_url_list
from .models import InquiryCategory

MAX_ATTACHMENTS = 10


def _check_attachments(v: Optional[List[str]]) -> Optional[List[str]]:
    if v is None:
        return None
    if len(v) > MAX_ATTACHMENTS:
        raise ValueError(f"at most {MAX_ATTACHMENTS} attachments are allowed")
    return validate_url_list(v)


class InquiryCreate(SQLModel):
    category: InquiryCategory
    content: str = Field(..., min_length=10, max_length=2000)
    attachments: List[str] = Field(default_factory=list)
    name: str = Field(..., min_length=2, max_length=50)
    phone: str = Field(..., min_length=8, max_length=20)
    email: EmailStr = Field(..., max_length=100)
    password: str = Field(..., min_length=4, max_length=50)
    company_id: Optional[int] = Field(None, description="문의 대상 파트너사 ID (선택)")

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        return validate_phone(v)

    @field_validator("attachments")
    @classmethod
    def check_attachments(cls, v: List[str]) -> List[str]:
        return _check_attachments(v)


class InquiryUpdate(SQLModel):
    """부분 수정 요청. `password`가 있으면 문의 비밀번호를 새 값으로 교체합니다."""
    category: Optional[InquiryCategory] = None
    content: Optional[str] = Field(None, min_length=10, max_length=2000)
    attachments: Optional[List[str]] = None
    name: Optional[str] = Field(None, min_length=2, max_length=50)
    phone: Optional[str] = Field(None, min_length=8, max_length=20)
    email: Optional[EmailStr] = Field(None, max_length=100)
    password: Optional[str] = Field(None, min_length=4, max_length=50)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: Optional[str]) -> Optional[str]:
        return validate_phone(v)

    @field_validator("attachments")
    @classmethod
    def check_attachments(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _check_attachments(v)


class AnsweredStatusUpdate(SQLModel):
    is_answered: bool


class InquirySummaryRead(SQLModel):
    id: int
    category: InquiryCategory
    is_answered: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InquiryRead(InquirySummaryRead):
    content: str
    attachments: List[str] = []
    name: str
    phone: str
    email: str
    company_id: Optional[int] = None


class InquiryAdminRead(InquiryRead):
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class UnansweredCount(SQLModel):
    count: int
