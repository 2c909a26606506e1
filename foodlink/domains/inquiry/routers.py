# foodlink/domains/inquiry/routers.py

"""
'inquiry' 도메인 (1:1 문의)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core import dependencies as deps
from foodlink.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Page
from foodlink.core.security import CredentialVerifier
from foodlink.services.notifier import MailerSendNotifier

from . import schemas as inquiry_schemas
from . import services as inquiry_services
from .models import InquiryCategory

router = APIRouter(
    prefix="/inquiries",
    tags=["inquiries (1:1 문의)"],
    responses={404: {"description": "Not found"}},
)


def _client_ip(request: Request) -> Optional[str]:
    """프록시 뒤에서는 X-Forwarded-For의 첫 번째 주소를 사용합니다."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip() or None
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    return request.client.host if request.client else None


@router.post(
    "",
    response_model=inquiry_schemas.InquiryRead,
    status_code=status.HTTP_201_CREATED,
    summary="문의 등록",
)
async def create_inquiry(
    inquiry_in: inquiry_schemas.InquiryCreate,
    request: Request,
    db: AsyncSession = Depends(deps.get_db_session),
    notifier: MailerSendNotifier = Depends(deps.get_notifier),
):
    """
    문의를 등록하고 관리자에게 메일 알림을 보냅니다. 메일 발송 실패는 등록 결과에 영향을 주지 않습니다.
    """
    return await inquiry_services.create_inquiry(
        db,
        payload=inquiry_in,
        notifier=notifier,
        ip_address=_client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )


@router.get("", response_model=Page[inquiry_schemas.InquirySummaryRead], summary="문의 목록 (공개 요약)")
async def read_inquiries(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    category: Optional[InquiryCategory] = Query(None),
    is_answered: Optional[bool] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await inquiry_services.list_inquiries(
        db,
        page=page,
        limit=limit,
        category=category.value if category else None,
        is_answered=is_answered,
    )


@router.get("/admin", response_model=Page[inquiry_schemas.InquiryAdminRead], summary="문의 목록 (관리자)")
async def read_inquiries_for_admin(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    category: Optional[InquiryCategory] = Query(None),
    is_answered: Optional[bool] = Query(None),
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await inquiry_services.list_inquiries_for_admin(
        db,
        verifier=verifier,
        master_password=master_password,
        page=page,
        limit=limit,
        category=category.value if category else None,
        is_answered=is_answered,
    )


@router.get("/unanswered-count", response_model=inquiry_schemas.UnansweredCount, summary="답변 대기 문의 수")
async def read_unanswered_count(db: AsyncSession = Depends(deps.get_db_session)):
    count = await inquiry_services.count_unanswered(db)
    return inquiry_schemas.UnansweredCount(count=count)


@router.get("/{inquiry_id}", response_model=inquiry_schemas.InquiryRead, summary="문의 상세 (비밀번호 확인)")
async def read_inquiry(
    inquiry_id: int,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await inquiry_services.get_inquiry(db, inquiry_id=inquiry_id, verifier=verifier, password=password)


@router.patch("/{inquiry_id}", response_model=inquiry_schemas.InquiryRead, summary="문의 수정")
async def update_inquiry(
    inquiry_id: int,
    inquiry_in: inquiry_schemas.InquiryUpdate,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await inquiry_services.update_inquiry(
        db, inquiry_id=inquiry_id, payload=inquiry_in, verifier=verifier, password=password
    )


@router.delete("/{inquiry_id}", status_code=status.HTTP_204_NO_CONTENT, summary="문의 삭제")
async def delete_inquiry(
    inquiry_id: int,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    await inquiry_services.delete_inquiry(db, inquiry_id=inquiry_id, verifier=verifier, password=password)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{inquiry_id}/answered",
    response_model=inquiry_schemas.InquiryAdminRead,
    summary="답변 상태 변경 (마스터 전용)",
)
async def update_answered_status(
    inquiry_id: int,
    status_in: inquiry_schemas.AnsweredStatusUpdate,
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await inquiry_services.update_answered_status(
        db,
        inquiry_id=inquiry_id,
        is_answered=status_in.is_answered,
        verifier=verifier,
        master_password=master_password,
    )
