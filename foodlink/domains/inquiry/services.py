# foodlink/domains/inquiry/services.py

"""
'inquiry' 도메인의 비즈니스 로직 모듈입니다.

- 등록: 누구나 가능. 문의 비밀번호를 해시하여 저장하고, 커밋 후 관리자에게 메일로 알립니다.
  알림 실패는 로그만 남기고 문의 등록 결과에는 영향을 주지 않습니다.
- 조회/수정/삭제: 문의 비밀번호 OR 마스터 패스워드.
- 관리자 목록, 답변 상태 변경: 마스터 패스워드 전용.
"""

import logging
from typing import Any, Dict, Optional, Union

from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core.exceptions import NotFoundError, NotificationError
from foodlink.core.pagination import Page, get_offset, paginate
from foodlink.core.security import CredentialVerifier, get_password_hash
from foodlink.core.validators import parse_payload
from foodlink.domains.company import crud as company_crud
from foodlink.services.notifier import InquiryNotification, MailerSendNotifier
from . import crud as inquiry_crud
from . import models as inquiry_models
from . import schemas as inquiry_schemas

logger = logging.getLogger(__name__)

DEFAULT_COMPANY_NAME = "FoodLink"


async def _get_or_404(db: AsyncSession, inquiry_id: int) -> inquiry_models.Inquiry:
    db_inquiry = await inquiry_crud.inquiry.get(db, id=inquiry_id)
    if db_inquiry is None:
        raise NotFoundError("Inquiry not found.")
    return db_inquiry


async def _resolve_company_name(db: AsyncSession, company_id: Optional[int]) -> str:
    """
    문의 대상 파트너사 이름을 반환합니다. 승인되지 않은 파트너사는 존재하지 않는 것으로 취급합니다.
    """
    if company_id is None:
        return DEFAULT_COMPANY_NAME
    db_company = await company_crud.company.get(db, id=company_id)
    if db_company is None or not db_company.is_approved:
        raise NotFoundError("Company not found.")
    return db_company.name


async def _notify(notifier: MailerSendNotifier, details: InquiryNotification) -> bool:
    """알림을 보내고 성공 여부를 반환합니다. 실패는 로그로만 남깁니다."""
    try:
        await notifier.send_inquiry_notification(details)
    except NotificationError as e:
        logger.error("Inquiry #%s saved but notification failed: %s", details.inquiry_id, e.message)
        return False
    except Exception:
        # 문의는 이미 커밋되었으므로 어떤 알림 오류도 요청을 실패시키지 않습니다
        logger.exception("Inquiry #%s saved but notifier raised unexpectedly.", details.inquiry_id)
        return False
    return True


# =============================================================================
# 1. 등록
# =============================================================================
async def create_inquiry(
    db: AsyncSession,
    *,
    payload: Union[inquiry_schemas.InquiryCreate, Dict[str, Any]],
    notifier: MailerSendNotifier,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> inquiry_schemas.InquiryRead:
    inquiry_in = parse_payload(inquiry_schemas.InquiryCreate, payload)
    company_name = await _resolve_company_name(db, inquiry_in.company_id)

    data = inquiry_in.model_dump(exclude={"password"})
    data.update(
        category=inquiry_in.category.value,
        password_hash=get_password_hash(inquiry_in.password),
        ip_address=ip_address,
        user_agent=(user_agent or "")[:500] or None,
        is_answered=False,
    )
    db_inquiry = await inquiry_crud.inquiry.create(db, obj_in=data)
    logger.info("Inquiry #%s created (category=%s).", db_inquiry.id, db_inquiry.category)

    # 커밋 이후에 알림을 보내므로 실패해도 문의는 유지됩니다
    await _notify(
        notifier,
        InquiryNotification(
            inquiry_id=db_inquiry.id,
            company_name=company_name,
            category=db_inquiry.category,
            name=db_inquiry.name,
            email=db_inquiry.email,
            phone=db_inquiry.phone,
            content=db_inquiry.content,
        ),
    )
    return inquiry_schemas.InquiryRead.model_validate(db_inquiry, from_attributes=True)


# =============================================================================
# 2. 조회
# =============================================================================
async def list_inquiries(
    db: AsyncSession,
    *,
    page: int = 1,
    limit: int = 10,
    category: Optional[str] = None,
    is_answered: Optional[bool] = None,
) -> Page[inquiry_schemas.InquirySummaryRead]:
    """공개 목록. 본문과 개인정보는 포함하지 않습니다."""
    conditions = inquiry_crud.inquiry.build_conditions(category=category, is_answered=is_answered)
    total = await inquiry_crud.inquiry.count(db, conditions=conditions)
    inquiries = await inquiry_crud.inquiry.get_filtered(
        db,
        conditions=conditions,
        order_by=inquiry_crud.inquiry.newest_first(),
        skip=get_offset(page, limit),
        limit=limit,
    )
    items = [inquiry_schemas.InquirySummaryRead.model_validate(i, from_attributes=True) for i in inquiries]
    return paginate(items, page, total, limit)


async def list_inquiries_for_admin(
    db: AsyncSession,
    *,
    verifier: CredentialVerifier,
    master_password: Optional[str],
    page: int = 1,
    limit: int = 10,
    category: Optional[str] = None,
    is_answered: Optional[bool] = None,
) -> Page[inquiry_schemas.InquiryAdminRead]:
    verifier.require_master(master_password)
    conditions = inquiry_crud.inquiry.build_conditions(category=category, is_answered=is_answered)
    total = await inquiry_crud.inquiry.count(db, conditions=conditions)
    inquiries = await inquiry_crud.inquiry.get_filtered(
        db,
        conditions=conditions,
        order_by=inquiry_crud.inquiry.newest_first(),
        skip=get_offset(page, limit),
        limit=limit,
    )
    items = [inquiry_schemas.InquiryAdminRead.model_validate(i, from_attributes=True) for i in inquiries]
    return paginate(items, page, total, limit)


async def count_unanswered(db: AsyncSession) -> int:
    conditions = inquiry_crud.inquiry.build_conditions(is_answered=False)
    return await inquiry_crud.inquiry.count(db, conditions=conditions)


async def get_inquiry(
    db: AsyncSession, *, inquiry_id: int, verifier: CredentialVerifier, password: Optional[str]
) -> inquiry_schemas.InquiryRead:
    db_inquiry = await _get_or_404(db, inquiry_id)
    verifier.require(password, db_inquiry.password_hash)
    return inquiry_schemas.InquiryRead.model_validate(db_inquiry, from_attributes=True)


# =============================================================================
# 3. 수정 / 삭제
# =============================================================================
async def update_inquiry(
    db: AsyncSession,
    *,
    inquiry_id: int,
    payload: Union[inquiry_schemas.InquiryUpdate, Dict[str, Any]],
    verifier: CredentialVerifier,
    password: Optional[str],
) -> inquiry_schemas.InquiryRead:
    inquiry_in = parse_payload(inquiry_schemas.InquiryUpdate, payload)
    db_inquiry = await _get_or_404(db, inquiry_id)
    verifier.require(password, db_inquiry.password_hash)

    changes = inquiry_in.model_dump(exclude_unset=True)
    new_password = changes.pop("password", None)
    update_data: Dict[str, Any] = {k: v for k, v in changes.items() if v is not None}
    if "category" in update_data:
        update_data["category"] = inquiry_models.InquiryCategory(update_data["category"]).value
    if new_password:
        update_data["password_hash"] = get_password_hash(new_password)

    db_inquiry = await inquiry_crud.inquiry.update(db, db_obj=db_inquiry, obj_in=update_data)
    logger.info("Inquiry #%s updated.", inquiry_id)
    return inquiry_schemas.InquiryRead.model_validate(db_inquiry, from_attributes=True)


async def delete_inquiry(
    db: AsyncSession, *, inquiry_id: int, verifier: CredentialVerifier, password: Optional[str]
) -> None:
    db_inquiry = await _get_or_404(db, inquiry_id)
    verifier.require(password, db_inquiry.password_hash)
    await inquiry_crud.inquiry.delete(db, db_obj=db_inquiry)
    logger.info("Inquiry #%s deleted.", inquiry_id)


async def update_answered_status(
    db: AsyncSession,
    *,
    inquiry_id: int,
    is_answered: bool,
    verifier: CredentialVerifier,
    master_password: Optional[str],
) -> inquiry_schemas.InquiryAdminRead:
    verifier.require_master(master_password)
    db_inquiry = await _get_or_404(db, inquiry_id)
    if db_inquiry.is_answered != is_answered:
        db_inquiry = await inquiry_crud.inquiry.update(db, db_obj=db_inquiry, obj_in={"is_answered": is_answered})
        logger.info("Inquiry #%s marked %s.", inquiry_id, "answered" if is_answered else "unanswered")
    return inquiry_schemas.InquiryAdminRead.model_validate(db_inquiry, from_attributes=True)
