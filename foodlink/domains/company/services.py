# foodlink/domains/company/services.py

"""
'company' 도메인의 비즈니스 로직 모듈입니다.

- 공개 목록 마스킹 (`mask`): 승인되지 않은 파트너사는 고정된 안내 문구로 대체합니다.
- 승인 상태 전이: 마스터 패스워드로만 변경할 수 있으며, 같은 상태로의 변경은 아무 일도 하지 않습니다.
- 쓰기 작업: "파트너사 비밀번호 OR 마스터 패스워드" 정책으로 권한을 확인합니다.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core.exceptions import NotFoundError
from foodlink.core.pagination import Page, get_offset, paginate
from foodlink.core.security import CredentialVerifier, get_password_hash
from foodlink.core.validators import parse_payload
from . import crud as company_crud
from . import models as company_models
from . import schemas as company_schemas

logger = logging.getLogger(__name__)

ApprovalStatus = company_models.ApprovalStatus


# =============================================================================
# 1. 공개 목록 마스킹
# =============================================================================
@dataclass(frozen=True)
class Sentinel:
    name: str
    description: str


PENDING_SENTINEL = Sentinel(name="승인 대기중인 파트너", description="(관리자 승인 대기 중입니다)")
REJECTED_SENTINEL = Sentinel(name="거부된 파트너", description="(관리자가 거부한 파트너사입니다)")

_SENTINELS = {
    ApprovalStatus.PENDING.value: PENDING_SENTINEL,
    ApprovalStatus.REJECTED.value: REJECTED_SENTINEL,
}


def to_read(company: company_models.Company) -> company_schemas.CompanyRead:
    """마스킹 없이 전체 정보를 담은 응답 스키마로 변환합니다 (관리자/소유자 전용)."""
    detail = company.detail
    return company_schemas.CompanyRead(
        id=company.id,
        name=company.name,
        image_url=company.image_url,
        approval_status=company.approval_status,
        description=detail.detail_text if detail else None,
        primary_category=company.primary_category,
        secondary_category=company.secondary_category,
        phone=detail.phone if detail else None,
        email=detail.email if detail else None,
        detail_images=list(detail.detail_images or []) if detail else [],
        detail_text=detail.detail_text if detail else None,
        created_at=company.created_at,
        updated_at=company.updated_at,
    )


def mask(company: company_models.Company) -> company_schemas.CompanyRead:
    """
    공개 응답용 변환. 승인된 파트너사만 실제 정보를 보여줍니다.

    pending/rejected 파트너사는 이름, 설명이 상태별 고정 문구로 바뀌고
    이미지, 카테고리, 연락처, 상세 정보는 비워집니다. id는 관리 작업을 위해 그대로 유지합니다.
    """
    if company.approval_status == ApprovalStatus.APPROVED.value:
        return to_read(company)

    # 알 수 없는 상태 값은 pending으로 취급
    status_value = company.approval_status if company.approval_status in _SENTINELS else ApprovalStatus.PENDING.value
    sentinel = _SENTINELS[status_value]
    return company_schemas.CompanyRead(
        id=company.id,
        name=sentinel.name,
        image_url=None,
        approval_status=status_value,
        description=sentinel.description,
        primary_category=[],
        secondary_category=[],
        phone=None,
        email=None,
        detail_images=[],
        detail_text=None,
        created_at=company.created_at,
        updated_at=company.updated_at,
    )


# =============================================================================
# 2. 조회
# =============================================================================
async def _get_or_404(db: AsyncSession, company_id: int) -> company_models.Company:
    db_company = await company_crud.company.get(db, id=company_id)
    if db_company is None:
        raise NotFoundError("Company not found.")
    return db_company


async def list_companies(
    db: AsyncSession,
    *,
    page: int = 1,
    limit: int = 10,
    primary_category: Optional[Sequence[str]] = None,
    secondary_category: Optional[Sequence[str]] = None,
    search: Optional[str] = None,
) -> Page[company_schemas.CompanyRead]:
    """
    공개 파트너사 목록 (최신 등록순). 모든 항목은 `mask`를 거쳐 반환됩니다.
    """
    conditions = company_crud.company.build_conditions(
        primary_category=primary_category,
        secondary_category=secondary_category,
        search=search.strip() if search else None,
    )
    total = await company_crud.company.count(db, conditions=conditions)
    companies = await company_crud.company.get_filtered(
        db,
        conditions=conditions,
        order_by=company_crud.company.newest_first(),
        skip=get_offset(page, limit),
        limit=limit,
    )
    return paginate([mask(c) for c in companies], page, total, limit)


async def list_pending_companies(
    db: AsyncSession, *, verifier: CredentialVerifier, master_password: Optional[str]
) -> List[company_schemas.CompanyRead]:
    """승인 대기 목록 (마스터 전용). 승인 처리를 위해 id만 실제 값이고 나머지는 마스킹됩니다."""
    verifier.require_master(master_password)
    conditions = company_crud.company.build_conditions(approval_status=ApprovalStatus.PENDING.value)
    companies = await company_crud.company.get_filtered(
        db, conditions=conditions, order_by=company_crud.company.newest_first(), limit=None
    )
    return [mask(c) for c in companies]


async def get_public_company(db: AsyncSession, company_id: int) -> company_schemas.CompanyRead:
    """
    공개 상세 조회. 승인되지 않은 파트너사는 존재하지 않는 것과 구분되지 않게 404를 반환합니다.
    """
    db_company = await company_crud.company.get(db, id=company_id)
    if db_company is None or not db_company.is_approved:
        raise NotFoundError("Company not found.")
    return to_read(db_company)


async def get_company_for_owner(
    db: AsyncSession, *, company_id: int, verifier: CredentialVerifier, password: Optional[str]
) -> company_schemas.CompanyRead:
    """소유자(파트너사 비밀번호) 또는 관리자(마스터)에게 승인 상태와 무관하게 전체 정보를 반환합니다."""
    db_company = await _get_or_404(db, company_id)
    verifier.require(password, db_company.password_hash)
    return to_read(db_company)


async def verify_company_password(
    db: AsyncSession, *, company_id: int, verifier: CredentialVerifier, password: Optional[str]
) -> bool:
    db_company = await _get_or_404(db, company_id)
    verifier.require(password, db_company.password_hash)
    return True


# =============================================================================
# 3. 생성 / 수정 / 삭제
# =============================================================================
async def create_company(
    db: AsyncSession, *, payload: Union[company_schemas.CompanyCreate, Dict[str, Any]]
) -> company_schemas.CompanyRead:
    """
    새 파트너사를 등록합니다. 입력에 어떤 승인 상태가 있더라도 무시하고 pending으로 생성합니다.
    """
    company_in = parse_payload(company_schemas.CompanyCreate, payload)
    detail = company_in.detail.model_dump() if company_in.detail else None

    db_company = await company_crud.company.create_with_relations(
        db,
        name=company_in.name,
        password_hash=get_password_hash(company_in.password),
        image_url=company_in.image_url,
        primary_category=company_in.primary_category,
        secondary_category=company_in.secondary_category,
        detail=detail,
    )
    logger.info("Company #%s registered (pending approval).", db_company.id)
    return to_read(db_company)


async def update_company(
    db: AsyncSession,
    *,
    company_id: int,
    payload: Union[company_schemas.CompanyUpdate, Dict[str, Any]],
    verifier: CredentialVerifier,
    password: Optional[str],
) -> company_schemas.CompanyRead:
    """
    부분 수정 (PATCH). 전달되지 않은 필드는 그대로 유지됩니다.
    `password` 필드가 있으면 새 비밀번호로 교체합니다. 승인 상태는 이 경로로 바꿀 수 없습니다.
    """
    company_in = parse_payload(company_schemas.CompanyUpdate, payload)
    db_company = await _get_or_404(db, company_id)
    verifier.require(password, db_company.password_hash)

    changes = company_in.model_dump(exclude_unset=True)
    primary = changes.pop("primary_category", None)
    secondary = changes.pop("secondary_category", None)
    new_password = changes.pop("password", None)

    update_data: Dict[str, Any] = {}
    if "name" in changes and changes["name"] is not None:
        update_data["name"] = changes["name"]
    if "image_url" in changes:
        update_data["image_url"] = changes["image_url"]
    if new_password:
        update_data["password_hash"] = get_password_hash(new_password)

    db_company = await company_crud.company.update_with_relations(
        db,
        db_obj=db_company,
        update_data=update_data,
        primary_category=primary,
        secondary_category=secondary,
    )
    logger.info("Company #%s updated%s.", company_id, " (password rotated)" if new_password else "")
    return to_read(db_company)


async def update_company_detail(
    db: AsyncSession,
    *,
    company_id: int,
    payload: Union[company_schemas.CompanyDetailIn, Dict[str, Any]],
    verifier: CredentialVerifier,
    password: Optional[str],
) -> company_schemas.CompanyRead:
    """상세 정보를 생성하거나 수정합니다 (upsert)."""
    detail_in = parse_payload(company_schemas.CompanyDetailIn, payload)
    db_company = await _get_or_404(db, company_id)
    verifier.require(password, db_company.password_hash)

    detail_data = detail_in.model_dump(exclude_unset=True)
    db_company = await company_crud.company.upsert_detail(db, db_obj=db_company, detail_data=detail_data)
    logger.info("Company #%s detail saved.", company_id)
    return to_read(db_company)


async def delete_company(
    db: AsyncSession, *, company_id: int, verifier: CredentialVerifier, password: Optional[str]
) -> None:
    """파트너사를 영구 삭제합니다. 카테고리와 상세 정보도 함께 삭제됩니다."""
    db_company = await _get_or_404(db, company_id)
    verifier.require(password, db_company.password_hash)
    await company_crud.company.delete(db, db_obj=db_company)
    logger.info("Company #%s deleted.", company_id)


# =============================================================================
# 4. 승인 상태 전이 (마스터 전용)
# =============================================================================
async def update_approval_status(
    db: AsyncSession,
    *,
    company_id: int,
    new_status: Union[ApprovalStatus, str],
    verifier: CredentialVerifier,
    master_password: Optional[str],
) -> company_schemas.CompanyRead:
    """
    승인 상태를 변경합니다. 현재 상태와 같은 값을 요청하면 아무것도 바꾸지 않고
    (updated_at 포함) 현재 레코드를 그대로 반환합니다.
    """
    verifier.require_master(master_password)
    status_value = parse_payload(
        company_schemas.ApprovalStatusUpdate, {"approval_status": new_status}
    ).approval_status.value
    db_company = await _get_or_404(db, company_id)

    if db_company.approval_status == status_value:
        logger.debug("Company #%s already '%s'; nothing to do.", company_id, status_value)
        return to_read(db_company)

    previous = db_company.approval_status
    db_company = await company_crud.company.update_with_relations(
        db, db_obj=db_company, update_data={"approval_status": status_value}
    )
    logger.info("Company #%s approval status: %s -> %s", company_id, previous, status_value)
    return to_read(db_company)


async def approve_company(
    db: AsyncSession, *, company_id: int, verifier: CredentialVerifier, master_password: Optional[str]
) -> company_schemas.CompanyRead:
    return await update_approval_status(
        db, company_id=company_id, new_status=ApprovalStatus.APPROVED,
        verifier=verifier, master_password=master_password,
    )


async def reject_company(
    db: AsyncSession, *, company_id: int, verifier: CredentialVerifier, master_password: Optional[str]
) -> company_schemas.CompanyRead:
    """거부 상태로 전환합니다. 레코드는 남아 있으며 소유자가 계속 수정/삭제할 수 있습니다."""
    return await update_approval_status(
        db, company_id=company_id, new_status=ApprovalStatus.REJECTED,
        verifier=verifier, master_password=master_password,
    )


async def reject_and_delete_company(
    db: AsyncSession, *, company_id: int, verifier: CredentialVerifier, master_password: Optional[str]
) -> None:
    """거부와 동시에 레코드를 영구 삭제합니다 (관리자 화면의 "거부" 버튼 동작)."""
    verifier.require_master(master_password)
    db_company = await _get_or_404(db, company_id)
    await company_crud.company.delete(db, db_obj=db_company)
    logger.info("Company #%s rejected and deleted.", company_id)
