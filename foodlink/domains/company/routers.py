# foodlink/domains/company/routers.py

"""
'company' 도메인 (파트너사)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

비밀번호는 헤더로 전달합니다.
- X-Password: 파트너사 비밀번호 또는 마스터 패스워드
- X-Master-Password: 마스터 패스워드 (승인 관련 작업)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core import dependencies as deps
from foodlink.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Page
from foodlink.core.security import CredentialVerifier

from . import schemas as company_schemas
from . import services as company_services

# APIRouter 인스턴스 생성
router = APIRouter(
    prefix="/companies",
    tags=["companies (파트너사)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 조회
# =============================================================================
@router.get(
    "",
    response_model=Page[company_schemas.CompanyRead],
    summary="파트너사 목록 조회 (공개, 마스킹 적용)",
)
async def read_companies(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    primary_category: Optional[List[str]] = Query(None, description="1차 카테고리 (여러 개 지정 시 OR)"),
    secondary_category: Optional[List[str]] = Query(None, description="2차 카테고리 (여러 개 지정 시 OR)"),
    search: Optional[str] = Query(None, max_length=100, description="파트너사명 부분 검색"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    최신 등록순 파트너사 목록입니다. 승인되지 않은 파트너사는 고정 문구로 마스킹됩니다.
    카테고리/검색 필터는 승인된 파트너사에만 적용됩니다.
    """
    return await company_services.list_companies(
        db,
        page=page,
        limit=limit,
        primary_category=[c for c in primary_category or [] if c and c != "all"],
        secondary_category=[c for c in secondary_category or [] if c and c != "all"],
        search=search,
    )


@router.get(
    "/pending",
    response_model=List[company_schemas.CompanyRead],
    summary="승인 대기 파트너사 목록 (마스터 전용)",
)
async def read_pending_companies(
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await company_services.list_pending_companies(
        db, verifier=verifier, master_password=master_password
    )


@router.get(
    "/{company_id}",
    response_model=company_schemas.CompanyRead,
    summary="파트너사 상세 조회 (승인된 파트너사만)",
)
async def read_company(company_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await company_services.get_public_company(db, company_id)


@router.post(
    "/{company_id}/verify-password",
    response_model=company_schemas.PasswordVerifyResult,
    summary="파트너사 비밀번호 확인",
)
async def verify_company_password(
    company_id: int,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    """수정/삭제 화면 진입 전 비밀번호를 확인합니다. 마스터 패스워드도 허용됩니다."""
    await company_services.verify_company_password(
        db, company_id=company_id, verifier=verifier, password=password
    )
    return company_schemas.PasswordVerifyResult(verified=True)


@router.get(
    "/{company_id}/manage",
    response_model=company_schemas.CompanyRead,
    summary="파트너사 전체 정보 조회 (소유자/관리자)",
)
async def read_company_for_owner(
    company_id: int,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await company_services.get_company_for_owner(
        db, company_id=company_id, verifier=verifier, password=password
    )


# =============================================================================
# 2. 생성 / 수정 / 삭제
# =============================================================================
@router.post(
    "",
    response_model=company_schemas.CompanyRead,
    status_code=status.HTTP_201_CREATED,
    summary="파트너사 등록 (승인 대기 상태로 생성)",
)
async def create_company(
    company_in: company_schemas.CompanyCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새로운 파트너사를 등록합니다.
    - **name**: 파트너사명 (2~100자)
    - **password**: 이후 수정/삭제에 사용할 비밀번호 (4~50자)
    - **primary_category / secondary_category**: 하나 이상 선택
    - **detail**: 연락처, 상세 이미지, 소개글 (선택)
    """
    return await company_services.create_company(db, payload=company_in)


@router.patch(
    "/{company_id}",
    response_model=company_schemas.CompanyRead,
    summary="파트너사 정보 부분 수정",
)
async def update_company(
    company_id: int,
    company_in: company_schemas.CompanyUpdate,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await company_services.update_company(
        db, company_id=company_id, payload=company_in, verifier=verifier, password=password
    )


@router.put(
    "/{company_id}/detail",
    response_model=company_schemas.CompanyRead,
    summary="파트너사 상세 정보 저장 (없으면 생성)",
)
async def upsert_company_detail(
    company_id: int,
    detail_in: company_schemas.CompanyDetailIn,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await company_services.update_company_detail(
        db, company_id=company_id, payload=detail_in, verifier=verifier, password=password
    )


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="파트너사 삭제",
)
async def delete_company(
    company_id: int,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    await company_services.delete_company(
        db, company_id=company_id, verifier=verifier, password=password
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 3. 승인 관리 (마스터 전용)
# =============================================================================
@router.patch(
    "/{company_id}/approval",
    response_model=company_schemas.CompanyRead,
    summary="파트너사 승인 상태 변경",
)
async def update_company_approval(
    company_id: int,
    status_in: company_schemas.ApprovalStatusUpdate,
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    """현재와 같은 상태를 요청하면 아무것도 변경하지 않습니다."""
    return await company_services.update_approval_status(
        db,
        company_id=company_id,
        new_status=status_in.approval_status,
        verifier=verifier,
        master_password=master_password,
    )


@router.post("/{company_id}/approve", response_model=company_schemas.CompanyRead, summary="파트너사 승인")
async def approve_company(
    company_id: int,
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await company_services.approve_company(
        db, company_id=company_id, verifier=verifier, master_password=master_password
    )


@router.post("/{company_id}/reject", response_model=company_schemas.CompanyRead, summary="파트너사 거부 (상태 변경)")
async def reject_company(
    company_id: int,
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await company_services.reject_company(
        db, company_id=company_id, verifier=verifier, master_password=master_password
    )


@router.post(
    "/{company_id}/reject-and-delete",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="파트너사 거부 후 삭제",
)
async def reject_and_delete_company(
    company_id: int,
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    await company_services.reject_and_delete_company(
        db, company_id=company_id, verifier=verifier, master_password=master_password
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
