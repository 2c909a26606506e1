# foodlink/domains/content/routers.py

"""
'content' 도메인 (콘텐츠 게시판)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core import dependencies as deps
from foodlink.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Page
from foodlink.core.security import CredentialVerifier

from . import schemas as content_schemas
from . import services as content_services

router = APIRouter(
    prefix="/contents",
    tags=["contents (콘텐츠)"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=Page[content_schemas.ContentListRead], summary="콘텐츠 목록 (고정 글 우선)")
async def read_contents(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    search: Optional[str] = Query(None, max_length=100),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await content_services.list_contents(db, page=page, limit=limit, search=search)


@router.get("/{content_id}", response_model=content_schemas.ContentRead, summary="콘텐츠 상세 (조회수 증가)")
async def read_content(content_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await content_services.get_content(db, content_id)


@router.post(
    "",
    response_model=content_schemas.ContentRead,
    status_code=status.HTTP_201_CREATED,
    summary="콘텐츠 작성 (마스터 전용)",
)
async def create_content(
    content_in: content_schemas.ContentCreate,
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    """
    - **password**: 지정하면 작성자가 이 비밀번호로 수정/삭제할 수 있습니다 (선택).
    """
    return await content_services.create_content(
        db, payload=content_in, verifier=verifier, master_password=master_password
    )


@router.post(
    "/{content_id}/verify-password",
    response_model=content_schemas.PasswordVerifyResult,
    summary="콘텐츠 비밀번호 확인",
)
async def verify_content_password(
    content_id: int,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    await content_services.verify_content_password(
        db, content_id=content_id, verifier=verifier, password=password
    )
    return content_schemas.PasswordVerifyResult(verified=True)


@router.patch("/{content_id}", response_model=content_schemas.ContentRead, summary="콘텐츠 수정")
async def update_content(
    content_id: int,
    content_in: content_schemas.ContentUpdate,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await content_services.update_content(
        db, content_id=content_id, payload=content_in, verifier=verifier, password=password
    )


@router.delete("/{content_id}", status_code=status.HTTP_204_NO_CONTENT, summary="콘텐츠 삭제")
async def delete_content(
    content_id: int,
    password: Optional[str] = Depends(deps.get_record_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    await content_services.delete_content(db, content_id=content_id, verifier=verifier, password=password)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
