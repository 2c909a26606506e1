# foodlink/domains/banner/routers.py

"""
'banner' 도메인 (홈 배너)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core import dependencies as deps
from foodlink.core.security import CredentialVerifier

from . import schemas as banner_schemas
from . import services as banner_services

router = APIRouter(
    prefix="/banners",
    tags=["banners (홈 배너)"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[banner_schemas.HomeBannerRead], summary="활성 배너 목록 (표시 순서)")
async def read_active_banners(db: AsyncSession = Depends(deps.get_db_session)):
    return await banner_services.list_active_banners(db)


@router.get("/all", response_model=List[banner_schemas.HomeBannerRead], summary="전체 배너 목록 (마스터 전용)")
async def read_all_banners(
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await banner_services.list_all_banners(db, verifier=verifier, master_password=master_password)


@router.get("/{banner_id}", response_model=banner_schemas.HomeBannerRead, summary="배너 조회")
async def read_banner(banner_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await banner_services.get_banner(db, banner_id)


@router.post(
    "",
    response_model=banner_schemas.HomeBannerRead,
    status_code=status.HTTP_201_CREATED,
    summary="배너 생성 (마스터 전용)",
)
async def create_banner(
    banner_in: banner_schemas.HomeBannerCreate,
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await banner_services.create_banner(
        db, payload=banner_in, verifier=verifier, master_password=master_password
    )


@router.patch("/{banner_id}", response_model=banner_schemas.HomeBannerRead, summary="배너 수정 (마스터 전용)")
async def update_banner(
    banner_id: int,
    banner_in: banner_schemas.HomeBannerUpdate,
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    return await banner_services.update_banner(
        db, banner_id=banner_id, payload=banner_in, verifier=verifier, master_password=master_password
    )


@router.delete("/{banner_id}", status_code=status.HTTP_204_NO_CONTENT, summary="배너 삭제 (마스터 전용)")
async def delete_banner(
    banner_id: int,
    master_password: Optional[str] = Depends(deps.get_master_password),
    db: AsyncSession = Depends(deps.get_db_session),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    await banner_services.delete_banner(
        db, banner_id=banner_id, verifier=verifier, master_password=master_password
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
