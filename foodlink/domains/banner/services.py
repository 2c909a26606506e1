# foodlink/domains/banner/services.py

"""
'banner' 도메인의 비즈니스 로직 모듈입니다. 쓰기 작업은 모두 마스터 패스워드로 확인합니다.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core.exceptions import NotFoundError
from foodlink.core.security import CredentialVerifier
from foodlink.core.validators import parse_payload
from . import crud as banner_crud
from . import models as banner_models
from . import schemas as banner_schemas

logger = logging.getLogger(__name__)


async def _get_or_404(db: AsyncSession, banner_id: int) -> banner_models.HomeBanner:
    db_banner = await banner_crud.banner.get(db, id=banner_id)
    if db_banner is None:
        raise NotFoundError("Banner not found.")
    return db_banner


async def list_active_banners(db: AsyncSession) -> List[banner_models.HomeBanner]:
    return await banner_crud.banner.get_active(db)


async def list_all_banners(
    db: AsyncSession, *, verifier: CredentialVerifier, master_password: Optional[str]
) -> List[banner_models.HomeBanner]:
    """비활성 배너를 포함한 전체 목록 (관리 화면용)."""
    verifier.require_master(master_password)
    return await banner_crud.banner.get_all_ordered(db)


async def get_banner(db: AsyncSession, banner_id: int) -> banner_models.HomeBanner:
    return await _get_or_404(db, banner_id)


async def create_banner(
    db: AsyncSession,
    *,
    payload: Union[banner_schemas.HomeBannerCreate, Dict[str, Any]],
    verifier: CredentialVerifier,
    master_password: Optional[str],
) -> banner_models.HomeBanner:
    verifier.require_master(master_password)
    banner_in = parse_payload(banner_schemas.HomeBannerCreate, payload)
    db_banner = await banner_crud.banner.create(db, obj_in=banner_in)
    logger.info("Banner #%s created (order=%s).", db_banner.id, db_banner.display_order)
    return db_banner


async def update_banner(
    db: AsyncSession,
    *,
    banner_id: int,
    payload: Union[banner_schemas.HomeBannerUpdate, Dict[str, Any]],
    verifier: CredentialVerifier,
    master_password: Optional[str],
) -> banner_models.HomeBanner:
    verifier.require_master(master_password)
    banner_in = parse_payload(banner_schemas.HomeBannerUpdate, payload)
    db_banner = await _get_or_404(db, banner_id)

    update_data = banner_in.model_dump(exclude_unset=True)
    # 필수 컬럼은 null로 덮어쓰지 않습니다
    for key in ("image_url", "display_order", "is_active"):
        if key in update_data and update_data[key] is None:
            update_data.pop(key)

    db_banner = await banner_crud.banner.update(db, db_obj=db_banner, obj_in=update_data)
    logger.info("Banner #%s updated.", banner_id)
    return db_banner


async def delete_banner(
    db: AsyncSession, *, banner_id: int, verifier: CredentialVerifier, master_password: Optional[str]
) -> None:
    verifier.require_master(master_password)
    db_banner = await _get_or_404(db, banner_id)
    await banner_crud.banner.delete(db, db_obj=db_banner)
    logger.info("Banner #%s deleted.", banner_id)
