# foodlink/domains/banner/crud.py

"""
'banner' 도메인 (t_home_banners)의 CRUD 작업을 담당하는 모듈입니다.
"""

from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core.crud_base import CRUDBase
from . import models as banner_models
from . import schemas as banner_schemas

HomeBanner = banner_models.HomeBanner


class CRUDHomeBanner(CRUDBase[HomeBanner, banner_schemas.HomeBannerCreate, banner_schemas.HomeBannerUpdate]):
    def __init__(self):
        super().__init__(HomeBanner)

    async def get_active(self, db: AsyncSession) -> List[HomeBanner]:
        """활성 배너를 표시 순서대로 조회합니다."""
        return await self.get_filtered(
            db,
            conditions=[HomeBanner.is_active == True],  # noqa: E712
            order_by=[HomeBanner.display_order.asc(), HomeBanner.id.asc()],
            limit=None,
        )

    async def get_all_ordered(self, db: AsyncSession) -> List[HomeBanner]:
        return await self.get_filtered(
            db, order_by=[HomeBanner.display_order.asc(), HomeBanner.id.asc()], limit=None
        )


banner = CRUDHomeBanner()
