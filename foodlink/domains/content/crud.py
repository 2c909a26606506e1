# foodlink/domains/content/crud.py

"""
'content' 도메인 (t_contents)의 CRUD 작업을 담당하는 모듈입니다.
"""

from typing import List, Optional

from sqlalchemy import or_, update
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core.crud_base import CRUDBase
from . import models as content_models
from . import schemas as content_schemas

Content = content_models.Content


class CRUDContent(CRUDBase[Content, content_schemas.ContentCreate, content_schemas.ContentUpdate]):
    def __init__(self):
        super().__init__(Content)

    @staticmethod
    def build_conditions(search: Optional[str] = None) -> List[ColumnElement[bool]]:
        if not search:
            return []
        return [or_(Content.title.icontains(search, autoescape=True), Content.content.icontains(search, autoescape=True))]

    @staticmethod
    def pinned_first() -> list:
        """고정 글 우선, 그다음 최신순."""
        return [Content.is_pinned.desc(), Content.created_at.desc(), Content.id.desc()]

    async def increment_view_count(self, db: AsyncSession, *, content_id: int) -> None:
        """조회수를 UPDATE 한 번으로 1 증가시킵니다 (동시 조회 시에도 누락 없음)."""
        await db.execute(
            update(Content)
            .where(Content.id == content_id)
            .values(view_count=Content.view_count + 1)
        )
        await db.commit()

    async def get_fresh(self, db: AsyncSession, id: int) -> Optional[Content]:
        db_obj = await self.get(db, id=id)
        if db_obj is not None:
            await db.refresh(db_obj)
        return db_obj


content = CRUDContent()
