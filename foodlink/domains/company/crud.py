# foodlink/domains/company/crud.py

"""
'company' 도메인의 CRUD(Create, Read, Update, Delete) 작업을 담당하는 모듈입니다.

파트너사 본문, 카테고리 연결, 상세 정보는 하나의 세션 트랜잭션 안에서 함께 기록되며,
커밋 실패 시 세션 롤백으로 모두 취소됩니다.
"""

from datetime import datetime, UTC
from typing import Any, Dict, Iterable, List, Optional, Sequence

from sqlalchemy.orm import selectinload
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core.crud_base import CRUDBase
from . import models as company_models
from . import schemas as company_schemas

Company = company_models.Company
CompanyCategory = company_models.CompanyCategory
CompanyDetail = company_models.CompanyDetail
CategoryKind = company_models.CategoryKind


class CRUDCompany(CRUDBase[Company, company_schemas.CompanyCreate, company_schemas.CompanyUpdate]):
    def __init__(self):
        super().__init__(Company)

    async def get(self, db: AsyncSession, id: Any) -> Optional[Company]:
        """
        카테고리와 상세 정보를 포함하여 파트너사를 조회합니다.
        세션에 남아 있는 이전 상태 대신 항상 DB의 최신 값을 읽습니다.
        """
        query = (
            select(Company)
            .where(Company.id == id)
            .options(selectinload(Company.categories), selectinload(Company.detail))
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalars().first()

    # -------------------------------------------------------------------------
    # 목록 필터 조건
    # -------------------------------------------------------------------------
    @staticmethod
    def category_overlap(kind: CategoryKind, values: Iterable[str]) -> ColumnElement[bool]:
        """values 중 하나라도 가진 파트너사를 매칭합니다 (배열 overlap 의미)."""
        matching_ids = select(CompanyCategory.company_id).where(
            CompanyCategory.kind == kind.value,
            CompanyCategory.value.in_(list(values)),
        )
        return Company.id.in_(matching_ids)

    def build_conditions(
        self,
        *,
        primary_category: Optional[Sequence[str]] = None,
        secondary_category: Optional[Sequence[str]] = None,
        search: Optional[str] = None,
        approval_status: Optional[str] = None,
    ) -> List[ColumnElement[bool]]:
        """
        서로 다른 필터는 AND, 한 필터 안의 여러 값은 OR로 결합합니다.
        카테고리/검색 필터는 승인된 파트너사에만 적용됩니다 (마스킹된 항목은 카테고리가 비어 있음).
        """
        conditions: List[ColumnElement[bool]] = []
        approved_only = False
        if primary_category:
            conditions.append(self.category_overlap(CategoryKind.PRIMARY, primary_category))
            approved_only = True
        if secondary_category:
            conditions.append(self.category_overlap(CategoryKind.SECONDARY, secondary_category))
            approved_only = True
        if search:
            conditions.append(Company.name.icontains(search, autoescape=True))
            approved_only = True

        if approved_only:
            conditions.append(Company.approval_status == company_models.ApprovalStatus.APPROVED.value)
        elif approval_status:
            conditions.append(Company.approval_status == approval_status)
        return conditions

    @staticmethod
    def newest_first() -> list:
        return [Company.created_at.desc(), Company.id.desc()]

    # -------------------------------------------------------------------------
    # 쓰기 작업
    # -------------------------------------------------------------------------
    @staticmethod
    def _build_categories(kind: CategoryKind, values: Iterable[str]) -> List[CompanyCategory]:
        return [CompanyCategory(kind=kind.value, value=value) for value in values]

    async def create_with_relations(
        self,
        db: AsyncSession,
        *,
        name: str,
        password_hash: str,
        image_url: Optional[str],
        primary_category: Sequence[str],
        secondary_category: Sequence[str],
        detail: Optional[Dict[str, Any]] = None,
    ) -> Company:
        """
        파트너사, 카테고리, 상세 정보를 하나의 트랜잭션으로 생성합니다.
        승인 상태는 항상 pending으로 시작합니다.
        """
        company = Company(
            name=name,
            password_hash=password_hash,
            image_url=image_url,
            approval_status=company_models.ApprovalStatus.PENDING.value,
        )
        company.categories = (
            self._build_categories(CategoryKind.PRIMARY, primary_category)
            + self._build_categories(CategoryKind.SECONDARY, secondary_category)
        )
        if detail is not None:
            company.detail = CompanyDetail(**detail)

        db.add(company)
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return await self.get(db, company.id)

    async def update_with_relations(
        self,
        db: AsyncSession,
        *,
        db_obj: Company,
        update_data: Dict[str, Any],
        primary_category: Optional[Sequence[str]] = None,
        secondary_category: Optional[Sequence[str]] = None,
    ) -> Company:
        """
        본문 필드를 부분 수정하고, 전달된 카테고리 종류만 통째로 교체합니다.
        """
        replacements = {CategoryKind.PRIMARY: primary_category, CategoryKind.SECONDARY: secondary_category}
        for kind, values in replacements.items():
            if values is None:
                continue
            kept = [c for c in db_obj.categories if c.kind != kind.value]
            db_obj.categories = kept + self._build_categories(kind, values)

        await self.update(db, db_obj=db_obj, obj_in=update_data)
        return await self.get(db, db_obj.id)

    async def upsert_detail(self, db: AsyncSession, *, db_obj: Company, detail_data: Dict[str, Any]) -> Company:
        """상세 정보가 없으면 생성하고, 있으면 전달된 필드만 수정합니다."""
        now = datetime.now(UTC)
        if db_obj.detail is None:
            db_obj.detail = CompanyDetail(**detail_data)
        else:
            for key, value in detail_data.items():
                setattr(db_obj.detail, key, value)
            db_obj.detail.updated_at = now

        await self.update(db, db_obj=db_obj, obj_in={})
        return await self.get(db, db_obj.id)


company = CRUDCompany()
