# foodlink/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.
"""

from datetime import datetime, UTC
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    커밋 여부는 `commit` 인자로 제어하여, 여러 단계의 쓰기를 하나의 트랜잭션으로 묶을 수 있습니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def get_filtered(
        self,
        db: AsyncSession,
        *,
        conditions: Sequence[ColumnElement[bool]] = (),
        order_by: Sequence[Any] = (),
        skip: int = 0,
        limit: Optional[int] = 100,
    ) -> List[ModelType]:
        """
        조건 목록(AND 결합), 정렬, 페이징을 적용한 다중 조회.
        정렬이 지정되지 않으면 id 내림차순으로 정렬합니다.
        """
        query = select(self.model)
        if conditions:
            query = query.where(*conditions)

        if order_by:
            query = query.order_by(*order_by)
        else:
            query = query.order_by(self.model.id.desc())

        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def count(
        self, db: AsyncSession, *, conditions: Sequence[ColumnElement[bool]] = ()
    ) -> int:
        """
        조건을 만족하는 레코드의 정확한 개수를 반환합니다 (페이지네이션 메타데이터용).
        """
        query = select(func.count()).select_from(self.model)
        if conditions:
            query = query.where(*conditions)
        result = await db.execute(query)
        return int(result.scalar_one())

    async def create(
        self,
        db: AsyncSession,
        *,
        obj_in: Union[CreateSchemaType, Dict[str, Any]],
        commit: bool = True,
    ) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        """
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        if commit:
            await db.commit()
            await db.refresh(db_obj)
        else:
            await db.flush()
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
        commit: bool = True,
    ) -> ModelType:
        """
        기존 레코드를 업데이트합니다. 전달된 필드만 변경합니다 (PATCH 의미).
        """
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(db_obj, key, value)
        if hasattr(db_obj, "updated_at"):
            db_obj.updated_at = datetime.now(UTC)

        db.add(db_obj)
        if commit:
            await db.commit()
            await db.refresh(db_obj)
        else:
            await db.flush()
        return db_obj

    async def delete(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """
        레코드를 영구 삭제합니다.
        """
        await db.delete(db_obj)
        await db.commit()
        return db_obj
