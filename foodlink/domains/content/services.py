# foodlink/domains/content/services.py

"""
'content' 도메인의 비즈니스 로직 모듈입니다.

- 작성: 마스터 패스워드 필수. 게시글 비밀번호를 함께 받으면 해시하여 저장합니다.
- 수정/삭제: 게시글 비밀번호 OR 마스터 패스워드.
- 상세 조회 시 조회수를 1 증가시킵니다.
"""

import logging
from typing import Any, Dict, Optional, Union

from sqlmodel.ext.asyncio.session import AsyncSession

from foodlink.core.exceptions import NotFoundError
from foodlink.core.pagination import Page, get_offset, paginate
from foodlink.core.security import CredentialVerifier, get_password_hash
from foodlink.core.validators import make_excerpt, parse_payload
from . import crud as content_crud
from . import models as content_models
from . import schemas as content_schemas

logger = logging.getLogger(__name__)

EXCERPT_LENGTH = 150


def to_list_read(content: content_models.Content) -> content_schemas.ContentListRead:
    return content_schemas.ContentListRead(
        id=content.id,
        title=content.title,
        thumbnail_url=content.thumbnail_url,
        excerpt=make_excerpt(content.content, EXCERPT_LENGTH),
        view_count=content.view_count,
        is_pinned=content.is_pinned,
        is_new=content.is_new(),
        created_at=content.created_at,
        updated_at=content.updated_at,
    )


def to_read(content: content_models.Content) -> content_schemas.ContentRead:
    return content_schemas.ContentRead(
        id=content.id,
        title=content.title,
        thumbnail_url=content.thumbnail_url,
        content=content.content,
        image_urls=list(content.image_urls or []),
        view_count=content.view_count,
        is_pinned=content.is_pinned,
        is_new=content.is_new(),
        has_password=bool(content.password_hash),
        created_at=content.created_at,
        updated_at=content.updated_at,
    )


async def _get_or_404(db: AsyncSession, content_id: int) -> content_models.Content:
    db_content = await content_crud.content.get(db, id=content_id)
    if db_content is None:
        raise NotFoundError("Content not found.")
    return db_content


async def list_contents(
    db: AsyncSession, *, page: int = 1, limit: int = 10, search: Optional[str] = None
) -> Page[content_schemas.ContentListRead]:
    conditions = content_crud.content.build_conditions(search.strip() if search else None)
    total = await content_crud.content.count(db, conditions=conditions)
    contents = await content_crud.content.get_filtered(
        db,
        conditions=conditions,
        order_by=content_crud.content.pinned_first(),
        skip=get_offset(page, limit),
        limit=limit,
    )
    return paginate([to_list_read(c) for c in contents], page, total, limit)


async def get_content(db: AsyncSession, content_id: int, *, count_view: bool = True) -> content_schemas.ContentRead:
    await _get_or_404(db, content_id)
    if count_view:
        await content_crud.content.increment_view_count(db, content_id=content_id)
    db_content = await content_crud.content.get_fresh(db, content_id)
    return to_read(db_content)


async def create_content(
    db: AsyncSession,
    *,
    payload: Union[content_schemas.ContentCreate, Dict[str, Any]],
    verifier: CredentialVerifier,
    master_password: Optional[str],
) -> content_schemas.ContentRead:
    verifier.require_master(master_password)
    content_in = parse_payload(content_schemas.ContentCreate, payload)

    data = content_in.model_dump(exclude={"password"})
    data["password_hash"] = get_password_hash(content_in.password) if content_in.password else None
    db_content = await content_crud.content.create(db, obj_in=data)
    logger.info("Content #%s created (pinned=%s).", db_content.id, db_content.is_pinned)
    return to_read(db_content)


async def verify_content_password(
    db: AsyncSession, *, content_id: int, verifier: CredentialVerifier, password: Optional[str]
) -> bool:
    db_content = await _get_or_404(db, content_id)
    verifier.require(password, db_content.password_hash)
    return True


async def update_content(
    db: AsyncSession,
    *,
    content_id: int,
    payload: Union[content_schemas.ContentUpdate, Dict[str, Any]],
    verifier: CredentialVerifier,
    password: Optional[str],
) -> content_schemas.ContentRead:
    content_in = parse_payload(content_schemas.ContentUpdate, payload)
    db_content = await _get_or_404(db, content_id)
    verifier.require(password, db_content.password_hash)

    changes = content_in.model_dump(exclude_unset=True)
    new_password = changes.pop("password", None)
    update_data = {
        key: value for key, value in changes.items()
        if value is not None or key == "thumbnail_url"
    }
    if new_password:
        update_data["password_hash"] = get_password_hash(new_password)

    db_content = await content_crud.content.update(db, db_obj=db_content, obj_in=update_data)
    logger.info("Content #%s updated.", content_id)
    return to_read(db_content)


async def delete_content(
    db: AsyncSession, *, content_id: int, verifier: CredentialVerifier, password: Optional[str]
) -> None:
    db_content = await _get_or_404(db, content_id)
    verifier.require(password, db_content.password_hash)
    await content_crud.content.delete(db, db_obj=db_content)
    logger.info("Content #%s deleted.", content_id)
