# foodlink/core/pagination.py

"""
목록 조회 API의 페이지네이션 응답 형태를 정의하는 모듈입니다.

응답 형태: {items: [...], pagination: {currentPage, totalPages, totalItems,
itemsPerPage, hasNextPage, hasPreviousPage}}
"""

import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field

ItemType = TypeVar("ItemType")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class PaginationMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")
    total_items: int = Field(..., alias="totalItems")
    items_per_page: int = Field(..., alias="itemsPerPage")
    has_next_page: bool = Field(..., alias="hasNextPage")
    has_previous_page: bool = Field(..., alias="hasPreviousPage")


class Page(BaseModel, Generic[ItemType]):
    items: List[ItemType]
    pagination: PaginationMeta


def get_offset(page: int, limit: int) -> int:
    """페이지 번호(1부터 시작)와 limit으로 offset을 계산합니다."""
    return (page - 1) * limit


def create_pagination_meta(current_page: int, total_items: int, items_per_page: int) -> PaginationMeta:
    total_pages = math.ceil(total_items / items_per_page) if items_per_page > 0 else 0
    return PaginationMeta(
        current_page=current_page,
        total_pages=total_pages,
        total_items=total_items,
        items_per_page=items_per_page,
        has_next_page=current_page < total_pages,
        has_previous_page=current_page > 1,
    )


def paginate(items: List[ItemType], current_page: int, total_items: int, items_per_page: int) -> Page[ItemType]:
    return Page(
        items=items,
        pagination=create_pagination_meta(current_page, total_items, items_per_page),
    )
