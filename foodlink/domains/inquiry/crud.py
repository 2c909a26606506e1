# foodlink/domains/inquiry/crud.py

"""
'inquiry' 도메인 (t_inquiries)의 CRUD 작업을 담당하는 모듈입니다.
"""

from typing import List, Optional

from sqlalchemy.sql.elements import ColumnElement

from foodlink.core.crud_base import CRUDBase
from . import models as inquiry_models
from . import schemas as inquiry_schemas

Inquiry = inquiry_models.Inquiry


class CRUDInquiry(CRUDBase[Inquiry, inquiry_schemas.InquiryCreate, inquiry_schemas.InquiryUpdate]):
    def __init__(self):
        super().__init__(Inquiry)

    @staticmethod
    def build_conditions(
        *, category: Optional[str] = None, is_answered: Optional[bool] = None
    ) -> List[ColumnElement[bool]]:
        conditions: List[ColumnElement[bool]] = []
        if category:
            conditions.append(Inquiry.category == category)
        if is_answered is not None:
            conditions.append(Inquiry.is_answered == is_answered)
        return conditions

    @staticmethod
    def newest_first() -> list:
        return [Inquiry.created_at.desc(), Inquiry.id.desc()]


inquiry = CRUDInquiry()
