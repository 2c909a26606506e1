# foodlink/core/validators.py

"""
여러 도메인 스키마에서 공통으로 사용하는 유효성 검증 유틸리티 모듈입니다.
"""

import re
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from foodlink.core.exceptions import ValidationError

SchemaType = TypeVar("SchemaType", bound=BaseModel)

PHONE_PATTERN = r"^[0-9\-+() ]+$"
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


def validate_url(value: Optional[str]) -> Optional[str]:
    """
    http(s) 절대 URL 또는 업로드 저장소가 반환하는 '/'로 시작하는 경로만 허용합니다.
    빈 문자열은 None으로 취급합니다.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if value.startswith(("http://", "https://")) and len(value) > len("https://"):
        return value
    if value.startswith("/") and not value.startswith("//"):
        return value
    raise ValueError("must be a valid URL")


def validate_url_list(values: Optional[List[str]]) -> List[str]:
    if not values:
        return []
    urls = [validate_url(v) for v in values]
    return [u for u in urls if u]


def unique(values: List[str]) -> List[str]:
    """순서를 유지하면서 중복을 제거합니다."""
    return list(dict.fromkeys(values))


def strip_html_tags(html: str) -> str:
    return _HTML_TAG_RE.sub("", html)


def make_excerpt(html: str, max_length: int = 150, suffix: str = "...") -> str:
    """HTML 태그와 연속 공백을 제거한 뒤 max_length 이내로 자릅니다."""
    text = _WHITESPACE_RE.sub(" ", strip_html_tags(html)).strip()
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix


def parse_payload(schema: Type[SchemaType], payload: Union[SchemaType, Dict[str, Any]]) -> SchemaType:
    """
    dict 또는 스키마 인스턴스를 받아 스키마로 검증합니다.
    pydantic 검증 실패는 첫 번째 실패 항목을 담은 `ValidationError`로 변환합니다.
    """
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise to_validation_error(e) from e


def to_validation_error(exc: PydanticValidationError) -> ValidationError:
    first = exc.errors()[0]
    field = ".".join(str(loc) for loc in first.get("loc", ()) if loc != "body")
    message = first.get("msg", "Invalid input.")
    if field:
        return ValidationError(f"{field}: {message}", field=field)
    return ValidationError(message)


def validate_phone(value: Optional[str]) -> Optional[str]:
    """숫자와 '-', '+', '(', ')', 공백만 허용합니다."""
    if value is None:
        return None
    if not re.match(PHONE_PATTERN, value):
        raise ValueError("must contain only digits, spaces and '-+()'")
    return value
