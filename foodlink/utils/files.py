# foodlink/utils/files.py

"""
업로드 파일을 로컬 정적 디렉토리에 저장하고 공개 URL을 반환하는 블롭 저장소 모듈입니다.

- 파일명은 중복을 피하기 위해 `타임스탬프_UUID.확장자` 형식으로 새로 생성합니다.
- 저장 실패는 `UploadError`로 변환되어 호출자가 "업로드 실패"를 구분해서 보고할 수 있습니다.
"""

import logging
import time
import uuid
from pathlib import Path
from typing import Optional

import aiofiles
from fastapi import UploadFile

from foodlink.core.config import settings
from foodlink.core.exceptions import UploadError, ValidationError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}
ALLOWED_ATTACHMENT_EXTENSIONS = ALLOWED_IMAGE_EXTENSIONS | {".pdf", ".doc", ".docx", ".xls", ".xlsx", ".hwp", ".txt"}


class LocalBlobStore:
    """
    업로드 파일을 `upload_dir/<folder>/` 아래에 저장하고 `url_prefix/<folder>/<name>` 형태의 URL을 반환합니다.
    """

    def __init__(self, upload_dir: str, url_prefix: str, max_size_mb: int = 10):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_size_bytes = max_size_mb * 1024 * 1024

    @staticmethod
    def _new_filename(original_name: Optional[str]) -> str:
        extension = Path(original_name or "").suffix.lower()
        return f"{int(time.time() * 1000)}_{uuid.uuid4()}{extension}"

    async def upload(self, upload_file: UploadFile, folder: Optional[str] = None, *, images_only: bool = True) -> str:
        """
        업로드된 파일을 저장하고 웹에서 접근 가능한 URL을 반환합니다.

        Args:
            upload_file (UploadFile): FastAPI를 통해 업로드된 파일 객체
            folder (str, optional): 하위 폴더 이름 (예: "companies", "banners")
            images_only (bool): True이면 이미지 확장자만 허용합니다.

        Returns:
            str: 저장된 파일의 공개 URL (예: "/static/uploads/companies/1700000000000_<uuid>.png")
        """
        allowed = ALLOWED_IMAGE_EXTENSIONS if images_only else ALLOWED_ATTACHMENT_EXTENSIONS
        extension = Path(upload_file.filename or "").suffix.lower()
        if extension not in allowed:
            raise ValidationError(f"Unsupported file type: '{extension or upload_file.filename}'.", field="file")

        content = await upload_file.read()
        if not content:
            raise ValidationError("Uploaded file is empty.", field="file")
        if len(content) > self.max_size_bytes:
            raise ValidationError("Uploaded file is too large.", field="file")

        sub_dir = _safe_folder(folder)
        target_dir = self.upload_dir / sub_dir if sub_dir else self.upload_dir
        new_filename = self._new_filename(upload_file.filename)

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(target_dir / new_filename, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.exception("Failed to store uploaded file '%s'.", upload_file.filename)
            raise UploadError(f"File upload failed: {e.strerror or e}") from e
        finally:
            await upload_file.close()

        parts = [self.url_prefix, sub_dir, new_filename] if sub_dir else [self.url_prefix, new_filename]
        url = "/".join(parts)
        logger.info("Stored upload %s (%d bytes).", url, len(content))
        return url


def _safe_folder(folder: Optional[str]) -> str:
    """경로 이동(../)을 막기 위해 영숫자, '-', '_' 이외의 문자를 제거합니다."""
    if not folder:
        return ""
    return "".join(ch for ch in folder if ch.isalnum() or ch in "-_")


def get_blob_store() -> LocalBlobStore:
    return LocalBlobStore(
        upload_dir=settings.UPLOAD_DIR,
        url_prefix=settings.UPLOAD_URL_PREFIX,
        max_size_mb=settings.MAX_UPLOAD_SIZE_MB,
    )
