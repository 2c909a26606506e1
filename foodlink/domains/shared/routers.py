# foodlink/domains/shared/routers.py

"""
공용 API 엔드포인트를 정의하는 모듈입니다.

- 관리자 화면 진입 전 마스터 패스워드 확인
- 이미지/첨부파일 업로드 (저장된 파일의 공개 URL 반환)
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from foodlink.core import dependencies as deps
from foodlink.core.security import CredentialVerifier
from foodlink.utils.files import LocalBlobStore

from . import schemas as shared_schemas

router = APIRouter(prefix="/shared", tags=["shared (공용)"])

UPLOAD_FOLDERS = {"companies", "banners", "contents", "inquiries"}


@router.post(
    "/verify-master-password",
    response_model=shared_schemas.MasterPasswordVerifyResult,
    summary="마스터 패스워드 확인",
)
async def verify_master_password(
    master_password: Optional[str] = Depends(deps.get_master_password),
    verifier: CredentialVerifier = Depends(deps.get_credential_verifier),
):
    verifier.require_master(master_password)
    return shared_schemas.MasterPasswordVerifyResult(verified=True)


@router.post(
    "/uploads",
    response_model=shared_schemas.UploadRead,
    status_code=status.HTTP_201_CREATED,
    summary="파일 업로드",
)
async def upload_file(
    file: UploadFile = File(...),
    folder: str = Form("companies"),
    blob_store: LocalBlobStore = Depends(deps.get_blob_store),
):
    """
    파일을 저장하고 공개 URL을 반환합니다.
    - **folder**: companies, banners, contents (이미지), inquiries (첨부파일)
    """
    target = folder if folder in UPLOAD_FOLDERS else "companies"
    url = await blob_store.upload(file, target, images_only=target != "inquiries")
    return shared_schemas.UploadRead(url=url)
