# foodlink/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 비밀번호 정책 객체 (get_credential_verifier): 마스터 패스워드는 여기서 한 번만 주입됩니다.
- 외부 협력자 (get_blob_store, get_notifier): 테스트에서 dependency_overrides로 교체합니다.
- 요청 헤더로 전달되는 비밀번호 (X-Password, X-Master-Password).
"""

from typing import AsyncGenerator, Optional

from fastapi import Header
from sqlmodel.ext.asyncio.session import AsyncSession

# 실제 데이터베이스 세션 제너레이터 임포트
from foodlink.core.database import get_session as get_main_app_session
from foodlink.core.security import CredentialVerifier, build_credential_verifier
from foodlink.services.notifier import MailerSendNotifier
from foodlink.services.notifier import get_notifier as build_notifier
from foodlink.utils.files import LocalBlobStore
from foodlink.utils.files import get_blob_store as build_blob_store


# --- 데이터베이스 세션 의존성 주입 ---
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    foodlink.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


# --- 권한 확인 ---
def get_credential_verifier() -> CredentialVerifier:
    return build_credential_verifier()


async def get_record_password(x_password: Optional[str] = Header(None)) -> Optional[str]:
    """레코드 비밀번호 또는 마스터 패스워드 (X-Password 헤더)."""
    return x_password


async def get_master_password(x_master_password: Optional[str] = Header(None)) -> Optional[str]:
    """마스터 패스워드 (X-Master-Password 헤더)."""
    return x_master_password


# --- 외부 협력자 ---
def get_blob_store() -> LocalBlobStore:
    return build_blob_store()


def get_notifier() -> MailerSendNotifier:
    return build_notifier()
