# foodlink/core/security.py

"""
애플리케이션의 보안 관련 유틸리티를 정의하는 모듈입니다.

- 비밀번호 해싱 및 검증 (passlib + bcrypt).
- 레코드 비밀번호 또는 마스터 패스워드 중 하나로 쓰기 권한을 확인하는 `CredentialVerifier`.

별도의 사용자 계정/세션이 없으므로, 모든 쓰기 작업은
"레코드 자체 비밀번호 OR 마스터 패스워드" 정책 하나로 권한을 판단합니다.
"""

import logging
from typing import Optional

from passlib.context import CryptContext  # 비밀번호 해싱을 위한 라이브러리

from foodlink.core.config import settings
from foodlink.core.exceptions import AuthenticationError, ConfigurationError

logger = logging.getLogger(__name__)


# --- 비밀번호 해싱 설정 ---
# bcrypt 해싱 알고리즘을 사용합니다.
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    일반 텍스트 비밀번호와 해싱된 비밀번호를 비교하여 일치하는지 확인합니다.
    해시 형식이 잘못된 경우에도 예외 대신 False를 반환합니다.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Stored password hash could not be parsed.")
        return False


def get_password_hash(password: str) -> str:
    """
    주어진 비밀번호를 해싱합니다.
    """
    return pwd_context.hash(password)


class CredentialVerifier:
    """
    레코드 비밀번호와 마스터 패스워드, 두 가지 경로로 권한을 확인하는 정책 객체입니다.

    마스터 패스워드는 생성 시점에 주입받으며, 비즈니스 로직 안에서 환경 변수를 직접 읽지 않습니다.
    """

    def __init__(self, master_password: Optional[str]):
        self._master_password = master_password or None

    @property
    def has_master(self) -> bool:
        return self._master_password is not None

    def is_master(self, supplied: Optional[str]) -> bool:
        if not self.has_master or supplied is None:
            return False
        # NOTE: 단순 문자열 비교입니다. 상수 시간 비교(타이밍 공격 대응)는 적용되어 있지 않습니다.
        return supplied == self._master_password

    def verify(self, supplied: Optional[str], record_hash: Optional[str] = None) -> bool:
        """
        마스터 패스워드와 일치하면 record_hash와 무관하게 True,
        그렇지 않으면 record_hash가 있을 때만 bcrypt 비교 결과를 반환합니다.
        """
        if self.is_master(supplied):
            return True
        if supplied is None or not record_hash:
            return False
        return verify_password(supplied, record_hash)

    def require_master(self, supplied: Optional[str]) -> None:
        """마스터 패스워드 전용 작업의 권한을 확인합니다."""
        if not self.has_master:
            logger.error("MASTER_PASSWORD is not configured; master-gated operation refused.")
            raise ConfigurationError("MASTER_PASSWORD is not set in environment variables")
        if not self.is_master(supplied):
            logger.warning("Master password verification failed.")
            raise AuthenticationError("Invalid master password.")

    def require(self, supplied: Optional[str], record_hash: Optional[str]) -> None:
        """레코드 비밀번호 또는 마스터 패스워드로 권한을 확인합니다."""
        if not self.verify(supplied, record_hash):
            logger.warning("Record password verification failed.")
            raise AuthenticationError("Invalid password.")


def build_credential_verifier() -> CredentialVerifier:
    """애플리케이션 설정으로부터 CredentialVerifier를 생성합니다."""
    master = settings.MASTER_PASSWORD.get_secret_value() if settings.MASTER_PASSWORD else None
    return CredentialVerifier(master)
