# foodlink/core/config.py

from typing import Any, List, Optional
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "FoodLink API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "FoodLink partner directory API"
    # 애플리케이션 환경 (예: "development", "production", "testing")
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for SQL echo and detailed logging")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Async database connection URL (postgresql+asyncpg://...)")

    # --- 마스터 패스워드 / 비밀번호 해싱 설정 ---
    # 관리자 권한을 대신하는 단일 공유 비밀번호. 없으면 마스터 권한이 필요한 모든 작업이 실패합니다.
    MASTER_PASSWORD: Optional[SecretStr] = Field(None, description="Shared master password for admin operations")
    BCRYPT_ROUNDS: int = Field(10, ge=4, le=31, description="bcrypt cost factor for record passwords")

    # --- 파일 업로드 설정 ---
    UPLOAD_DIR: str = Field("/app/data/uploads", description="Directory for uploaded files.")
    UPLOAD_URL_PREFIX: str = Field("/static/uploads", description="Public URL prefix for uploaded files.")
    MAX_UPLOAD_SIZE_MB: int = Field(10, description="Maximum size of a single uploaded file in megabytes")

    # --- 메일 발송 (MailerSend) 설정 ---
    MAILERSEND_API_KEY: Optional[SecretStr] = Field(None, description="MailerSend API token")
    MAILERSEND_API_URL: str = Field("https://api.mailersend.com/v1/email", description="MailerSend e-mail endpoint")
    MAILERSEND_SENDER_EMAIL: str = Field("noreply@foodlink.co.kr", description="Verified sender address")
    ADMIN_EMAIL: Optional[str] = Field(None, description="Comma separated list of admin recipients")

    # --- CORS 설정 ---
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # APP_ENV가 development이고, UPLOAD_DIR이 기본값인 경우 로컬 경로로 변경
        if self.APP_ENV == "development" and self.UPLOAD_DIR == "/app/data/uploads":
            self.UPLOAD_DIR = os.path.join(BASE_DIR, "static", "uploads")

    @property
    def admin_email_list(self) -> List[str]:
        """콤마로 구분된 ADMIN_EMAIL 값을 공백 제거 후 리스트로 반환합니다."""
        if not self.ADMIN_EMAIL:
            return []
        return [email.strip() for email in self.ADMIN_EMAIL.split(",") if email.strip()]


settings = Settings()
