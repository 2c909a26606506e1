# foodlink/core/exceptions.py

"""
서비스 계층에서 사용하는 공통 예외 분류를 정의하는 모듈입니다.

모든 예외는 `AppError`를 상속하며, 클라이언트가 분기할 수 있는 고정 코드(`code`)와
사람이 읽을 수 있는 메시지(`message`), 그리고 HTTP 상태 코드(`status_code`)를 가집니다.
HTTP 응답으로의 변환은 main.py에 등록된 예외 핸들러가 담당합니다.
"""

from typing import Optional

from fastapi import status


class ErrorCode:
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    UPLOAD_FAILED = "UPLOAD_FAILED"
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"


class AppError(Exception):
    code: str = ErrorCode.INTERNAL_ERROR
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """입력값이 필드 제약 조건을 만족하지 않을 때 발생합니다. 첫 번째 실패 조건을 메시지로 가집니다."""
    code = ErrorCode.VALIDATION_ERROR
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Invalid input."

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class AuthenticationError(AppError):
    """
    비밀번호가 일치하지 않을 때 발생합니다.
    레코드 비밀번호 실패와 마스터 패스워드 실패를 구분하지 않습니다.
    """
    code = ErrorCode.INVALID_PASSWORD
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid password."


class NotFoundError(AppError):
    code = ErrorCode.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found."


class ConfigurationError(AppError):
    """서버 설정 누락 (예: MASTER_PASSWORD 미설정). 메시지는 로그에만 남기고 클라이언트에는 노출하지 않습니다."""
    code = ErrorCode.INTERNAL_ERROR
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Required server configuration is missing."


class UpstreamError(AppError):
    code = ErrorCode.UPSTREAM_ERROR
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Upstream service failed."


class UploadError(UpstreamError):
    code = ErrorCode.UPLOAD_FAILED
    default_message = "File upload failed."


class NotificationError(UpstreamError):
    code = ErrorCode.NOTIFICATION_FAILED
    default_message = "Notification delivery failed."
