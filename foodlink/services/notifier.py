# foodlink/services/notifier.py

"""
1:1 문의가 접수되면 관리자에게 이메일을 보내는 알림 모듈입니다 (MailerSend HTTP API).

발송 실패는 `NotificationError`로 전달되며, 문의 등록 자체를 되돌리지 않도록
호출하는 쪽(문의 서비스)에서 잡아서 로그만 남깁니다.
"""

import html
import logging
from dataclasses import dataclass
from typing import List, Optional

import httpx

from foodlink.core.config import settings
from foodlink.core.exceptions import NotificationError

logger = logging.getLogger(__name__)

INQUIRY_CATEGORY_LABELS = {
    "purchase": "구매 문의",
    "partnership": "제휴 문의",
    "other": "기타 제안",
}


@dataclass
class InquiryNotification:
    inquiry_id: int
    company_name: str
    category: str
    name: str
    email: str
    content: str
    phone: Optional[str] = None


def render_inquiry_email(details: InquiryNotification) -> tuple[str, str, str]:
    """(제목, HTML 본문, 텍스트 본문)을 반환합니다. 사용자 입력은 HTML 이스케이프 처리합니다."""
    category_label = INQUIRY_CATEGORY_LABELS.get(details.category, details.category)
    subject = f"[FoodLink] {details.company_name}에 새로운 문의가 접수되었습니다"

    e = html.escape
    phone_html = f"<p><strong>연락처:</strong> {e(details.phone)}</p>" if details.phone else ""
    html_body = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        "<h2>새로운 1:1 문의가 접수되었습니다</h2>"
        f"<h3>파트너사 정보</h3><p><strong>파트너사명:</strong> {e(details.company_name)}</p>"
        f"<h3>문의자 정보</h3><p><strong>카테고리:</strong> {e(category_label)}</p>"
        f"<p><strong>이름:</strong> {e(details.name)}</p>"
        f"<p><strong>이메일:</strong> {e(details.email)}</p>{phone_html}"
        f'<h3>문의 내용</h3><div style="white-space: pre-wrap;">{e(details.content)}</div>'
        "<p>이 메일은 FoodLink 1:1 문의 시스템에서 자동 발송되었습니다.</p>"
        "</div>"
    )

    text_lines = [
        "새로운 1:1 문의가 접수되었습니다",
        "",
        f"- 파트너사명: {details.company_name}",
        f"- 카테고리: {category_label}",
        f"- 이름: {details.name}",
        f"- 이메일: {details.email}",
    ]
    if details.phone:
        text_lines.append(f"- 연락처: {details.phone}")
    text_lines += ["", "문의 내용", details.content]
    return subject, html_body, "\n".join(text_lines)


class MailerSendNotifier:
    """MailerSend REST API로 관리자에게 문의 알림 메일을 발송합니다."""

    def __init__(
        self,
        api_key: Optional[str],
        sender_email: str,
        admin_emails: List[str],
        api_url: str = "https://api.mailersend.com/v1/email",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.sender_email = sender_email
        self.admin_emails = admin_emails
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    async def send_inquiry_notification(self, details: InquiryNotification) -> None:
        if not self.api_key:
            raise NotificationError("MAILERSEND_API_KEY is not configured.")
        if not self.admin_emails:
            raise NotificationError("ADMIN_EMAIL is not configured.")

        subject, html_body, text_body = render_inquiry_email(details)
        payload = {
            "from": {"email": self.sender_email, "name": "FoodLink"},
            "to": [{"email": address, "name": "FoodLink Admin"} for address in self.admin_emails],
            "reply_to": {"email": details.email, "name": details.name},  # 답장은 문의자에게
            "subject": subject,
            "html": html_body,
            "text": text_body,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NotificationError(f"MailerSend rejected the message: HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NotificationError(f"MailerSend request failed: {e}") from e

        logger.info("Inquiry #%s notification sent to %d admin(s).", details.inquiry_id, len(self.admin_emails))


def get_notifier() -> MailerSendNotifier:
    return MailerSendNotifier(
        api_key=settings.MAILERSEND_API_KEY.get_secret_value() if settings.MAILERSEND_API_KEY else None,
        sender_email=settings.MAILERSEND_SENDER_EMAIL,
        admin_emails=settings.admin_email_list,
        api_url=settings.MAILERSEND_API_URL,
    )
