# tests/conftest.py

import os
import tempfile
from typing import AsyncGenerator, Awaitable, Callable, List

# --- 테스트 환경 변수 ---
# foodlink.core.config의 settings는 임포트 시점에 생성되므로, 앱을 임포트하기 전에 설정해야 합니다.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["MASTER_PASSWORD"] = "master-secret"
os.environ["BCRYPT_ROUNDS"] = "4"  # 테스트 속도를 위해 최소 cost 사용
os.environ["APP_ENV"] = "testing"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="foodlink-uploads-")
os.environ.pop("MAILERSEND_API_KEY", None)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

# foodlink.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다 (모든 모델도 함께 등록됨).
from foodlink.main import app as main_app  # noqa: E402
from foodlink.core import dependencies as deps  # noqa: E402
from foodlink.core.database import get_session  # noqa: E402
from foodlink.core.exceptions import NotificationError  # noqa: E402
from foodlink.core.security import CredentialVerifier  # noqa: E402
from foodlink.domains.company import services as company_services  # noqa: E402
from foodlink.services.notifier import InquiryNotification  # noqa: E402
from foodlink.utils.files import LocalBlobStore  # noqa: E402

MASTER_PASSWORD = "master-secret"
OWNER_PASSWORD = "pw1234"


# --- 테스트용 협력자 ---
class FakeNotifier:
    """발송 내역을 기록만 하는 알림 대역. fail=True이면 발송 실패를 흉내냅니다."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[InquiryNotification] = []

    async def send_inquiry_notification(self, details: InquiryNotification) -> None:
        if self.fail:
            raise NotificationError("MailerSend request failed: simulated outage")
        self.sent.append(details)


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    테스트 함수마다 새로운 인메모리 SQLite 데이터베이스를 만들어 테스트 간 격리를 보장합니다.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # 모든 세션이 같은 인메모리 연결을 공유
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        await session.close()
        await engine.dispose()


@pytest.fixture
def verifier() -> CredentialVerifier:
    return CredentialVerifier(MASTER_PASSWORD)


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def blob_store(tmp_path) -> LocalBlobStore:
    return LocalBlobStore(upload_dir=str(tmp_path), url_prefix="/static/uploads", max_size_mb=1)


@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession,
    verifier: CredentialVerifier,
    notifier: FakeNotifier,
    blob_store: LocalBlobStore,
) -> AsyncGenerator[AsyncClient, None]:
    """
    데이터베이스 세션과 외부 협력자(알림, 파일 저장소)를 테스트용으로 교체한 AsyncClient를 반환합니다.
    """
    async def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides.update({
            get_session: override_get_session,
            deps.get_db_session: override_get_session,
            deps.get_credential_verifier: lambda: verifier,
            deps.get_notifier: lambda: notifier,
            deps.get_blob_store: lambda: blob_store,
        })
        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


# --- 데이터 팩토리 ---
@pytest.fixture
def company_payload() -> Callable[..., dict]:
    def _payload(**overrides) -> dict:
        data = {
            "name": "Acme Clinic",
            "password": OWNER_PASSWORD,
            "image_url": "https://cdn.example.com/acme.png",
            "primary_category": ["manufacturing"],
            "secondary_category": ["health"],
            "detail": {
                "phone": "02-1234-5678",
                "email": "contact@acme.example.com",
                "detail_images": ["https://cdn.example.com/acme-1.png"],
                "detail_text": "건강기능식품 OEM/ODM 전문 제조사입니다.",
            },
        }
        data.update(overrides)
        return data
    return _payload


@pytest.fixture
def company_factory(
    db_session: AsyncSession, verifier: CredentialVerifier, company_payload: Callable[..., dict]
) -> Callable[..., Awaitable]:
    """
    서비스 계층으로 파트너사를 생성하고, approve=True이면 승인까지 처리합니다.
    """
    async def _create(approve: bool = False, **overrides):
        created = await company_services.create_company(db_session, payload=company_payload(**overrides))
        if approve:
            created = await company_services.approve_company(
                db_session, company_id=created.id, verifier=verifier, master_password=MASTER_PASSWORD
            )
        return created
    return _create
