# tests/domains/test_company.py

"""
'company' 도메인 (파트너사) 관련 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 공개 목록 마스킹: `GET /companies` (pending/rejected 파트너사는 고정 문구로 대체)
- 카테고리/검색 필터: 한 필터 안의 여러 값은 OR, 승인된 파트너사만 매칭
- 등록/수정/삭제: `POST /companies`, `PATCH /companies/{id}`, `PUT /companies/{id}/detail`, `DELETE /companies/{id}`
- 승인 관리 (마스터 전용): `PATCH /companies/{id}/approval`, `POST .../approve`, `.../reject`, `.../reject-and-delete`
"""

import pytest
from httpx import AsyncClient

from foodlink.domains.company import models as company_models
from foodlink.domains.company import services as company_services

from tests.conftest import MASTER_PASSWORD, OWNER_PASSWORD

MASTER = {"X-Master-Password": MASTER_PASSWORD}
OWNER = {"X-Password": OWNER_PASSWORD}


# --- 마스킹 단위 테스트 ---


@pytest.mark.parametrize(
    "approval_status, expected_name",
    [
        ("pending", "승인 대기중인 파트너"),
        ("rejected", "거부된 파트너"),
        ("unknown", "승인 대기중인 파트너"),
    ],
)
def test_mask_depends_only_on_status(approval_status, expected_name):
    """마스킹 결과는 입력 이름과 무관하게 승인 상태만으로 결정됩니다."""
    for name in ("Acme Clinic", "Another Name"):
        company = company_models.Company(
            id=3, name=name, password_hash="x", image_url="https://cdn.example.com/a.png",
            approval_status=approval_status,
        )
        company.categories = [company_models.CompanyCategory(kind="primary", value="manufacturing")]

        masked = company_services.mask(company)

        assert masked.id == 3
        assert masked.name == expected_name
        assert masked.image_url is None
        assert masked.primary_category == []
        assert masked.secondary_category == []
        assert masked.detail_images == []
        assert masked.phone is None


def test_mask_keeps_approved_company():
    company = company_models.Company(
        id=5, name="Acme Clinic", password_hash="x", approval_status="approved",
    )
    company.categories = [
        company_models.CompanyCategory(kind="primary", value="manufacturing"),
        company_models.CompanyCategory(kind="secondary", value="health"),
    ]

    shown = company_services.mask(company)

    assert shown.name == "Acme Clinic"
    assert shown.primary_category == ["manufacturing"]
    assert shown.secondary_category == ["health"]


# --- 등록 및 공개 목록 ---


@pytest.mark.asyncio
async def test_create_company_starts_pending_and_is_masked(client: AsyncClient, company_payload):
    """
    등록 직후에는 pending 상태이며, 공개 목록에서는 마스킹되고 공개 상세 조회는 404를 반환합니다.
    """
    print("\n--- Running test_create_company_starts_pending_and_is_masked ---")
    payload = company_payload(approval_status="approved")  # 입력된 승인 상태는 무시됨
    response = await client.post("/api/v1/companies", json=payload)
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 201
    created = response.json()
    assert created["approval_status"] == "pending"
    assert created["name"] == "Acme Clinic"
    assert "password" not in created and "password_hash" not in created
    company_id = created["id"]

    response = await client.get("/api/v1/companies")
    assert response.status_code == 200
    body = response.json()
    assert body["pagination"]["totalItems"] == 1
    item = body["items"][0]
    assert item["id"] == company_id
    assert item["name"] == "승인 대기중인 파트너"
    assert item["description"] == "(관리자 승인 대기 중입니다)"
    assert item["image_url"] is None
    assert item["primary_category"] == []

    response = await client.get(f"/api/v1/companies/{company_id}")
    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_approve_reveals_company(client: AsyncClient, company_factory):
    created = await company_factory()

    response = await client.post(f"/api/v1/companies/{created.id}/approve", headers=MASTER)
    assert response.status_code == 200
    assert response.json()["approval_status"] == "approved"

    response = await client.get("/api/v1/companies")
    item = response.json()["items"][0]
    assert item["name"] == "Acme Clinic"
    assert item["primary_category"] == ["manufacturing"]
    assert item["secondary_category"] == ["health"]
    assert item["phone"] == "02-1234-5678"
    assert item["description"] == "건강기능식품 OEM/ODM 전문 제조사입니다."

    response = await client.get(f"/api/v1/companies/{created.id}")
    assert response.status_code == 200
    assert response.json()["email"] == "contact@acme.example.com"


@pytest.mark.asyncio
async def test_create_company_validation(client: AsyncClient, company_payload):
    """카테고리를 하나도 선택하지 않거나 허용되지 않은 값이면 422를 반환합니다."""
    response = await client.post("/api/v1/companies", json=company_payload(primary_category=[]))
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["detail"].startswith("primary_category")

    response = await client.post("/api/v1/companies", json=company_payload(secondary_category=["bakery"]))
    assert response.status_code == 422

    response = await client.post("/api/v1/companies", json=company_payload(name="A"))
    assert response.status_code == 422
    assert response.json()["detail"].startswith("name")


@pytest.mark.asyncio
async def test_list_pagination(client: AsyncClient, company_factory):
    for i in range(3):
        await company_factory(approve=True, name=f"Partner {i}")

    response = await client.get("/api/v1/companies", params={"page": 2, "limit": 2})
    assert response.status_code == 200
    body = response.json()
    assert len(body["items"]) == 1
    assert body["items"][0]["name"] == "Partner 0"  # 최신 등록순
    assert body["pagination"] == {
        "currentPage": 2,
        "totalPages": 2,
        "totalItems": 3,
        "itemsPerPage": 2,
        "hasNextPage": False,
        "hasPreviousPage": True,
    }


# --- 카테고리 / 검색 필터 ---


@pytest.mark.asyncio
async def test_category_filter_matches_any_value(client: AsyncClient, company_factory):
    """
    {A}, {B}, {A,B} 파트너사에 대해 필터 [A]는 2건, [A,B]는 3건을 반환합니다.
    승인되지 않은 파트너사는 필터 결과에 포함되지 않습니다.
    """
    await company_factory(approve=True, name="Only Manufacturing", primary_category=["manufacturing"])
    await company_factory(approve=True, name="Only Packaging", primary_category=["packaging"])
    await company_factory(approve=True, name="Both", primary_category=["manufacturing", "packaging"])
    await company_factory(name="Pending Manufacturing", primary_category=["manufacturing"])

    response = await client.get("/api/v1/companies", params={"primary_category": "manufacturing"})
    names = {item["name"] for item in response.json()["items"]}
    assert names == {"Only Manufacturing", "Both"}

    response = await client.get(
        "/api/v1/companies",
        params=[("primary_category", "manufacturing"), ("primary_category", "packaging")],
    )
    body = response.json()
    assert body["pagination"]["totalItems"] == 3
    assert {item["name"] for item in body["items"]} == {"Only Manufacturing", "Only Packaging", "Both"}

    # "all"은 필터 없음으로 취급 (마스킹된 pending 항목 포함)
    response = await client.get("/api/v1/companies", params={"primary_category": "all"})
    assert response.json()["pagination"]["totalItems"] == 4


@pytest.mark.asyncio
async def test_filters_combine_with_and(client: AsyncClient, company_factory):
    await company_factory(
        approve=True, name="Health Maker", primary_category=["manufacturing"], secondary_category=["health"]
    )
    await company_factory(
        approve=True, name="Drink Maker", primary_category=["manufacturing"], secondary_category=["beverage"]
    )

    response = await client.get(
        "/api/v1/companies", params={"primary_category": "manufacturing", "secondary_category": "beverage"}
    )
    assert [item["name"] for item in response.json()["items"]] == ["Drink Maker"]


@pytest.mark.asyncio
async def test_search_by_name(client: AsyncClient, company_factory):
    await company_factory(approve=True, name="Acme Clinic")
    await company_factory(approve=True, name="Beta Foods")
    await company_factory(name="Acme Pending")

    response = await client.get("/api/v1/companies", params={"search": "acme"})
    items = response.json()["items"]
    assert [item["name"] for item in items] == ["Acme Clinic"]

    response = await client.get("/api/v1/companies", params={"search": "100%"})
    assert response.json()["items"] == []


# --- 비밀번호 확인 / 수정 / 삭제 ---


@pytest.mark.asyncio
async def test_owner_and_master_can_manage(client: AsyncClient, company_factory):
    created = await company_factory()

    response = await client.post(f"/api/v1/companies/{created.id}/verify-password", headers=OWNER)
    assert response.status_code == 200
    assert response.json() == {"verified": True}

    response = await client.post(
        f"/api/v1/companies/{created.id}/verify-password", headers={"X-Password": MASTER_PASSWORD}
    )
    assert response.status_code == 200

    response = await client.post(f"/api/v1/companies/{created.id}/verify-password", headers={"X-Password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid password.", "error": "INVALID_PASSWORD"}

    # 승인 전이라도 소유자는 전체 정보를 볼 수 있음
    response = await client.get(f"/api/v1/companies/{created.id}/manage", headers=OWNER)
    assert response.status_code == 200
    assert response.json()["name"] == "Acme Clinic"


@pytest.mark.asyncio
async def test_update_company_round_trip(client: AsyncClient, company_factory):
    created = await company_factory(approve=True)

    response = await client.patch(
        f"/api/v1/companies/{created.id}",
        json={"name": "  Acme Labs  ", "primary_category": ["analysis", "analysis"]},
        headers=OWNER,
    )
    print(f"Response JSON: {response.json()}")
    assert response.status_code == 200
    updated = response.json()
    assert updated["name"] == "Acme Labs"
    assert updated["primary_category"] == ["analysis"]
    assert updated["secondary_category"] == ["health"]  # 전달하지 않은 필드는 유지
    assert updated["approval_status"] == "approved"

    response = await client.get(f"/api/v1/companies/{created.id}")
    assert response.json()["name"] == "Acme Labs"


@pytest.mark.asyncio
async def test_update_company_rotates_password(client: AsyncClient, company_factory):
    created = await company_factory()

    response = await client.patch(
        f"/api/v1/companies/{created.id}", json={"password": "new-secret"}, headers=OWNER
    )
    assert response.status_code == 200

    response = await client.post(f"/api/v1/companies/{created.id}/verify-password", headers=OWNER)
    assert response.status_code == 401
    response = await client.post(
        f"/api/v1/companies/{created.id}/verify-password", headers={"X-Password": "new-secret"}
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_update_company_requires_password(client: AsyncClient, company_factory):
    created = await company_factory()

    response = await client.patch(f"/api/v1/companies/{created.id}", json={"name": "Hijacked"})
    assert response.status_code == 401

    response = await client.get(f"/api/v1/companies/{created.id}/manage", headers=OWNER)
    assert response.json()["name"] == "Acme Clinic"


@pytest.mark.asyncio
async def test_upsert_company_detail(client: AsyncClient, company_factory):
    created = await company_factory(detail=None)
    assert created.phone is None

    detail = {
        "phone": "031-555-0000",
        "email": "hello@acme.example.com",
        "detail_images": ["/static/uploads/companies/a.png"],
        "detail_text": "소개글",
    }
    response = await client.put(f"/api/v1/companies/{created.id}/detail", json=detail, headers=OWNER)
    assert response.status_code == 200
    body = response.json()
    assert body["phone"] == "031-555-0000"
    assert body["detail_images"] == ["/static/uploads/companies/a.png"]
    assert body["description"] == "소개글"

    response = await client.put(
        f"/api/v1/companies/{created.id}/detail", json={"detail_text": "수정된 소개글"}, headers=OWNER
    )
    body = response.json()
    assert body["detail_text"] == "수정된 소개글"
    assert body["phone"] == "031-555-0000"

    response = await client.put(
        f"/api/v1/companies/{created.id}/detail", json={"phone": "call me maybe"}, headers=OWNER
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_company(client: AsyncClient, company_factory):
    """잘못된 비밀번호로는 삭제되지 않고, 올바른 비밀번호로 삭제하면 이후 조회는 404입니다."""
    created = await company_factory(approve=True)

    response = await client.delete(f"/api/v1/companies/{created.id}", headers={"X-Password": "wrong"})
    assert response.status_code == 401
    response = await client.get(f"/api/v1/companies/{created.id}")
    assert response.status_code == 200

    response = await client.delete(f"/api/v1/companies/{created.id}", headers=OWNER)
    assert response.status_code == 204

    response = await client.get(f"/api/v1/companies/{created.id}")
    assert response.status_code == 404
    response = await client.get(f"/api/v1/companies/{created.id}/manage", headers=OWNER)
    assert response.status_code == 404

    response = await client.delete("/api/v1/companies/9999", headers=OWNER)
    assert response.status_code == 404


# --- 승인 관리 ---


@pytest.mark.asyncio
async def test_pending_list_requires_master(client: AsyncClient, company_factory):
    pending = await company_factory(name="Waiting Co")
    await company_factory(approve=True, name="Approved Co")

    response = await client.get("/api/v1/companies/pending")
    assert response.status_code == 401

    response = await client.get("/api/v1/companies/pending", headers=MASTER)
    assert response.status_code == 200
    items = response.json()
    assert [item["id"] for item in items] == [pending.id]
    assert items[0]["name"] == "승인 대기중인 파트너"


@pytest.mark.asyncio
async def test_approval_is_idempotent(client: AsyncClient, company_factory):
    """같은 상태로의 변경 요청은 아무것도 바꾸지 않습니다 (updated_at 포함)."""
    created = await company_factory()
    url = f"/api/v1/companies/{created.id}/approval"

    first = await client.patch(url, json={"approval_status": "approved"}, headers=MASTER)
    assert first.status_code == 200
    second = await client.patch(url, json={"approval_status": "approved"}, headers=MASTER)
    assert second.status_code == 200

    assert first.json()["approval_status"] == second.json()["approval_status"] == "approved"
    assert first.json()["updated_at"] == second.json()["updated_at"]


@pytest.mark.asyncio
async def test_approval_requires_master(client: AsyncClient, company_factory):
    created = await company_factory()
    url = f"/api/v1/companies/{created.id}/approval"

    response = await client.patch(url, json={"approval_status": "approved"}, headers=OWNER)
    assert response.status_code == 401
    response = await client.patch(
        url, json={"approval_status": "approved"}, headers={"X-Master-Password": "guess"}
    )
    assert response.status_code == 401
    response = await client.patch(url, json={"approval_status": "published"}, headers=MASTER)
    assert response.status_code == 422

    response = await client.get(f"/api/v1/companies/{created.id}/manage", headers=OWNER)
    assert response.json()["approval_status"] == "pending"


@pytest.mark.asyncio
async def test_reject_keeps_record(client: AsyncClient, company_factory):
    created = await company_factory()

    response = await client.post(f"/api/v1/companies/{created.id}/reject", headers=MASTER)
    assert response.status_code == 200
    assert response.json()["approval_status"] == "rejected"

    response = await client.get("/api/v1/companies")
    item = response.json()["items"][0]
    assert item["name"] == "거부된 파트너"
    assert item["description"] == "(관리자가 거부한 파트너사입니다)"

    # 거부된 파트너사는 승인 대기 목록에서 빠짐
    response = await client.get("/api/v1/companies/pending", headers=MASTER)
    assert response.json() == []

    response = await client.get(f"/api/v1/companies/{created.id}/manage", headers=OWNER)
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_reject_and_delete(client: AsyncClient, company_factory):
    created = await company_factory()

    response = await client.post(f"/api/v1/companies/{created.id}/reject-and-delete", headers=OWNER)
    assert response.status_code == 401

    response = await client.post(f"/api/v1/companies/{created.id}/reject-and-delete", headers=MASTER)
    assert response.status_code == 204

    response = await client.get(f"/api/v1/companies/{created.id}/manage", headers=OWNER)
    assert response.status_code == 404
    response = await client.get("/api/v1/companies")
    assert response.json()["items"] == []
