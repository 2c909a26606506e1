# tests/domains/test_banner.py

"""
'banner' 도메인 (홈 배너) 관련 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- `GET /banners` (활성 배너, 표시 순서)
- `GET /banners/all` (마스터 전용, 비활성 포함)
- `POST /banners`, `PATCH /banners/{id}`, `DELETE /banners/{id}` (마스터 전용)
"""

import pytest
from httpx import AsyncClient

from tests.conftest import MASTER_PASSWORD

MASTER = {"X-Master-Password": MASTER_PASSWORD}


async def _create_banner(client: AsyncClient, **overrides) -> dict:
    data = {"image_url": "https://cdn.example.com/banner.png", "display_order": 0, "is_active": True}
    data.update(overrides)
    response = await client.post("/api/v1/banners", json=data, headers=MASTER)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_banner_requires_master(client: AsyncClient):
    print("\n--- Running test_create_banner_requires_master ---")
    data = {"image_url": "https://cdn.example.com/banner.png"}

    response = await client.post("/api/v1/banners", json=data)
    assert response.status_code == 401
    response = await client.post("/api/v1/banners", json=data, headers={"X-Master-Password": "wrong"})
    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_PASSWORD"

    response = await client.post("/api/v1/banners", json=data, headers=MASTER)
    print(f"Response JSON: {response.json()}")
    assert response.status_code == 201
    created = response.json()
    assert created["display_order"] == 0
    assert created["is_active"] is True


@pytest.mark.asyncio
async def test_active_banners_in_display_order(client: AsyncClient):
    third = await _create_banner(client, display_order=3, alt_text="third")
    first = await _create_banner(client, display_order=1, alt_text="first")
    hidden = await _create_banner(client, display_order=0, is_active=False, alt_text="hidden")
    second = await _create_banner(client, display_order=2, alt_text="second")

    response = await client.get("/api/v1/banners")
    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == [first["id"], second["id"], third["id"]]

    response = await client.get("/api/v1/banners/all")
    assert response.status_code == 401
    response = await client.get("/api/v1/banners/all", headers=MASTER)
    assert [b["id"] for b in response.json()] == [hidden["id"], first["id"], second["id"], third["id"]]


@pytest.mark.asyncio
async def test_update_banner(client: AsyncClient):
    banner = await _create_banner(client, link_url="https://foodlink.example.com/event")

    response = await client.patch(
        f"/api/v1/banners/{banner['id']}",
        json={"is_active": False, "image_url": None, "link_url": None},
        headers=MASTER,
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["is_active"] is False
    assert updated["image_url"] == "https://cdn.example.com/banner.png"  # 필수 컬럼은 null로 덮어쓰지 않음
    assert updated["link_url"] is None

    response = await client.get("/api/v1/banners")
    assert response.json() == []


@pytest.mark.asyncio
async def test_banner_validation(client: AsyncClient):
    response = await client.post(
        "/api/v1/banners", json={"image_url": "javascript:alert(1)"}, headers=MASTER
    )
    assert response.status_code == 422
    assert response.json()["detail"].startswith("image_url")

    response = await client.post(
        "/api/v1/banners",
        json={"image_url": "https://cdn.example.com/banner.png", "display_order": -1},
        headers=MASTER,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_banner(client: AsyncClient):
    banner = await _create_banner(client)

    response = await client.delete(f"/api/v1/banners/{banner['id']}")
    assert response.status_code == 401

    response = await client.delete(f"/api/v1/banners/{banner['id']}", headers=MASTER)
    assert response.status_code == 204

    response = await client.get(f"/api/v1/banners/{banner['id']}")
    assert response.status_code == 404
    response = await client.delete(f"/api/v1/banners/{banner['id']}", headers=MASTER)
    assert response.status_code == 404
