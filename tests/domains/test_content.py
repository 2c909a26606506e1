# tests/domains/test_content.py

"""
'content' 도메인 (콘텐츠 게시판) 관련 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- `POST /contents` (마스터 전용 작성, 게시글 비밀번호 선택)
- `GET /contents` (고정 글 우선 + 최신순, HTML 제거 미리보기, 검색)
- `GET /contents/{id}` (조회수 증가)
- `POST /contents/{id}/verify-password`, `PATCH /contents/{id}`, `DELETE /contents/{id}`
"""

from datetime import datetime, timedelta, UTC

import pytest
from httpx import AsyncClient

from foodlink.domains.content.models import Content

from tests.conftest import MASTER_PASSWORD

MASTER = {"X-Master-Password": MASTER_PASSWORD}


async def _create_content(client: AsyncClient, **overrides) -> dict:
    data = {
        "title": "식품 포장 트렌드",
        "content": "<p>올해의 <strong>식품 포장</strong> 트렌드를 정리했습니다.</p>",
        "is_pinned": False,
    }
    data.update(overrides)
    response = await client.post("/api/v1/contents", json=data, headers=MASTER)
    assert response.status_code == 201, response.text
    return response.json()


def test_is_new_badge():
    """생성 후 24시간 이내인 글만 NEW로 표시합니다. 타임존 정보가 없는 값은 UTC로 간주합니다."""
    now = datetime.now(UTC)
    assert Content(title="t", content="c" * 10, created_at=now - timedelta(hours=1)).is_new(now) is True
    assert Content(title="t", content="c" * 10, created_at=now - timedelta(hours=25)).is_new(now) is False

    naive = (now - timedelta(hours=2)).replace(tzinfo=None)
    assert Content(title="t", content="c" * 10, created_at=naive).is_new(now) is True


@pytest.mark.asyncio
async def test_create_content_requires_master(client: AsyncClient):
    print("\n--- Running test_create_content_requires_master ---")
    data = {"title": "공지사항", "content": "마스터만 작성할 수 있는 글입니다."}

    response = await client.post("/api/v1/contents", json=data)
    assert response.status_code == 401

    response = await client.post("/api/v1/contents", json=data, headers=MASTER)
    print(f"Response JSON: {response.json()}")
    assert response.status_code == 201
    created = response.json()
    assert created["view_count"] == 0
    assert created["is_new"] is True
    assert created["has_password"] is False
    assert "password_hash" not in created


@pytest.mark.asyncio
async def test_content_validation(client: AsyncClient):
    response = await client.post(
        "/api/v1/contents", json={"title": "제목", "content": "짧은 글"}, headers=MASTER
    )
    assert response.status_code == 422
    assert response.json()["detail"].startswith("content")

    response = await client.post(
        "/api/v1/contents",
        json={"title": "제목", "content": "충분히 긴 본문입니다.", "image_urls": ["ftp://x/a.png"]},
        headers=MASTER,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_pinned_first_with_excerpt(client: AsyncClient):
    oldest = await _create_content(client, title="첫 번째 글")
    pinned = await _create_content(client, title="고정 공지", is_pinned=True)
    newest = await _create_content(client, title="세 번째 글")

    response = await client.get("/api/v1/contents")
    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body["items"]] == [pinned["id"], newest["id"], oldest["id"]]
    assert body["pagination"]["totalItems"] == 3

    item = body["items"][0]
    assert item["excerpt"] == "올해의 식품 포장 트렌드를 정리했습니다."
    assert "content" not in item
    assert item["is_new"] is True


@pytest.mark.asyncio
async def test_search_title_and_body(client: AsyncClient):
    await _create_content(client, title="HACCP 인증 가이드", content="<p>인증 절차를 안내합니다. 서류 목록 포함.</p>")
    await _create_content(client, title="물류 이야기", content="<p>콜드체인 haccp 관리 방법을 소개합니다.</p>")
    await _create_content(client, title="무관한 글", content="<p>전혀 관련 없는 내용입니다.</p>")

    response = await client.get("/api/v1/contents", params={"search": "haccp"})
    titles = {item["title"] for item in response.json()["items"]}
    assert titles == {"HACCP 인증 가이드", "물류 이야기"}


@pytest.mark.asyncio
async def test_read_content_increments_view_count(client: AsyncClient):
    created = await _create_content(client)

    first = await client.get(f"/api/v1/contents/{created['id']}")
    assert first.status_code == 200
    assert first.json()["view_count"] == 1
    assert first.json()["content"].startswith("<p>")

    second = await client.get(f"/api/v1/contents/{created['id']}")
    assert second.json()["view_count"] == 2

    response = await client.get("/api/v1/contents/9999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_author_password_allows_edit(client: AsyncClient):
    """게시글 비밀번호가 있으면 작성자가 그 비밀번호로 수정/삭제할 수 있습니다."""
    created = await _create_content(client, password="author-pw")
    assert created["has_password"] is True
    content_id = created["id"]

    response = await client.post(
        f"/api/v1/contents/{content_id}/verify-password", headers={"X-Password": "author-pw"}
    )
    assert response.json() == {"verified": True}

    response = await client.patch(
        f"/api/v1/contents/{content_id}", json={"title": "수정된 제목"}, headers={"X-Password": "wrong"}
    )
    assert response.status_code == 401

    response = await client.patch(
        f"/api/v1/contents/{content_id}",
        json={"title": "수정된 제목", "is_pinned": True},
        headers={"X-Password": "author-pw"},
    )
    assert response.status_code == 200
    assert response.json()["title"] == "수정된 제목"
    assert response.json()["is_pinned"] is True

    response = await client.delete(f"/api/v1/contents/{content_id}", headers={"X-Password": "author-pw"})
    assert response.status_code == 204
    response = await client.get(f"/api/v1/contents/{content_id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_content_without_password_is_master_only(client: AsyncClient):
    created = await _create_content(client)
    content_id = created["id"]

    response = await client.patch(
        f"/api/v1/contents/{content_id}", json={"title": "바꿔보기"}, headers={"X-Password": "anything"}
    )
    assert response.status_code == 401

    response = await client.patch(
        f"/api/v1/contents/{content_id}", json={"title": "관리자 수정"}, headers={"X-Password": MASTER_PASSWORD}
    )
    assert response.status_code == 200
    assert response.json()["title"] == "관리자 수정"
