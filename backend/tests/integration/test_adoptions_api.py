"""API tests for adoptions and the contact form."""

import pytest
from httpx import AsyncClient


async def _cat(client: AsyncClient, headers: dict, name: str = "Tom") -> int:
    response = await client.post("/api/cats", json={"name": name, "tag": "Tabby"}, headers=headers)
    return response.json()["id"]


@pytest.mark.asyncio
async def test_adopt_list_and_unadopt(client: AsyncClient, login):
    headers = await login("alice")
    cat_id = await _cat(client, headers)

    adopted = await client.post("/api/adoptions", json={"cat_id": cat_id}, headers=headers)
    assert adopted.status_code == 201
    assert adopted.json()["catId"] == cat_id

    listing = await client.get("/api/adoptions", headers=headers)
    adoptions = listing.json()["adoptions"]
    assert [a["id"] for a in adoptions] == [cat_id]
    assert adoptions[0]["adopted_at"]

    removed = await client.delete(f"/api/adoptions/{cat_id}", headers=headers)
    assert removed.status_code == 200
    assert (await client.get("/api/adoptions", headers=headers)).json() == {"adoptions": []}


@pytest.mark.asyncio
async def test_second_adoption_is_409(client: AsyncClient, login):
    headers = await login("alice")
    cat_id = await _cat(client, headers)
    await client.post("/api/adoptions", json={"cat_id": cat_id}, headers=headers)

    response = await client.post("/api/adoptions", json={"cat_id": cat_id}, headers=headers)

    assert response.status_code == 409
    assert response.json() == {"error": "You have already adopted this cat."}


@pytest.mark.asyncio
async def test_adopt_requires_login(client: AsyncClient):
    response = await client.post("/api/adoptions", json={"cat_id": 1})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_adopt_unknown_cat_is_404(client: AsyncClient, login):
    headers = await login("alice")
    response = await client.post("/api/adoptions", json={"cat_id": 777}, headers=headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_unadopt_without_link_is_404(client: AsyncClient, login):
    headers = await login("alice")
    cat_id = await _cat(client, headers)
    response = await client.delete(f"/api/adoptions/{cat_id}", headers=headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_adoption_status_counts_all_users(client: AsyncClient, login):
    alice = await login("alice")
    bob = await login("bob")
    cat_id = await _cat(client, alice)
    await client.post("/api/adoptions", json={"cat_id": cat_id}, headers=alice)
    await client.post("/api/adoptions", json={"cat_id": cat_id}, headers=bob)

    as_alice = await client.get(f"/api/adoptions/cat/{cat_id}", headers=alice)
    anonymous = await client.get(f"/api/adoptions/cat/{cat_id}")

    assert as_alice.json() == {"catId": cat_id, "count": 2, "userAdopted": True}
    assert anonymous.json() == {"catId": cat_id, "count": 2, "userAdopted": False}


@pytest.mark.asyncio
async def test_deleting_cat_removes_its_adoptions(client: AsyncClient, login):
    headers = await login("alice")
    cat_id = await _cat(client, headers)
    await client.post("/api/adoptions", json={"cat_id": cat_id}, headers=headers)

    await client.delete(f"/api/cats/{cat_id}", headers=headers)

    listing = await client.get("/api/adoptions", headers=headers)
    assert listing.json()["adoptions"] == []


@pytest.mark.asyncio
async def test_contact_message(client: AsyncClient):
    response = await client.post(
        "/api/contact",
        json={"name": "Ann", "email": "ann@example.com", "subject": "Hello", "message": "Hi!"},
    )
    assert response.status_code == 201
    assert "message" in response.json()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, error",
    [
        ({"name": "Ann", "email": "ann@example.com"}, "Please fill in all required fields."),
        ({"name": "Ann", "email": "ann", "message": "Hi"}, "Please enter a valid email address."),
    ],
)
async def test_contact_validation(client: AsyncClient, payload, error):
    response = await client.post("/api/contact", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": error}
