"""
Tests for the /comments routes, including the end-to-end comment and
like lifecycle.
"""

import pytest


@pytest.mark.asyncio
async def test_comment_like_lifecycle(client, seed, alice_headers, bob_headers):
    """Add a comment, like it, remove the likes, read it back."""
    response = await client.post(
        "/cities/Dallas/comments/new",
        json={"commentText": "nice city!", "author": "alice"},
        headers=alice_headers,
    )
    comment_id = response.json()["comment"]["id"]
    assert response.json()["comment"]["likes"] == 0

    response = await client.post(f"/comments/{comment_id}/add", headers=bob_headers)
    assert response.status_code == 201
    assert response.json() == {"newLike": {"commentId": comment_id, "likes": 1}}

    response = await client.delete(f"/comments/{comment_id}/remove", headers=bob_headers)
    assert response.status_code == 200
    assert response.json() == {"removedLike": comment_id}

    response = await client.get(f"/comments/alice/{comment_id}", headers=alice_headers)
    assert response.status_code == 200
    assert response.json()["comment"]["likes"] == 0


@pytest.mark.asyncio
async def test_like_count_on_every_route(client, seed, alice_headers, bob_headers, admin_headers):
    comment_id = seed.bob_comment_id
    for headers in (alice_headers, admin_headers):
        await client.post(f"/comments/{comment_id}/add", headers=headers)

    by_id = await client.get(f"/comments/{comment_id}", headers=alice_headers)
    city_scoped = await client.get(f"/cities/Dallas/comments/{comment_id}", headers=alice_headers)
    user_scoped = await client.get(f"/comments/bob/{comment_id}", headers=bob_headers)
    user_all = await client.get("/comments/bob/all", headers=bob_headers)
    city_data = await client.get("/cities/Dallas/comments", headers=alice_headers)

    assert by_id.json()["comment"]["likes"] == 2
    assert city_scoped.json()["comment"]["likes"] == 2
    assert user_scoped.json()["comment"]["likes"] == 2
    assert user_all.json()["comments"][0]["likes"] == 2
    assert city_data.json()["cityData"]["comments"][0]["likes"] == 2


@pytest.mark.asyncio
async def test_get_comment_needs_login(client, seed):
    response = await client.get(f"/comments/{seed.alice_comment_id}")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_invalid_token_is_anonymous(client, seed):
    response = await client.get(
        f"/comments/{seed.alice_comment_id}", headers={"Authorization": "Bearer garbage"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_like_unknown_comment(client, seed, alice_headers):
    response = await client.post("/comments/9999/add", headers=alice_headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_remove_likes_when_none(client, seed, alice_headers):
    response = await client.delete(f"/comments/{seed.alice_comment_id}/remove", headers=alice_headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_user_comments(client, seed, alice_headers, admin_headers):
    response = await client.get("/comments/alice/all", headers=alice_headers)

    assert response.status_code == 200
    assert [c["id"] for c in response.json()["comments"]] == [seed.alice_comment_id]

    response = await client.get("/comments/ghost/all", headers=admin_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_user_comments_not_owner(client, seed, bob_headers):
    response = await client.get("/comments/alice/all", headers=bob_headers)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_single_user_comment_unknown(client, seed, alice_headers, admin_headers):
    response = await client.get("/comments/alice/9999", headers=alice_headers)
    assert response.status_code == 404

    response = await client.get(f"/comments/ghost/{seed.alice_comment_id}", headers=admin_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_user_comment(client, seed, alice_headers):
    response = await client.patch(
        f"/comments/alice/{seed.alice_comment_id}",
        json={"commentText": "Even better in June"},
        headers=alice_headers,
    )

    assert response.status_code == 200
    assert response.json() == {"updated": "Even better in June"}


@pytest.mark.asyncio
async def test_update_user_comment_empty_payload(client, seed, alice_headers):
    response = await client.patch(f"/comments/alice/{seed.alice_comment_id}", json={}, headers=alice_headers)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_user_comment_unknown_field(client, seed, alice_headers):
    response = await client.patch(
        f"/comments/alice/{seed.alice_comment_id}",
        json={"commentText": "x", "username": "bob"},
        headers=alice_headers,
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_other_users_comment(client, seed, alice_headers, bob_headers):
    """A non-owner gets 401; the owner can delete; afterwards it is gone."""
    url = f"/comments/alice/{seed.alice_comment_id}"

    response = await client.delete(url, headers=bob_headers)
    assert response.status_code == 401

    response = await client.delete(url, headers=alice_headers)
    assert response.status_code == 200
    assert response.json() == {"deleted": seed.alice_comment_id}

    response = await client.get(url, headers=alice_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_admin_deletes_any_comment(client, seed, admin_headers):
    response = await client.delete(f"/comments/bob/{seed.bob_comment_id}", headers=admin_headers)

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_like_from_deleted_account(client, seed, alice_headers):
    """A still-valid token for a removed user cannot like anything."""
    response = await client.delete("/users/alice", headers=alice_headers)
    assert response.status_code == 200

    response = await client.post(f"/comments/{seed.bob_comment_id}/add", headers=alice_headers)

    assert response.status_code == 401
    assert response.json() == {"error": {"message": "Unauthorized", "status": 401}}
