"""
Tests for the city, comment and like CRUD operations.
"""

import pytest
from sqlalchemy import func, select

from ourimpact.core.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from ourimpact.crud.city import city as crud_city
from ourimpact.crud.comment import comment as crud_comment
from ourimpact.crud.like import like as crud_like
from ourimpact.models.like import Like
from ourimpact.schemas.city import City


# City Tests
@pytest.mark.asyncio
async def test_get_all_cities(db, seed):
    cities = await crud_city.get_all(db)

    assert [c.name for c in cities] == ["Paris", "Dallas", "London"]


@pytest.mark.asyncio
async def test_get_city_is_repeatable(db, seed):
    """Reading the same city twice gives the same answer."""
    first = await crud_city.get_by_name(db, "Dallas")
    second = await crud_city.get_by_name(db, "Dallas")

    assert (first.name, first.country_code, first.latitude, first.longitude) == (
        second.name, second.country_code, second.latitude, second.longitude,
    )
    assert first.country_code == "US"


@pytest.mark.asyncio
async def test_get_unknown_city(db, seed):
    with pytest.raises(NotFoundError) as exc_info:
        await crud_city.get_by_name(db, "Nowhereville")

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_duplicate_city_is_a_bad_request(db, seed):
    """Store constraint errors reach the client without driver details."""
    with pytest.raises(BadRequestError) as exc_info:
        await crud_city.create(
            db, obj_in=City(name="Paris", country_code="FR", latitude=48.85, longitude=2.35)
        )

    assert exc_info.value.message == "Constraint violation"


@pytest.mark.asyncio
async def test_city_with_comments(db, seed):
    city_data = await crud_city.get_with_comments(db, "Paris")

    assert city_data.name == "Paris"
    assert len(city_data.comments) == 1
    assert city_data.comments[0].comment == "Lovely in the spring"
    assert city_data.comments[0].likes == 0


@pytest.mark.asyncio
async def test_city_with_comments_unknown_city(db, seed):
    with pytest.raises(NotFoundError):
        await crud_city.get_with_comments(db, "Nowhereville")


@pytest.mark.asyncio
async def test_city_without_comments(db, seed):
    city_data = await crud_city.get_with_comments(db, "London")

    assert city_data.comments == []


# Add comment Tests
@pytest.mark.asyncio
async def test_add_comment(db, seed):
    new_comment = await crud_city.add_comment(
        db, comment_text="Great tacos", author="alice", city_name="Dallas"
    )

    assert new_comment.id is not None
    assert new_comment.comment == "Great tacos"
    assert new_comment.username == "alice"
    assert new_comment.city_name == "Dallas"
    assert new_comment.likes == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("author", ["alice", "ghost"])
async def test_add_comment_unknown_city(db, seed, author):
    """An unknown city is rejected whether or not the author exists."""
    with pytest.raises(BadRequestError) as exc_info:
        await crud_city.add_comment(db, comment_text="hi", author=author, city_name="Atlantis")

    assert "Atlantis" in exc_info.value.message


@pytest.mark.asyncio
async def test_add_comment_unknown_author(db, seed):
    with pytest.raises(BadRequestError) as exc_info:
        await crud_city.add_comment(db, comment_text="hi", author="ghost", city_name="Paris")

    assert "ghost" in exc_info.value.message


# Like aggregation Tests
@pytest.mark.asyncio
async def test_like_count_agrees_on_every_read_path(db, seed):
    """A comment with N like rows reports N everywhere it is read."""
    comment_id = seed.bob_comment_id
    for liker in ("alice", "admin", "alice"):
        await crud_comment.add_like(db, comment_id=comment_id, from_username=liker)

    by_id = await crud_comment.get_with_likes(db, comment_id)
    for_user = await crud_comment.get_for_user(db, "bob", comment_id)
    user_list = await crud_comment.list_for_user(db, "bob")
    city_list = await crud_comment.list_for_city(db, "Dallas")
    city_data = await crud_city.get_with_comments(db, "Dallas")

    assert by_id.likes == 3
    assert for_user.likes == 3
    assert [c.likes for c in user_list if c.id == comment_id] == [3]
    assert [c.likes for c in city_list if c.id == comment_id] == [3]
    assert [c.likes for c in city_data.comments if c.id == comment_id] == [3]


@pytest.mark.asyncio
async def test_comments_ordered_by_likes_then_id(db, seed):
    first = await crud_city.add_comment(db, comment_text="one", author="alice", city_name="London")
    second = await crud_city.add_comment(db, comment_text="two", author="bob", city_name="London")
    third = await crud_city.add_comment(db, comment_text="three", author="alice", city_name="London")

    await crud_comment.add_like(db, comment_id=third.id, from_username="bob")

    comments = await crud_comment.list_for_city(db, "London")

    assert [c.id for c in comments] == [third.id, first.id, second.id]


@pytest.mark.asyncio
async def test_add_like(db, seed):
    new_like = await crud_comment.add_like(db, comment_id=seed.bob_comment_id, from_username="alice")

    assert new_like.comment_id == seed.bob_comment_id
    assert new_like.likes == 1

    stored = (await db.execute(select(Like))).scalars().all()
    assert len(stored) == 1
    # The liked comment's author is copied onto the like
    assert stored[0].username == "bob"
    assert stored[0].from_username == "alice"


@pytest.mark.asyncio
async def test_duplicate_likes_are_counted(db, seed):
    await crud_comment.add_like(db, comment_id=seed.bob_comment_id, from_username="alice")
    again = await crud_comment.add_like(db, comment_id=seed.bob_comment_id, from_username="alice")

    assert again.likes == 2


@pytest.mark.asyncio
async def test_add_like_unknown_comment(db, seed):
    with pytest.raises(NotFoundError):
        await crud_comment.add_like(db, comment_id=9999, from_username="alice")


@pytest.mark.asyncio
async def test_add_like_from_unknown_user(db, seed):
    with pytest.raises(UnauthorizedError):
        await crud_comment.add_like(db, comment_id=seed.bob_comment_id, from_username="ghost")

    assert await crud_comment.count_likes(db, seed.bob_comment_id) == 0


@pytest.mark.asyncio
async def test_remove_likes_removes_all(db, seed):
    for liker in ("alice", "admin"):
        await crud_comment.add_like(db, comment_id=seed.bob_comment_id, from_username=liker)
    await crud_comment.add_like(db, comment_id=seed.alice_comment_id, from_username="bob")

    removed = await crud_comment.remove_likes(db, comment_id=seed.bob_comment_id)

    assert removed == seed.bob_comment_id
    assert (await crud_comment.get_with_likes(db, seed.bob_comment_id)).likes == 0
    # Likes on other comments are untouched
    assert (await crud_comment.get_with_likes(db, seed.alice_comment_id)).likes == 1


@pytest.mark.asyncio
async def test_remove_likes_without_likes(db, seed):
    with pytest.raises(NotFoundError):
        await crud_comment.remove_likes(db, comment_id=seed.bob_comment_id)


# Comment reads Tests
@pytest.mark.asyncio
async def test_get_comment_unknown_id(db, seed):
    with pytest.raises(NotFoundError):
        await crud_comment.get_with_likes(db, 9999)


@pytest.mark.asyncio
async def test_get_for_user_checks_user_first(db, seed):
    with pytest.raises(NotFoundError) as exc_info:
        await crud_comment.get_for_user(db, "ghost", 9999)

    assert "ghost" in exc_info.value.message

    with pytest.raises(NotFoundError) as exc_info:
        await crud_comment.get_for_user(db, "alice", 9999)

    assert "Comment" in exc_info.value.message


@pytest.mark.asyncio
async def test_list_for_unknown_user(db, seed):
    with pytest.raises(NotFoundError):
        await crud_comment.list_for_user(db, "ghost")


# Comment mutation Tests
@pytest.mark.asyncio
async def test_update_comment(db, seed):
    updated = await crud_city.update_comment(
        db, id=seed.alice_comment_id, data={"commentText": "Lovely all year"}
    )

    assert updated == "Lovely all year"
    assert (await crud_comment.get_with_likes(db, seed.alice_comment_id)).comment == "Lovely all year"


@pytest.mark.asyncio
async def test_update_comment_empty_payload(db, seed):
    with pytest.raises(BadRequestError) as exc_info:
        await crud_comment.update(db, id=seed.alice_comment_id, data={})

    assert exc_info.value.message == "No data"


@pytest.mark.asyncio
async def test_update_comment_empty_payload_checked_before_existence(db, seed):
    """An empty payload is a 400 even for a comment that does not exist."""
    with pytest.raises(BadRequestError):
        await crud_comment.update(db, id=9999, data={})


@pytest.mark.asyncio
async def test_update_unknown_comment(db, seed):
    with pytest.raises(NotFoundError):
        await crud_comment.update(db, id=9999, data={"commentText": "x"})


@pytest.mark.asyncio
async def test_update_comment_by_other_author(db, seed):
    with pytest.raises(NotFoundError):
        await crud_comment.update(db, id=seed.alice_comment_id, data={"commentText": "x"}, author="bob")

    assert (await crud_comment.get_with_likes(db, seed.alice_comment_id)).comment == "Lovely in the spring"


@pytest.mark.asyncio
async def test_delete_comment_removes_its_likes(db, seed):
    await crud_comment.add_like(db, comment_id=seed.bob_comment_id, from_username="alice")

    deleted = await crud_city.delete_comment(db, id=seed.bob_comment_id)

    assert deleted == seed.bob_comment_id
    with pytest.raises(NotFoundError):
        await crud_comment.get_with_likes(db, seed.bob_comment_id)
    count = await db.execute(select(func.count(Like.id)).where(Like.comment_id == seed.bob_comment_id))
    assert count.scalar_one() == 0


@pytest.mark.asyncio
async def test_delete_comment_twice(db, seed):
    await crud_comment.remove(db, id=seed.alice_comment_id, author="alice")

    with pytest.raises(NotFoundError):
        await crud_comment.remove(db, id=seed.alice_comment_id, author="alice")


@pytest.mark.asyncio
async def test_delete_comment_by_other_author(db, seed):
    with pytest.raises(NotFoundError):
        await crud_comment.remove(db, id=seed.alice_comment_id, author="bob")


# Like projection Tests
@pytest.mark.asyncio
async def test_like_projections(db, seed):
    await crud_comment.add_like(db, comment_id=seed.bob_comment_id, from_username="alice")
    await crud_comment.add_like(db, comment_id=seed.alice_comment_id, from_username="bob")

    all_likes = await crud_like.get_all(db)
    alice_likes = await crud_like.get_for_user(db, "alice")

    assert len(all_likes) == 2
    assert [(row.comment_id, row.from_username) for row in alice_likes] == [(seed.bob_comment_id, "alice")]


@pytest.mark.asyncio
async def test_likes_for_unknown_user(db, seed):
    with pytest.raises(NotFoundError):
        await crud_like.get_for_user(db, "ghost")
