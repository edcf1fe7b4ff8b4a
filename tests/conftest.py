"""
Shared test fixtures.

Settings are read from the environment when `ourimpact` is first
imported, so the overrides below must run before any ourimpact import.
"""

import os
import tempfile
from pathlib import Path
from types import SimpleNamespace

TEST_DB_PATH = Path(__file__).parent / "test_ourimpact.db"
TEST_DATABASE_URL = f"sqlite+aiosqlite:///{TEST_DB_PATH}"

os.environ["SQLALCHEMY_DATABASE_URI"] = TEST_DATABASE_URL
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["BCRYPT_WORK_FACTOR"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["WEATHER_JOB_ENABLED"] = "false"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="ourimpact-logs-")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from ourimpact.crud.city import city as crud_city  # noqa: E402
from ourimpact.crud.user import user as crud_user  # noqa: E402
from ourimpact.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from ourimpact.main import app  # noqa: E402
from ourimpact.models.city import City  # noqa: E402
from ourimpact.schemas.user import UserCreate  # noqa: E402
from ourimpact.utils.security import create_access_token  # noqa: E402

# Create async engine for testing
engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

TEST_CITIES = [
    {"name": "Paris", "country_code": "FR", "latitude": 48.8588897, "longitude": 2.3200410217200766},
    {"name": "Dallas", "country_code": "US", "latitude": 32.7762719, "longitude": -96.7968559},
    {"name": "London", "country_code": "GB", "latitude": 51.5073219, "longitude": -0.1276474},
]

PASSWORD = "secret123"


def make_user(username: str, **overrides) -> UserCreate:
    data = {
        "username": username,
        "password": PASSWORD,
        "first_name": username.title(),
        "last_name": "Tester",
        "email": f"{username}@example.com",
        "user_city": "Paris",
    }
    data.update(overrides)
    return UserCreate(**data)


def auth_header(username: str, is_admin: bool = False) -> dict:
    return {"Authorization": f"Bearer {create_access_token(username, is_admin)}"}


@pytest.fixture
async def db():
    """Create test database."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestingSessionLocal() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def seed(db):
    """
    Three cities, two users and an admin, and one comment each by
    alice (Paris) and bob (Dallas).
    """
    db.add_all([City(**data) for data in TEST_CITIES])
    await db.commit()

    await crud_user.register(db, obj_in=make_user("alice"))
    await crud_user.register(db, obj_in=make_user("bob", user_city="Dallas"))
    await crud_user.register_admin(db, obj_in=make_user("admin", user_city=None))

    alice_comment = await crud_city.add_comment(
        db, comment_text="Lovely in the spring", author="alice", city_name="Paris"
    )
    bob_comment = await crud_city.add_comment(
        db, comment_text="nice city!", author="bob", city_name="Dallas"
    )
    return SimpleNamespace(alice_comment_id=alice_comment.id, bob_comment_id=bob_comment.id)


@pytest.fixture
async def client(db):
    """HTTP client bound to the app, using the test database."""

    async def override_get_db():
        async with TestingSessionLocal() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def alice_headers():
    return auth_header("alice")


@pytest.fixture
def bob_headers():
    return auth_header("bob")


@pytest.fixture
def admin_headers():
    return auth_header("admin", is_admin=True)
