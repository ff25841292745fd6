import os

# Configure before any homehelp module reads the environment
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_LOG_SLOW_QUERIES", "false")
os.environ.setdefault("AUTO_REPLY_ENABLED", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from homehelp.database import Base, get_db  # noqa: E402
from homehelp.domain.messages.auto_reply import AutoReplyScheduler, get_auto_reply_scheduler  # noqa: E402
from homehelp.main import app  # noqa: E402
from homehelp.seed import seed_catalog  # noqa: E402


class RecordingScheduler(AutoReplyScheduler):
    """Records auto-reply requests instead of talking to Redis"""

    def __init__(self):
        super().__init__(enabled=True, delay_seconds=0)
        self.calls = []

    async def schedule(self, user_id: int, provider_id: int):
        self.calls.append((user_id, provider_id))
        return f"job-{len(self.calls)}"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seeded(db_session):
    seed_catalog(db_session)
    return db_session


@pytest.fixture
def auto_reply():
    return RecordingScheduler()


@pytest.fixture
def client(session_factory, auto_reply):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_auto_reply_scheduler] = lambda: auto_reply
    # No context manager: the lifespan would touch the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_user(client, username, password="correct-horse"):
    """Register a user and return (user id, auth headers)"""
    response = client.post("/api/register", json={"username": username, "password": password})
    assert response.status_code == 201, response.text
    body = response.json()
    return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture
def alice(client):
    return register_user(client, "alice")


@pytest.fixture
def bob(client):
    return register_user(client, "bob")
