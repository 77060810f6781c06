"""Pytest bootstrap for project imports and shared fixtures."""

from pathlib import Path
import os
import sys

# Ensure project root is on sys.path so `import skillswap_pro` works
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

# Keep the module-level engine off disk and mirroring synchronous
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SYNC_IN_BACKGROUND", "false")
os.environ.setdefault("CREDENTIAL_SCHEME", "plaintext")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from skillswap_pro.database import Base, get_db
from skillswap_pro.fixtures import demo_snapshot
from skillswap_pro.main import app
from skillswap_pro.scripts.seed_demo import seed_demo
from skillswap_pro.services.state import AppContext, AppState
from skillswap_pro.services.sync import RemoteStoreClient


class FixedClock:
    """Deterministic millisecond clock for ids and timestamps."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.value = start

    def __call__(self) -> int:
        self.value += 1
        return self.value


@pytest.fixture
def offline_ctx():
    """Demo-mode context over fresh fixtures, nobody signed in."""
    return AppContext(
        state=AppState.from_snapshot(demo_snapshot()),
        offline=True,
        clock=FixedClock(),
    )


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def seeded_db(db_session):
    seed_demo(db_session)
    return db_session


@pytest.fixture
def store_client(seeded_db):
    """TestClient for the remote store, bound to the seeded database."""

    def override_get_db():
        yield seeded_db

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def remote(store_client):
    return RemoteStoreClient(base_url="http://testserver/api", http_client=store_client)


@pytest.fixture
def online_ctx(remote):
    """Context bootstrapped against the in-process store, mirroring inline."""
    return AppContext.bootstrap(remote, background=False, clock=FixedClock())
