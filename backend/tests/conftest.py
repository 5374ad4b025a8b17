import os
import tempfile

# Point the app's own engine at a throwaway database before anything imports settings
_TEST_DIR = tempfile.mkdtemp(prefix="warranty-intake-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/app.db"
os.environ["HUBSPOT_TOKEN"] = ""
os.environ["EMAIL_ENABLED"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from warranty_intake.api.v1.claims.dependencies import (
    get_crm_service,
    get_email_config,
    get_notifier,
    get_sequencer,
)
from warranty_intake.db import create_engine, create_session_maker, init_db
from warranty_intake.main import app
from warranty_intake.services.claims.sequencer import ClaimSequencer
from warranty_intake.services.claims.config import EmailConfig

from fakes import DISABLED_EMAIL, FakeCrm, FakeNotifier


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'claims.db'}"


# Fresh engine per test, tables created, disposed afterwards
@pytest_asyncio.fixture
async def session_maker(database_url: str):
    engine = create_engine(database_url)
    await init_db(engine)
    yield create_session_maker(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def sequencer(session_maker) -> ClaimSequencer:
    return ClaimSequencer(session_maker, name="global", seed=100000)


@pytest.fixture
def fake_crm() -> FakeCrm:
    return FakeCrm()


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def email_config() -> EmailConfig:
    return DISABLED_EMAIL


# Client with the real sequencer on a per-test database and fake integrations
@pytest_asyncio.fixture
async def client(sequencer, fake_crm, fake_notifier, email_config):
    app.dependency_overrides[get_sequencer] = lambda: sequencer
    app.dependency_overrides[get_crm_service] = lambda: fake_crm
    app.dependency_overrides[get_notifier] = lambda: fake_notifier
    app.dependency_overrides[get_email_config] = lambda: email_config

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
