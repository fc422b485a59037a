import os

os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient

from leadcapture.config.settings import Settings
from leadcapture.errors import StoreWriteError
from leadcapture.main import create_app


class FakeLeadStore:
    """Keeps inserted rows in memory; ``fail_with`` makes the next inserts raise"""

    def __init__(self, fail_with=None):
        self.rows = []
        self.fail_with = fail_with

    async def insert(self, table, record):
        if self.fail_with is not None:
            raise self.fail_with
        self.rows.append((table, record))


@pytest.fixture
def settings():
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_role_key="service-role-key",
        leads_table="leads",
    )


@pytest.fixture
def form_headers():
    return {"Content-Type": "application/x-www-form-urlencoded"}


@pytest.fixture
def store():
    return FakeLeadStore()


@pytest.fixture
def failing_store():
    return FakeLeadStore(fail_with=StoreWriteError(detail='duplicate key value violates unique constraint "leads_pkey"'))


@pytest.fixture
def broken_store():
    return FakeLeadStore(fail_with=RuntimeError("connection reset by peer"))


@pytest.fixture
def make_client():
    def _make(settings, store=None):
        return TestClient(create_app(settings=settings, store=store))
    return _make


@pytest.fixture
def client(make_client, settings, store):
    return make_client(settings, store)


@pytest.fixture
def post_form(client, form_headers):
    def _post(body, headers=None, path="/api/save"):
        return client.post(path, content=body, headers=headers or form_headers)
    return _post
