import asyncio
import os
import tempfile
from types import SimpleNamespace

import pytest

os.environ.setdefault("SUPABASE_URL", "https://inovaweek-test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="inovaweek-logs-"))


class FakeAuth:
    def __init__(self, error=None):
        self.error = error
        self.calls = []
        self.gate = None

    async def reset_password_for_email(self, email, options=None):
        self.calls.append((email, options))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error


class FakeQuery:
    def __init__(self, client, table_name):
        self.client = client
        self.table_name = table_name

    def select(self, query):
        self.client.selects.append((self.table_name, query))
        return self

    async def execute(self):
        if self.client.fetch_error is not None:
            raise self.client.fetch_error
        return SimpleNamespace(data=self.client.rows)


class FakeSupabase:
    """Mimics the parts of ``supabase.AsyncClient`` the screens use."""

    def __init__(self, rows=None, fetch_error=None, auth_error=None):
        self.rows = rows if rows is not None else []
        self.fetch_error = fetch_error
        self.selects = []
        self.auth = FakeAuth(auth_error)

    def table(self, table_name):
        return FakeQuery(self, table_name)


class RecordingNavigator:
    def __init__(self):
        self.visited = []

    def navigate(self, screen_name):
        self.visited.append(screen_name)


@pytest.fixture
def ai_group_row():
    return {
        "id": 1,
        "Tema": "AI",
        "Dia": "2024-05-01",
        "Aluno": [{"nome": "Ana"}],
        "Avaliacao": [{"Nota": 9}],
    }


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def gate():
    return asyncio.Event()
