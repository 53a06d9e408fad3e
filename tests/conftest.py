"""
Shared pytest fixtures.

The API tests run against in-memory tables patched over the repository
modules, so no PostgreSQL server is needed. Repository SQL is covered
separately in `test_repository.py` with a mocked asyncpg executor.
"""

import os
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Before any app import: cheap hashes, no real database, quiet logs.
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("DATABASE_URL", None)

from core.db import get_db  # noqa: E402
from main import app  # noqa: E402
from questoes import repository as questoes_repository  # noqa: E402
from usuarios import repository as usuarios_repository  # noqa: E402


class FakeDatabase:
    """Stands in for `core.db.Database`; the patched repositories ignore it."""

    def __init__(self, ping_result: str = "ok") -> None:
        self.ping_result = ping_result
        self.transactions = 0

    @asynccontextmanager
    async def transaction(self):
        self.transactions += 1
        yield self

    async def ping(self) -> str:
        return self.ping_result


class InMemoryTable:
    def __init__(self) -> None:
        self.rows: dict[int, dict] = {}
        self._next_id = 1

    def insert(self, **values) -> dict:
        row = {"id": self._next_id, **values}
        self.rows[self._next_id] = row
        self._next_id += 1
        return dict(row)

    def get(self, row_id: int) -> dict | None:
        row = self.rows.get(row_id)
        return dict(row) if row is not None else None

    def update(self, row_id: int, **values) -> dict | None:
        if row_id not in self.rows:
            return None
        self.rows[row_id].update(values)
        return dict(self.rows[row_id])

    def delete(self, row_id: int) -> bool:
        return self.rows.pop(row_id, None) is not None


def _public_usuario(row: dict | None) -> dict | None:
    if row is None:
        return None
    return {key: row[key] for key in ("id", "nome", "email")}


@pytest.fixture
def usuarios_table(monkeypatch) -> InMemoryTable:
    table = InMemoryTable()

    async def list_usuarios(database):
        return [_public_usuario(row) for row in table.rows.values()]

    async def get_usuario(database, usuario_id):
        return _public_usuario(table.get(usuario_id))

    async def lock_usuario(database, usuario_id):
        return table.get(usuario_id)

    async def create_usuario(database, *, nome, email, senha_hash):
        return _public_usuario(table.insert(nome=nome, email=email, senha=senha_hash))

    async def update_usuario(database, usuario_id, *, nome, email, senha):
        return _public_usuario(table.update(usuario_id, nome=nome, email=email, senha=senha))

    async def delete_usuario(database, usuario_id):
        return table.delete(usuario_id)

    for fake in (list_usuarios, get_usuario, lock_usuario, create_usuario, update_usuario, delete_usuario):
        monkeypatch.setattr(usuarios_repository, fake.__name__, fake)
    return table


@pytest.fixture
def questoes_table(monkeypatch) -> InMemoryTable:
    table = InMemoryTable()

    async def list_questoes(database):
        return list(table.rows.values())

    async def get_questao(database, questao_id, *, for_update=False):
        return table.get(questao_id)

    async def create_questao(database, **values):
        return table.insert(**values)

    async def update_questao(database, questao_id, **values):
        return table.update(questao_id, **values)

    async def delete_questao(database, questao_id):
        return table.delete(questao_id)

    for fake in (list_questoes, get_questao, create_questao, update_questao, delete_questao):
        monkeypatch.setattr(questoes_repository, fake.__name__, fake)
    return table


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest_asyncio.fixture
async def client(fake_db):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    `get_db` is overridden with `fake_db`; tests may replace that fixture.
    """
    app.dependency_overrides[get_db] = lambda: fake_db
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as http:
            yield http
    finally:
        app.dependency_overrides.clear()
