"""
Async database access helpers (raw SQL) using asyncpg.

The pool is built once per process in the FastAPI lifespan (see `api/main.py`)
and handed to request handlers wrapped in a `Database` handle through the
`get_db` dependency. Nothing here keeps a module-level pool.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from . import settings

logger = logging.getLogger(__name__)

Executor = asyncpg.Pool | asyncpg.Connection


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str | None:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        return None
    return _sanitize_database_url(url)


async def create_pool() -> asyncpg.Pool | None:
    """
    Build the process-wide pool.

    Lazy mode opens no connection here (min_size=0); query failures surface
    per request. Fail-fast mode requires DATABASE_URL and a working server.
    """
    fail_fast = settings.db_fail_fast()
    url = database_url()
    if url is None:
        if fail_fast:
            raise RuntimeError("DATABASE_URL is not set.")
        logger.warning("db_pool_skipped reason=DATABASE_URL_not_set")
        return None

    pool = await asyncpg.create_pool(
        dsn=url,
        min_size=1 if fail_fast else 0,
        max_size=settings.db_pool_max_size(),
        command_timeout=settings.db_command_timeout(),
    )
    if fail_fast:
        try:
            await pool.fetchval("SELECT 1")
        except Exception:
            await pool.close()
            raise
    logger.info("db_pool_created fail_fast=%s", fail_fast)
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("db_pool_closed")


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    """
    Query handle over a pool, or over one connection inside a transaction.

    A handle built without an executor stands for an unconfigured database:
    every query raises, which the error contract turns into a 500.
    """

    def __init__(self, executor: Executor | None = None) -> None:
        self._executor = executor

    @property
    def configured(self) -> bool:
        return self._executor is not None

    def _require(self) -> Executor:
        if self._executor is None:
            raise RuntimeError("DATABASE_URL is not set.")
        return self._executor

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._require().fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._require().fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the command status tag.
        """
        return await self._require().execute(sql, *args)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["Database"]:
        executor = self._require()
        if isinstance(executor, asyncpg.Connection):
            async with executor.transaction():
                yield self
            return

        async with executor.acquire() as conn:
            async with conn.transaction():
                yield Database(conn)

    async def ping(self) -> str:
        """
        Return "ok" when `SELECT 1` succeeds, otherwise the failure message.
        """
        try:
            await self.fetch_one("SELECT 1")
        except Exception as exc:
            return str(exc) or type(exc).__name__
        return "ok"


def get_db(request: Request) -> Database:
    return getattr(request.app.state, "db", None) or Database()
