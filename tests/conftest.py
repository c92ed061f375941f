"""Shared test fixtures.

Translation files are written to a fresh temporary directory for every
test; stores start empty.
"""

from __future__ import annotations

import json
from fnmatch import fnmatch
from pathlib import Path

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from localestore.i18n import StoreError, TranslationStore
from localestore.redis_db import RedisDatabase
from localestore.services.memory_service import MemoryLocaleStore
from localestore.services_redis.locale_service import RedisLocaleStore


TRANSLATIONS = {
    "test1.fr.json": {
        "Hello world": "Foo bar",
    },
    "test2.fr.json": {
        "Hello world": "Foo bar 2",
        "Hello :name, welcome back": "Foo :name, bar",
    },
    "test1.jp.json": {
        "Hello :name, welcome back": "Goodbye :name",
    },
}


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    path = tmp_path / "locales"
    path.mkdir()
    for filename, messages in TRANSLATIONS.items():
        (path / filename).write_text(json.dumps(messages), encoding="utf-8")
    return path


@pytest.fixture
def storage() -> MemoryLocaleStore:
    return MemoryLocaleStore()


@pytest.fixture
def locale(storage: MemoryLocaleStore) -> TranslationStore:
    return TranslationStore(storage)


class BrokenStore:
    """Store whose every call fails, counting the calls it received."""

    def __init__(self, fail_on: tuple[str, ...] = ("find_all", "find_one", "upsert")):
        self.fail_on = fail_on
        self.calls: list[str] = []
        self.inner = MemoryLocaleStore()

    async def _call(self, name, *args):
        self.calls.append(name)
        if name in self.fail_on:
            raise StoreError(f"{name} failed")
        return await getattr(self.inner, name)(*args)

    async def find_all(self):
        return await self._call("find_all")

    async def find_one(self, language, msg):
        return await self._call("find_one", language, msg)

    async def upsert(self, record):
        return await self._call("upsert", record)


@pytest.fixture
def broken_store() -> BrokenStore:
    return BrokenStore()


class FakeRedisClient:
    """In-process stand-in for the subset of redis.asyncio.Redis we call."""

    def __init__(self):
        self.data: dict[str, dict[str, str]] = {}
        self.closed = False
        self.down = False

    def _check(self):
        if self.down:
            raise RedisConnectionError("connection refused")

    async def ping(self):
        self._check()
        return True

    async def aclose(self):
        self.closed = True

    async def hset(self, key, field, value):
        self._check()
        is_new = field not in self.data.setdefault(key, {})
        self.data[key][field] = value
        return int(is_new)

    async def hget(self, key, field):
        self._check()
        return self.data.get(key, {}).get(field)

    async def hgetall(self, key):
        self._check()
        return dict(self.data.get(key, {}))

    async def keys(self, pattern):
        self._check()
        return [key for key in self.data if fnmatch(key, pattern)]

    async def delete(self, *keys):
        self._check()
        return sum(1 for key in keys if self.data.pop(key, None) is not None)


@pytest.fixture
def redis_client() -> FakeRedisClient:
    return FakeRedisClient()


@pytest.fixture
def redis_store(redis_client: FakeRedisClient) -> RedisLocaleStore:
    db = RedisDatabase(url="redis://localhost:6379/0", prefix="locales", client=redis_client)
    return RedisLocaleStore(db)
