import asyncio
from functools import partial

import pytest

from magics_api.db import mongo
from magics_api.db.mongo import MongoStore, StoreError, StoreResult

from mock_mongo import FakeMongoClient


def _store(fake: FakeMongoClient) -> MongoStore:
    return MongoStore("magics", lambda: fake)


def test_store_result_flags():
    assert StoreResult().ok and not StoreResult().found
    assert StoreResult(document={"a": 1}).found
    failed = StoreResult(error="boom")
    assert not failed.ok and not failed.found


def test_ping_returns_ack():
    result = asyncio.run(_store(FakeMongoClient()).ping())
    assert result == StoreResult(document={"ok": 1.0})


def test_find_one_outcomes():
    fake = FakeMongoClient()
    fake.db.collections["volunteers"].docs.append({"email": "x@y.z", "n": 1})
    store = _store(fake)

    found = asyncio.run(store.find_one("volunteers", {"email": "x@y.z"}))
    assert found.document == {"email": "x@y.z", "n": 1}

    missing = asyncio.run(store.find_one("volunteers", {"email": "nobody"}))
    assert missing == StoreResult()


def test_errors_become_results():
    store = _store(FakeMongoClient(error=ValueError()))
    ping = asyncio.run(store.ping())
    assert ping.error == "ValueError"
    query = asyncio.run(store.find_one("volunteers", {"email": "x"}))
    assert not query.ok


def test_missing_uri_is_a_store_error():
    async def run():
        with pytest.raises(StoreError):
            mongo.get_mongo_client(None)
        return await MongoStore("magics", partial(mongo.get_mongo_client, None)).ping()

    result = asyncio.run(run())
    assert result.error == "Server not configured: set MONGO_URI"


def test_close_mongo_client_clears_cache(monkeypatch):
    closed = []

    class Client:
        def close(self):
            closed.append(True)

    monkeypatch.setattr(mongo, "_clients_by_loop", {1: Client(), 2: Client()})
    mongo.close_mongo_client()
    assert closed == [True, True]
    assert mongo._clients_by_loop == {}
