import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.server_api import ServerApi

logger = logging.getLogger(__name__)

# Cache clients per running asyncio event loop. This avoids reusing a client
# across different loops (common in serverless), which causes runtime errors.
_clients_by_loop: Dict[int, AsyncIOMotorClient] = {}


class StoreError(Exception):
    """Raised when the store cannot be reached or is not configured."""


def get_mongo_client(uri: str | None) -> AsyncIOMotorClient:
    loop = asyncio.get_running_loop()
    loop_id = id(loop)
    client = _clients_by_loop.get(loop_id)
    if client is None:
        if not uri:
            raise StoreError("Server not configured: set MONGO_URI")
        # Use MongoDB Stable API v1 for compatibility with Atlas strict clusters
        client = AsyncIOMotorClient(
            uri,
            appname="magics-api",
            server_api=ServerApi("1"),
        )
        _clients_by_loop[loop_id] = client
    return client


def close_mongo_client() -> None:
    """Close and reset all cached MongoDB clients."""
    for client in list(_clients_by_loop.values()):
        try:
            client.close()
        except Exception as exc:
            logger.warning("Failed to close MongoDB client: %s", exc)
    _clients_by_loop.clear()


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a single store call.

    ``error`` is set when the call failed. Otherwise ``document`` holds the
    returned document, or ``None`` when nothing matched.
    """

    document: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def found(self) -> bool:
        return self.ok and self.document is not None


def _error_message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class MongoStore:
    """Read-only access to one MongoDB database."""

    def __init__(self, database: str, client_factory: Callable[[], Any]) -> None:
        self.database = database
        self._client_factory = client_factory

    def _db(self):
        return self._client_factory().get_database(self.database)

    async def ping(self) -> StoreResult:
        try:
            ack = await self._db().command({"ping": 1})
        except Exception as exc:
            logger.warning("MongoDB ping on %s failed: %s", self.database, exc)
            return StoreResult(error=_error_message(exc))
        return StoreResult(document=dict(ack))

    async def find_one(self, collection: str, flt: Dict[str, Any]) -> StoreResult:
        try:
            doc = await self._db().get_collection(collection).find_one(flt)
        except Exception as exc:
            logger.warning(
                "MongoDB find_one on %s.%s failed: %s", self.database, collection, exc
            )
            return StoreResult(error=_error_message(exc))
        return StoreResult(document=doc)
