import os
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic import BaseModel
from pydantic.config import ConfigDict

# Load environment from .env, while allowing real env to override
load_dotenv(override=False)


def get_worker_gate_key() -> str | None:
    return os.getenv("WORKER_GATE_KEY") or None


def get_port() -> int:
    return int(os.getenv("PORT", "8000"))


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_mongo_db() -> str:
    return os.getenv("MONGO_DB") or "magics"


def get_query_collection() -> str:
    return os.getenv("QUERY_COLLECTION") or "volunteers"


def get_query_email() -> str:
    return os.getenv("QUERY_EMAIL") or "mye13@ivc.edu"


def get_mongo_uri() -> str | None:
    """Return a MongoDB connection URI.

    Priority:
    1. Use `MONGO_URI` if provided.
    2. Otherwise, assemble from `MONGO_USER`, `MONGO_PASS`, and `MONGO_HOST`.
       Password is URL-encoded for safety.
    """
    uri = os.getenv("MONGO_URI")
    if uri:
        return uri

    user = os.getenv("MONGO_USER")
    password = os.getenv("MONGO_PASS")
    host = os.getenv("MONGO_HOST")
    if user and password and host:
        return (
            f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{host}/?"
            "retryWrites=true&w=majority&appName=magics-api"
        )
    return None


class Settings(BaseModel):
    """Process-wide configuration, read once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    worker_gate_key: str | None = None
    mongo_uri: str | None = None
    mongo_db: str = "magics"
    query_collection: str = "volunteers"
    query_email: str = "mye13@ivc.edu"

    def masked_mongo_uri(self) -> str:
        """Return the Mongo URI with any credentials replaced by ``***``."""
        if not self.mongo_uri:
            return "<unset>"
        scheme, sep, rest = self.mongo_uri.partition("://")
        if not sep or "@" not in rest:
            return self.mongo_uri
        return f"{scheme}://***@{rest.rsplit('@', 1)[1]}"


def load_settings() -> Settings:
    return Settings(
        worker_gate_key=get_worker_gate_key(),
        mongo_uri=get_mongo_uri(),
        mongo_db=get_mongo_db(),
        query_collection=get_query_collection(),
        query_email=get_query_email(),
    )
