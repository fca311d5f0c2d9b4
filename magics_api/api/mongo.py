from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from magics_api.api.deps import get_settings, get_store
from magics_api.api.utils import document_response, error_response, not_found_response
from magics_api.core.env import Settings
from magics_api.db.mongo import MongoStore

router = APIRouter(tags=["mongo"])


@router.api_route("/mongo/ping", methods=["GET", "HEAD"])
@router.api_route("/ping", methods=["GET", "HEAD"])
async def ping(store: MongoStore = Depends(get_store)) -> JSONResponse:
    """Check that MongoDB answers a ping command."""
    result = await store.ping()
    if not result.ok:
        return error_response(result.error)
    return document_response(result.document)


@router.api_route("/mongo/query", methods=["GET", "HEAD"])
@router.api_route("/query", methods=["GET", "HEAD"])
async def query(
    store: MongoStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Look up the configured volunteer by email."""
    result = await store.find_one(
        settings.query_collection, {"email": settings.query_email}
    )
    if not result.ok:
        return error_response(result.error)
    if not result.found:
        return not_found_response()
    return document_response(result.document)
