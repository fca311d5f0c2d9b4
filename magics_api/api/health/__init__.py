from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from magics_api.api.deps import get_store
from magics_api.db.mongo import MongoStore
from .service import UP, mongo_health

router = APIRouter(prefix="/actuator/health", tags=["health"])

INDICATOR_NAME = "mongoAtlas"


def _status_code(overall: str) -> int:
    return status.HTTP_200_OK if overall == UP else status.HTTP_503_SERVICE_UNAVAILABLE


@router.get("")
async def health(store: MongoStore = Depends(get_store)) -> JSONResponse:
    """Report aggregated service health."""
    mongo = await mongo_health(store)
    overall = mongo["status"]
    return JSONResponse(
        status_code=_status_code(overall),
        content={"status": overall, "components": {INDICATOR_NAME: mongo}},
    )


@router.get(f"/{INDICATOR_NAME}")
async def mongo_indicator(store: MongoStore = Depends(get_store)) -> JSONResponse:
    mongo = await mongo_health(store)
    return JSONResponse(status_code=_status_code(mongo["status"]), content=mongo)
