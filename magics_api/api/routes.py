from fastapi import APIRouter

from magics_api.api.gate import router as gate_router
from magics_api.api.health import router as health_router
from magics_api.api.mongo import router as mongo_router

router = APIRouter()
router.include_router(gate_router)
router.include_router(mongo_router)
router.include_router(health_router)
