from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/gate", tags=["gate"])


@router.api_route("/test", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def gate_test() -> str:
    """Reachable only once the worker gate has let the request through."""
    return "OK"
