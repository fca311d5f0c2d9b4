import hmac
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

GATE_HEADER = "x-worker-key"
EXEMPT_PREFIXES = ("/actuator",)
EXEMPT_PATHS = frozenset({"/mongo/ping"})


class WorkerGate:
    """Shared-secret check applied to every request outside the exempt paths."""

    def __init__(self, key: str | None) -> None:
        self._key = key.encode("utf-8") if key else None
        if self._key is None:
            logger.warning("WORKER_GATE_KEY is not set; gated routes will reject all requests")

    def is_exempt(self, path: str) -> bool:
        return path.startswith(EXEMPT_PREFIXES) or path in EXEMPT_PATHS

    def allows(self, value: str | None) -> bool:
        """Compare the header's wire bytes with the UTF-8 encoded key.

        Starlette hands header values over latin-1 decoded.
        """
        if self._key is None or value is None:
            return False
        return hmac.compare_digest(value.encode("latin-1"), self._key)


class WorkerGateMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, gate: WorkerGate) -> None:
        super().__init__(app)
        self.gate = gate

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if self.gate.is_exempt(path):
            return await call_next(request)

        if not self.gate.allows(request.headers.get(GATE_HEADER)):
            logger.info("Worker gate rejected %s %s", request.method, path)
            return JSONResponse(status_code=403, content={"detail": "Forbidden"})

        return await call_next(request)
