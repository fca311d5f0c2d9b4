import json
from typing import Any, Dict

from bson import ObjectId, json_util
from bson.json_util import RELAXED_JSON_OPTIONS
from fastapi.responses import JSONResponse


def _serialize(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Convert Mongo document to JSON-serializable dict.

    An ObjectId ``_id`` is rendered as a plain string; every other BSON
    value uses relaxed extended JSON.
    """
    result = dict(doc)
    if isinstance(result.get("_id"), ObjectId):
        result["_id"] = str(result["_id"])
    return json.loads(json_util.dumps(result, json_options=RELAXED_JSON_OPTIONS))


def document_response(doc: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=_serialize(doc))


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    """Error body carrying the raw store failure message."""
    return JSONResponse(status_code=status_code, content={"error": message})


def not_found_response() -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": "not found"})
