from typing import Any, Dict

from magics_api.db.mongo import MongoStore

UP = "UP"
DOWN = "DOWN"


async def mongo_health(store: MongoStore) -> Dict[str, Any]:
    """Check MongoDB connectivity.

    Returns a dict with ``status`` set to ``"UP"`` or ``"DOWN"``.
    When down, ``details.error`` carries the failure message.
    """
    result = await store.ping()
    if result.ok:
        return {"status": UP}
    return {"status": DOWN, "details": {"error": result.error}}
