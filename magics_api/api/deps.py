from fastapi import Request

from magics_api.core.env import Settings
from magics_api.db.mongo import MongoStore


def get_store(request: Request) -> MongoStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
