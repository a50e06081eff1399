import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import certifi
from fastapi import FastAPI
from mongoengine import connect, disconnect

from app.utils.config import Settings, settings


logger = logging.getLogger(__name__)

MONGO_ALIAS = "default"


def connection_options(config: Settings) -> dict:
    """Keyword arguments for mongoengine.connect.

    Only SRV (Atlas) URIs get the certifi CA bundle; a plain mongodb:// host
    such as a local container runs without TLS.
    """
    options: dict = {"host": config.mongo_uri, "alias": MONGO_ALIAS, "tz_aware": True}
    if config.mongo_scheme == "mongodb+srv":
        options["tlsCAFile"] = certifi.where()
    return options


def init_mongo(config: Settings = settings) -> None:
    connect(**connection_options(config))
    logger.info("Connected to MongoDB database %s", config.mongo_db)


def close_mongo() -> None:
    disconnect(alias=MONGO_ALIAS)


@asynccontextmanager
async def mongo_lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_mongo()
    try:
        yield
    finally:
        close_mongo()
