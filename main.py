from fastapi import FastAPI

from app.connections import mongo_lifespan
from app.api.auth import router as auth_router
from app.utils.config import settings
from app.utils.errors import register_error_handlers
from app.utils.log import configure_logging


configure_logging(settings)

app = FastAPI(title="Auth Service (Mongo)", version="0.1.0", lifespan=mongo_lifespan)

register_error_handlers(app)

app.include_router(auth_router, prefix="/api/auth")
