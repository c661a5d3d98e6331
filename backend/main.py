import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.core.config import settings
from app.core.database import init_db
from app.core.errors import register_error_handlers
from app.core.log import setup_logging
from app.api import api_router

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Raises when the database cannot be reached, so nothing gets served.
    init_db()
    yield

app = FastAPI(title="Todo App (FastAPI + MySQL)", lifespan=lifespan)
register_error_handlers(app)

@app.get("/")
def health():
    return {"message": "OK"}

app.include_router(api_router)

if __name__ == "__main__":
    logger.info("Listening on %s:%d", settings.app_host, settings.app_port)
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_level=settings.log_level.lower())
