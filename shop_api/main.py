# shop_api/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from shop_api.api import api_router
from shop_api.api.errors import register_error_handlers
from shop_api.data.database import Base, engine
from shop_api.utils.logging import get_logger
from shop_api.utils.settings import SERVER_HOST, SERVER_PORT

# import modeli przed create_all, zeby tabele byly w Base.metadata
import shop_api.data.models  # noqa: F401

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Database tables ready")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shop API",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
