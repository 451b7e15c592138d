from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from .api.v1 import catalog, health, hf_model_repos, models
from .core.config import get_settings
from .core.database import init_db
from .core.log import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables on startup
    init_db()
    logger.info("Database initialized")
    yield


def create_app(init_database: bool = True) -> FastAPI:
    settings = get_settings()
    configure_logging(settings)
    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        lifespan=lifespan if init_database else None,
    )

    app.include_router(models.router, prefix="/v1/models", tags=["models"])
    app.include_router(catalog.router, prefix="/v1/catalog", tags=["catalog"])
    app.include_router(hf_model_repos.router, prefix="/v1/hf-model-repos", tags=["hf-model-repos"])
    app.include_router(health.router, prefix="/v1/health", tags=["health"])

    logger.info(f"{settings.APP_NAME} created (env={settings.ENV})")
    return app


def main() -> None:
    import uvicorn

    uvicorn.run("model_manager.main:create_app", factory=True, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
