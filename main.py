from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI

from shared.config import database
from shared.config.settings import Settings
from shared.exceptions import register_exception_handlers
from shared.observability import setup_observability

# IMPORTANT: import models so they register with Base
from services.product_service import models as product_models
from services.category_service import models as category_models

from services.product_service.repository import DEFAULT_PRODUCTS, InMemoryProductRepository
from services.product_service.router import router as product_router
from services.category_service.repository import InMemoryCategoryRepository
from services.category_service.router import router as category_router

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Kasir API",
        version="1.0.0",
        description="API untuk sistem kasir sederhana dengan Category",
        docs_url="/swagger/index.html",
        redoc_url=None,
        openapi_url="/swagger/doc.json",
        redirect_slashes=False,
    )
    app.state.settings = settings
    # Resource name -> in-memory repository; empty when the database backs the API
    app.state.stores = {}
    if settings.uses_memory_store:
        app.state.stores = {
            "products": InMemoryProductRepository(seed=DEFAULT_PRODUCTS if settings.seed_data else ()),
            "categories": InMemoryCategoryRepository(),
        }

    # --- OBSERVABILITY BOOTSTRAP ---
    setup_observability(app, "kasir_api", settings)
    register_exception_handlers(app)

    app.include_router(product_router)
    app.include_router(category_router)

    @app.get("/api/health", tags=["health"], summary="Health check")
    async def health_check():
        return {"status": "OK", "message": "API Running"}

    @app.on_event("startup")
    async def startup_event():
        if settings.uses_memory_store:
            logger.info("store_ready", backend="memory", seeded=settings.seed_data)
            return
        await database.init_db(
            settings.db_conn,
            max_open_conns=settings.db_max_open_conns,
            max_idle_conns=settings.db_max_idle_conns,
            echo=settings.db_echo,
        )
        logger.info("store_ready", backend="database")

    @app.on_event("shutdown")
    async def shutdown_event():
        await database.close_db()

    return app


app = create_app()


if __name__ == "__main__":
    settings = app.state.settings
    logger.info("server_starting", url=f"http://localhost:{settings.port}")
    logger.info("swagger_ui", url=f"http://localhost:{settings.port}/swagger/index.html")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
