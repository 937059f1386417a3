import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import patients, providers
from app.core import config
from app.core.database import ConnectionManager
from app.services.query_router import QueryRouter

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def create_app(connection_manager: Optional[ConnectionManager] = None) -> FastAPI:
    app = FastAPI(title="Patient & Provider Directory")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    manager = connection_manager or ConnectionManager()
    app.state.connection_manager = manager
    app.state.query_router = QueryRouter(manager)

    @app.on_event("startup")
    def startup():
        # a failed connect is logged and the service keeps serving
        manager.connect()

    @app.on_event("shutdown")
    def shutdown():
        manager.dispose()

    app.include_router(patients.router, tags=["Patients"])
    app.include_router(providers.router, tags=["Providers"])

    @app.get("/")
    def root():
        return {"message": "API is running"}

    @app.get("/health")
    def health():
        state = manager.state.value
        if not manager.is_healthy:
            return JSONResponse(status_code=503, content={"status": "degraded", "database": state})
        return {"status": "ok", "database": state}

    return app


app = create_app()


def run():
    logger.info("Server listening on port %s", config.PORT)
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
