# app/main.py
from contextlib import asynccontextmanager
import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.core.config import settings
from app.database.session_store import SessionStore
from app.services.auth_service import LoginCoordinator
from app.routers.v1 import health
from app.routers.v1 import auth
from app.routers.v1 import teacher
from app.routers.v1 import student

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    stream=sys.stdout,
)

logger = logging.getLogger("portal")

def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = SessionStore(
            seed_mock_data=settings.seed_mock_data,
            roster_size=settings.roster_size,
        )
        app.state.session_store = store   # sessioni disponibili alle routes
        app.state.login_coordinator = LoginCoordinator(store, settings.login_delay_seconds)
        logger.info("Portal avviato (seed=%s, delay=%.1fs)", settings.seed_mock_data, settings.login_delay_seconds)

        try:
            yield
        finally:
            logger.info("Portal fermato, %d sessioni scartate", len(store))

    app = FastAPI(
        title=settings.app_name,
        description="Portale assignment con viste docente e studente in memoria",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    app.include_router(health.router,  prefix="/api/v1", tags=["health"])
    app.include_router(auth.router,    prefix="/api/v1", tags=["auth"])
    app.include_router(teacher.router, prefix="/api/v1", tags=["teacher"])
    app.include_router(student.router, prefix="/api/v1", tags=["student"])
    return app

app = create_app()

def run():
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    run()
