# thelook/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import DEFAULT_JWT_SECRET, Settings, get_settings
from .data import seed_services
from .db import create_db_engine, init_db
from .logging_config import configure_logging
from .payments import PaymentGateway
from .routers import (
    auth_routes,
    barbers_routes,
    booking_routes,
    payments_routes,
    services_routes,
    users_routes,
)

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # store and gateway are built once and shared read-only
        engine = create_db_engine(settings.database_url)
        init_db(engine)
        if settings.seed_catalog:
            seed_services(engine)

        if settings.jwt_secret == DEFAULT_JWT_SECRET:
            logger.warning("JWT_SECRET is not set, using the development default")
        if not settings.stripe_secret_key:
            logger.warning("STRIPE_SECRET_KEY is not set, payment intents will fail")

        app.state.engine = engine
        app.state.gateway = PaymentGateway(settings.stripe_secret_key, settings.payment_currency)
        logger.info("The Look API started (database %s)", engine.url.render_as_string())
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title="The Look API", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "internal server error"})

    @app.get("/")
    def read_root():
        return "The Look server is running"

    app.include_router(services_routes.router)
    app.include_router(booking_routes.router)
    app.include_router(users_routes.router)
    app.include_router(auth_routes.router)
    app.include_router(barbers_routes.router)
    app.include_router(payments_routes.router)

    return app


def run():
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
