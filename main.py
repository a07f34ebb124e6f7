from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from config import settings
from api.errors import install_error_handlers
from api.router import api_router
from services.gemini import ModelGateway, build_gateway

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
_LOG = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "gateway", None) is None:
        app.state.gateway = build_gateway(settings)
    _LOG.info("Server is running on http://localhost:%d", settings.port)
    yield


def create_app(gateway: ModelGateway | None = None) -> FastAPI:
    """
    Build the app. `gateway` is injected as-is when given (tests);
    otherwise one is built from settings at start-up.
    """
    app = FastAPI(title="Pantry Chef API", version="1.0.0", lifespan=lifespan)
    if gateway is not None:
        app.state.gateway = gateway

    # CORS (public demo only – lock down in prod)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/api/health", tags=["meta"])
    def health() -> dict[str, str]:
        return {"status": "ok", "message": "Server is running"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
