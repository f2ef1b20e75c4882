import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from safecalc import __version__
from safecalc.api.deps import get_rules
from safecalc.api.routes import calc
from safecalc.domain.errors import CalcError
from safecalc.rules import Rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("safecalc API %s started", __version__)
    yield


async def calc_error_handler(request: Request, exc: CalcError) -> JSONResponse:
    """Translate calculation failures into HTTP 400."""
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())


def create_app(rules: Rules | None = None) -> FastAPI:
    rules = rules or get_rules()

    app = FastAPI(
        title=rules.api.title,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.include_router(calc.router, prefix="/api/calc", tags=["Calc"])
    app.add_exception_handler(CalcError, calc_error_handler)

    if rules.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=rules.api.cors_origins,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "api"}

    return app


app = create_app()
