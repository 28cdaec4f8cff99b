"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from benefitwise.api.routes import catalog, health, tools
from benefitwise.catalog import create_catalog
from benefitwise.core.config import AppSettings
from benefitwise.core.exceptions import PlanNotFoundError, UnknownToolError, ValidationFailedError
from benefitwise.core.logging_config import configure_logging
from benefitwise.skills.benefits_tools import ToolContext

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings = AppSettings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    app.state.tool_context = ToolContext(catalog=create_catalog(), settings=settings)
    logger.info("BenefitWise API starting (environment=%s)", settings.environment)
    yield


async def _validation_failed(request: Request, exc: ValidationFailedError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": "validation_failed", "details": exc.errors},
    )


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "not_found", "detail": str(exc)})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="BenefitWise Benefits Assistant",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(ValidationFailedError, _validation_failed)  # type: ignore[arg-type]
    app.add_exception_handler(UnknownToolError, _not_found)
    app.add_exception_handler(PlanNotFoundError, _not_found)
    app.include_router(health.router)
    app.include_router(tools.router, prefix="/tools")
    app.include_router(catalog.router, prefix="/catalog")
    return app
