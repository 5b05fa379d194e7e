"""
FastAPI backend for the RoRo hybrid propulsion advisor.

Provides REST API endpoints for:
- Diesel/electric power split recommendations
- Preset operating scenarios
- 24-hour voyage simulation
- Baseline fuel, CO2 and cost comparison
"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rorohybrid import __version__
from rorohybrid.errors import DomainError
from rorohybrid_api.config import settings
from rorohybrid_api.routers import advisor, simulation, system

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Application Factory
# =============================================================================

def create_app() -> FastAPI:
    """
    Application factory for the advisor API.

    Returns:
        FastAPI: Configured application instance
    """
    application = FastAPI(
        title="RoRo Hybrid Advisor API",
        description="""
## Hybrid Propulsion Advisor API

Advises how to split propulsive power between the diesel engine and the
battery-electric drive of a hybrid Ro-Ro vessel, and projects the fuel,
CO2 and cost impact over a 24-hour voyage.
""",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @application.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.warning(f"Domain error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "field": exc.field},
        )

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": e["loc"], "msg": e["msg"], "type": e["type"]}
            for e in exc.errors()
        ]
        logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
        return JSONResponse(status_code=422, content={"detail": errors})

    application.include_router(system.router)
    application.include_router(advisor.router)
    application.include_router(simulation.router)

    return application


# Create the application
app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "rorohybrid_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level,
    )
