"""
Main FastAPI application entry point.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.config import Settings, get_settings
from app.api import router as api_router
from app.errors import INTERNAL_ERROR, InvalidInputKind, SipCalculationError, SipInputError

logger = logging.getLogger(__name__)

MISSING_INPUTS_MESSAGE = (
    "Please provide monthlyInvestment, annualReturnPct (or annualReturn), "
    "and years (or investmentYears)"
)


def configure_logging(level: str) -> None:
    """Set up root logging at the configured level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _input_error_from_validation(exc: RequestValidationError) -> SipInputError:
    """Map a request body validation failure onto the calculator's TypeError."""
    if any(err.get("type") == "missing" for err in exc.errors()):
        return SipInputError(
            InvalidInputKind.TypeError, MISSING_INPUTS_MESSAGE, error="Missing inputs"
        )
    return SipInputError(InvalidInputKind.TypeError, "All values must be numbers")


def register_exception_handlers(app: FastAPI) -> None:
    """Convert every failure into the JSON error body."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = _input_error_from_validation(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, error.message)
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(SipInputError)
    async def input_error_handler(request: Request, exc: SipInputError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(SipCalculationError)
    async def calculation_error_handler(request: Request, exc: SipCalculationError):
        logger.warning("Calculation failed on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "kind": INTERNAL_ERROR, "message": str(exc)},
        )


def create_app(settings: Settings) -> FastAPI:
    """Build the application from an explicit settings object."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Systematic Investment Plan future value calculator",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse)
    async def home():
        """Plain-text liveness check."""
        return "SIP API is running"

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {"status": "healthy", "version": settings.app_version}

    return app


app = create_app(get_settings())
