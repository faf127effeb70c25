"""
Application entry point.

Run locally:
    uvicorn app.main:app --reload --port 8000

In Docker:
    CMD ["uvicorn", "app.main:app", "--host", "0.0.0.0", "--port", "8000"]

API docs available at:
    http://localhost:8000/docs   (Swagger UI)
    http://localhost:8000/redoc  (ReDoc)
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.core.rate_limiter import limiter
from app.routers import auth, bookings, contact, trips, users
from app.routers.records import build_record_router
from app.schemas.common import first_error_message
from app.services.record_types import RECORD_TYPES

logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and query params are client errors: 400 with one readable message."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": first_error_message(exc.errors())},
    )


async def persistence_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database operation failed"},
    )


def create_app() -> FastAPI:
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Travel Agency API",
        description=(
            "Backend for a travel agency website. "
            "Admin dashboards for Hajj, Umrah and domestic packages, custom pilgrimage, "
            "why-choose-us items and testimonials, plus contact form, trips and bookings."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Rate Limiter ──────────────────────────────────────────────────────────
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # ── Error mapping ─────────────────────────────────────────────────────────
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, persistence_error_handler)

    # ── CORS ──────────────────────────────────────────────────────────────────
    # The admin dashboard and the public site live on other origins.
    # Preflight is answered for every route, including the dashboard collections.
    allow_all = settings.cors_origins_list == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=not allow_all,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(auth.router, prefix="/auth", tags=["Auth"])

    # Dashboards: one generated router per record type
    for record_type in RECORD_TYPES:
        app.include_router(
            build_record_router(record_type),
            prefix=f"/api/{record_type.slug}",
            tags=[record_type.slug],
        )

    app.include_router(contact.router, prefix="/contact", tags=["Contact"])
    app.include_router(trips.router, prefix="/trips", tags=["Trips"])
    app.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])
    app.include_router(users.router, prefix="/users", tags=["Users"])

    # ── Health Check ──────────────────────────────────────────────────────────
    @app.get("/health", tags=["Health"])
    def health_check():
        """Returns 200 if the application is running."""
        return {"status": "ok", "version": "1.0.0"}

    return app


app = create_app()
