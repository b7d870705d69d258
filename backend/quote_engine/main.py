# backend/quote_engine/main.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from sqlalchemy.exc import TimeoutError as SA_TimeoutError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import api_admin, api_quote, api_service
from .core.config import settings
from .core.observability import setup_logging
from .database import init_db

setup_logging()
logger = logging.getLogger(__name__)

init_db()

# Always use ORJSONResponse for JSON payloads
app = FastAPI(title="Quote Pricing API", default_response_class=ORJSONResponse)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Cache-Control"],
)
logger.info("CORS origins set to: %s", settings.CORS_ORIGINS)


@app.middleware("http")
async def catch_exceptions(request: Request, call_next):
    """Return JSON responses for HTTP errors and log them."""
    try:
        response = await call_next(request)
    except StarletteHTTPException as exc:
        logger.error(
            "HTTP error %s at %s: %s", exc.status_code, request.url.path, exc.detail
        )
        response = ORJSONResponse(
            status_code=exc.status_code, content={"detail": exc.detail}
        )
    except SA_TimeoutError as exc:
        logger.error("DB timeout at %s: %s", request.url.path, str(exc))
        response = ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Database busy, please retry"},
        )
    except Exception as exc:  # pragma: no cover - generic handler
        logger.exception("Unhandled error: %s", exc)
        response = ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return validation errors in the standard ``message``/``field_errors`` shape.

    The raw pydantic errors stay available under ``errors`` for debugging.
    """
    errors = exc.errors()
    logger.warning("Validation error at %s: %s", request.url.path, errors)

    field_errors: dict[str, str] = {}
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        # Union members add their tag to the location; keep the field name
        if loc and loc[0] in ("development", "design", "marketing", "general"):
            loc = loc[1:]
        field_errors.setdefault(".".join(loc) or "body", err.get("msg", "invalid"))

    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": {
                "message": "Validation failed",
                "field_errors": field_errors,
                "errors": jsonable_encoder(errors),
            }
        },
    )


@app.get("/healthz", tags=["health"])
async def healthz():
    return {"status": "ok"}


api_prefix = settings.API_V1_STR  # usually "/api/v1"

app.include_router(api_service.router, prefix=f"{api_prefix}/services", tags=["services"])
app.include_router(api_quote.router, prefix=f"{api_prefix}/quotes", tags=["quotes"])
app.include_router(api_admin.router, prefix=api_prefix)
