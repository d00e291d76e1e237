# scanconsole/main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import uuid

from scanconsole.core.config import settings
from scanconsole.core.exceptions import ConsoleError
from scanconsole.core.logging import logger
from scanconsole.db.database import init_db, close_db
from scanconsole.services.search_client import create_http_client
from scanconsole.api.v1.router import api_router
from scanconsole.api import pages


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Scan Console API")
    await init_db()
    app.state.http_client = create_http_client()

    yield

    # Shutdown
    logger.info("Shutting down Scan Console API")
    await app.state.http_client.aclose()
    await close_db()


app = FastAPI(
    title="Scan Console API",
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url=("/api/docs" if settings.ENVIRONMENT == "development" else None),
    redoc_url=("/api/redoc" if settings.ENVIRONMENT == "development" else None),
    lifespan=lifespan
)

# Normalize CORS origins config (comma-separated string)
BACKEND_CORS_ORIGINS = [o.strip() for o in settings.BACKEND_CORS_ORIGINS.split(",") if o.strip()]

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request id and timing middleware
@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Process-Time"] = str(process_time)
    return response


# Include routers
app.include_router(api_router, prefix=settings.API_V1_STR)
app.include_router(pages.router, tags=["pages"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.exception_handler(ConsoleError)
async def console_error_handler(request: Request, exc: ConsoleError):
    """Request-scoped validation, lookup and search errors"""
    logger.info(
        f"Request failed: {exc.message}",
        extra={"request_id": getattr(request.state, "request_id", None), "status_code": exc.status_code},
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed path ids and bodies are reported as 400 with the offending fields"""
    error_fields = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        field = ".".join(location) or "request"
        error_fields[field] = error.get("msg", "invalid")

    message = "; ".join(f"{field}: {msg}" for field, msg in error_fields.items())
    return JSONResponse(
        status_code=400,
        content={"message": message, "error_fields": error_fields},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.exception("Unhandled exception while handling request", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )
