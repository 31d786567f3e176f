# app/main.py
"""
FastAPI application entry point.
Includes CORS, rate limiting, security headers, request timing, error handlers and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from app.routers import realtime, trends, dashboard, health
from app.config import settings
from app.services.settings_store import SettingsStore
from app.utils.errors import ApiError, NotFoundError
from app.utils.logger import get_logger
from app.utils.rate_limit import FixedWindowRateLimiter
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Parking Availability API",
    description="Real-time bay sensor occupancy, parking trends and population statistics.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.state.settings_store = SettingsStore()
app.state.rate_limiter = FixedWindowRateLimiter(settings.RATE_LIMIT_WINDOW_MS, settings.RATE_LIMIT_MAX)


# ── Rate Limit Middleware ────────────────────────────────────────────────────
class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Fixed window per client IP (RATE_LIMIT_MAX requests per RATE_LIMIT_WINDOW_MS).
    Sends RateLimit-* headers on every response.
    """
    async def dispatch(self, request: Request, call_next):
        limiter = request.app.state.rate_limiter
        client = request.client.host if request.client else "unknown"
        allowed, remaining, reset = limiter.hit(client)
        headers = {
            "RateLimit-Limit": str(limiter.max_requests),
            "RateLimit-Remaining": str(remaining),
            "RateLimit-Reset": str(reset),
        }
        if not allowed:
            logger.warning(f"Rate limit exceeded for {client} on {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"error": {"code": "TooManyRequests",
                                   "message": "Too many requests, please try again later."}},
                headers=headers,
            )
        response = await call_next(request)
        response.headers.update(headers)
        return response


app.add_middleware(RateLimitMiddleware)

# ── CORS (web client origin from CORS_ORIGIN) ────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Security Headers ─────────────────────────────────────────────────────────
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Resource-Policy": "same-origin",
}


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.info(f"Bad request on {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": {"code": "BadRequest", "message": message}},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return await api_error_handler(request, NotFoundError(f"Not Found - {request.url.path}"))
    body = {"error": {"code": "HttpError", "message": str(exc.detail)}}
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "InternalError", "message": "Internal server error"}},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(realtime.router,  prefix="/api/realtime", tags=["Real-time"])
app.include_router(trends.router,    prefix="/api/trends",   tags=["Trends"])
app.include_router(dashboard.router, prefix="/api",          tags=["Dashboard"])
app.include_router(health.router,    prefix="/api",          tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("Parking API starting up...")
    if settings.USE_MOCK_DATA:
        logger.info("Data source: mock generator (USE_MOCK_DATA=true)")
    else:
        logger.info(f"Data source: {settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}")
    logger.info(f"CORS origins: {settings.cors_origins}")
    logger.info(f"Rate limit: {settings.RATE_LIMIT_MAX} requests / {settings.RATE_LIMIT_WINDOW_MS}ms")
    logger.info(f"Listening on port {settings.PORT}, API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Parking API shutting down...")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
