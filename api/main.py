"""FastAPI application configuration.

Main entry point for the Password Check REST API.
Implements security headers, optional HTTPS enforcement, restrictive CORS
configuration and validation errors that never echo submitted values.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import health_router, tools_router
from core.config import (
    CORS_ALLOWED_ORIGINS,
    LOG_LEVEL,
    REQUIRE_HTTPS,
    SERVICE_NAME,
    SERVICE_VERSION,
)


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    logger.info("%s %s starting", SERVICE_NAME, SERVICE_VERSION)
    yield
    logger.info("%s shutting down", SERVICE_NAME)


app = FastAPI(
    title=SERVICE_NAME,
    description="""
    Password check API with:
    - zxcvbn strength estimation
    - HaveIBeenPwned breach detection (k-Anonymity, hash prefix only)
    - Generated replacement passwords verified against known breaches
    - SIEM-compatible logging
    """,
    version=SERVICE_VERSION,
    lifespan=lifespan
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report invalid fields without echoing the submitted values."""
    fields = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        fields.append(location or "body")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "validation_error", "fields": sorted(set(fields))}
    )


# HTTPS enforcement middleware
@app.middleware("http")
async def enforce_https(request: Request, call_next) -> Response:
    """Enforce HTTPS connections when REQUIRE_HTTPS is enabled.

    When enabled (via REQUIRE_HTTPS=true environment variable), rejects
    all non-HTTPS requests to the password endpoint. Health checks are
    exempted to allow load balancer probes.

    SECURITY: submitted passwords and generated replacements travel in
    request and response bodies. Enable this in production.
    """
    if REQUIRE_HTTPS:
        # Allow health checks over HTTP for load balancer probes
        if request.url.path in ["/", "/health"]:
            return await call_next(request)

        # X-Forwarded-Proto is set by reverse proxies (nginx, traefik, etc.)
        forwarded_proto = request.headers.get("X-Forwarded-Proto", "")
        is_https = (
            request.url.scheme == "https" or
            forwarded_proto.lower() == "https"
        )

        if not is_https:
            return JSONResponse(
                status_code=403,
                content={
                    "detail": "HTTPS required. This API requires secure connections.",
                    "error": "https_required"
                }
            )

    return await call_next(request)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """Add security headers to all responses.

    Headers follow OWASP security recommendations:
    - X-Content-Type-Options: Prevents MIME-type sniffing
    - X-Frame-Options: Prevents clickjacking attacks
    - Content-Security-Policy: Restricts resource loading
    - Referrer-Policy: Controls referrer information leakage
    - Cache-Control: Responses may carry a freshly generated password
    - Permissions-Policy: Restricts browser features
    """
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none'"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

    # Never cache: bodies may contain a generated password
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
    response.headers["Pragma"] = "no-cache"

    response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"

    return response


# CORS configuration - explicitly restricted
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Accept",
        "Origin",
        "X-Requested-With",
    ],
    max_age=600,  # Cache preflight requests for 10 minutes
)

# Register routers
app.include_router(health_router)
app.include_router(tools_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
