"""
Main application entry point.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from worklog.core.config import settings, print_config_info
from worklog.core.errors import AppError, RateLimitError, ValidationError
from worklog.db.mongodb import mongodb
from worklog.schemas.response import error_response, success_response

# Import API routers
from worklog.api.employers.router import router as employers_router
from worklog.api.shifts.router import router as shifts_router
from worklog.api.adjustments.router import router as adjustments_router

# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Request parts as named in validation error details
REQUEST_PARTS = {"body": "Body", "query": "Query", "path": "Params", "header": "Headers"}

HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Track employers, shifts and pay adjustments; computes shift pay and daily/monthly totals.",
    version="1.0.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render application errors in the error envelope."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    details = exc.details if isinstance(exc, ValidationError) else None
    headers = {"Retry-After": str(exc.retry_after)} if isinstance(exc, RateLimitError) else None

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, exc.code, details),
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report request validation problems as 400 with per-field details."""
    details = []
    for error in exc.errors():
        location = list(error.get("loc", ()))
        part = REQUEST_PARTS.get(location[0], str(location[0])) if location else "Request"
        details.append({
            "part": part,
            "message": error.get("msg", "Invalid value"),
            "path": ".".join(str(item) for item in location[1:]),
        })

    logger.warning(f"Validation failed on {request.method} {request.url.path}: {details}")
    return JSONResponse(
        status_code=400,
        content=error_response("Validation failed", "VALIDATION_ERROR", details),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render framework HTTP errors (unknown route, wrong method) in the error envelope."""
    code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail), code),
        headers=getattr(exc, "headers", None),
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=error_response("An unexpected error occurred", "UNKNOWN_ERROR"),
    )


# Startup and shutdown events
@app.on_event("startup")
async def startup_event():
    """Event triggered on application startup."""
    print_config_info()

    if settings.DOCUMENT_STORE == "mongodb":
        mongodb.connect_to_mongodb()

    logger.info("Application started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Event triggered on application shutdown."""
    await mongodb.close_mongodb_connection()

    logger.info("Application shutdown")


# Include API routers
app.include_router(employers_router, prefix=f"{settings.API_V1_STR}/employers", tags=["employers"])
app.include_router(shifts_router, prefix=f"{settings.API_V1_STR}/shifts", tags=["shifts"])
app.include_router(adjustments_router, prefix=f"{settings.API_V1_STR}/adjustments", tags=["adjustments"])


@app.get(f"{settings.API_V1_STR}/health", tags=["health"])
async def health_check():
    """Liveness probe; no authentication required."""
    return success_response(None, "OK")


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": f"Welcome to {settings.PROJECT_NAME} API"}
