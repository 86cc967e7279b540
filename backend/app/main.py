"""FastAPI application entry point"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from backend.app.core.config import settings
from backend.app.core.logging import setup_logging, get_logger
from backend.app.core.middleware import (
    RequestIDMiddleware,
    LoggingMiddleware,
    RateLimitMiddleware
)
from backend.app.core.exceptions import ReRankException
from backend.app.api import leaderboard, candidates, resumes, analytics, export, simulator

# Setup logging
setup_logging()
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
## ReRank - Candidate Ranking Platform

Ranks candidates by a composite score and serves leaderboards, search and
analytics over an in-memory candidate store.

### Features

* **Leaderboards**: Global, regional and industry rankings with percentiles and tiers
* **Search**: Filter candidates by skills, experience, industry, region and score range
* **Resume Rating**: Score a resume or create a candidate profile from one
* **Export**: Download the global leaderboard as CSV
* **Hiring Simulator**: Project the effect of new hires on a team

### Rate Limiting

API requests are rate-limited to {rate_limit} requests per minute per IP address.
    """.format(rate_limit=settings.RATE_LIMIT_PER_MINUTE),
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    openapi_tags=[
        {
            "name": "Leaderboard",
            "description": "Ranked candidate listings"
        },
        {
            "name": "Candidates",
            "description": "Candidate lookup and search"
        },
        {
            "name": "Resumes",
            "description": "Resume rating and profile uploads"
        },
        {
            "name": "Analytics",
            "description": "Platform-wide figures"
        },
        {
            "name": "Export",
            "description": "CSV downloads"
        },
        {
            "name": "Simulator",
            "description": "What-if hiring projections"
        },
    ],
)

# The last middleware added is the outermost, so CORS wraps everything and
# request IDs are assigned before logging and rate limiting run
app.add_middleware(RateLimitMiddleware, requests_per_minute=settings.RATE_LIMIT_PER_MINUTE)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestIDMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(ReRankException)
async def rerank_exception_handler(request: Request, exc: ReRankException):
    """Handle custom ReRank exceptions"""
    request_id = getattr(request.state, "request_id", "unknown")

    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"ReRank exception: {exc.message}",
        extra={
            "request_id": request_id,
            "status_code": exc.status_code,
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.message,
            "details": exc.details,
            "request_id": request_id,
        }
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    request_id = getattr(request.state, "request_id", "unknown")

    logger.warning(
        f"Validation error: {exc.errors()}",
        extra={"request_id": request_id}
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "message": "Validation error",
            "details": jsonable_encoder(exc.errors()),
            "request_id": request_id,
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle all other exceptions"""
    request_id = getattr(request.state, "request_id", "unknown")

    logger.error(
        f"Unhandled exception: {str(exc)}",
        extra={"request_id": request_id},
        exc_info=True
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "Internal server error",
            "details": {"message": "An unexpected error occurred"},
            "request_id": request_id,
        }
    )


@app.on_event("startup")
async def startup_event():
    """Application startup tasks"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown tasks"""
    logger.info("Shutting down application")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


# API routers
app.include_router(leaderboard.router, prefix=f"{settings.API_PREFIX}/leaderboard", tags=["Leaderboard"])
app.include_router(candidates.router, prefix=f"{settings.API_PREFIX}/candidates", tags=["Candidates"])
app.include_router(resumes.router, prefix=f"{settings.API_PREFIX}/resumes", tags=["Resumes"])
app.include_router(analytics.router, prefix=f"{settings.API_PREFIX}/analytics", tags=["Analytics"])
app.include_router(export.router, prefix=f"{settings.API_PREFIX}/export", tags=["Export"])
app.include_router(simulator.router, prefix=f"{settings.API_PREFIX}/simulator", tags=["Simulator"])
