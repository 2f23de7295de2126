"""
Catalog Recommendation Service - Main FastAPI Application

Personalized game recommendations from a member's favorite tags, favorite
platforms and purchase history:
- Deterministic, explainable rule-based scoring
- Purchase and availability filtering
- Default catalog listing for members without stated preferences
- Rate Limiting
- Structured Logging
- Prometheus Metrics
"""

from fastapi import FastAPI, status, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text

from .config import settings
from .api import api_router
from .utils.database import init_db, SessionLocal
from .utils.logging import setup_logging, get_logger, configure_uvicorn_logging
from .utils.metrics import setup_metrics
from .utils.rate_limit import limiter

# Setup structured logging
setup_logging(log_level=settings.LOG_LEVEL)
configure_uvicorn_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""

    logger.info("Starting Catalog Recommendation Service", version=settings.VERSION)

    logger.info("Initializing database")
    init_db()

    logger.info("Catalog Recommendation Service started successfully")

    yield

    logger.info("Shutting down Catalog Recommendation Service")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    # Catalog Recommendation Service API

    Recommends games to members based on what they told us they like.

    ## Scoring

    Each game scores one point per favorite tag it carries and one point per
    favorite platform it is sold on (counted once per platform, however many
    editions share it). Games scoring zero are not recommended; ties keep
    catalog order.

    ## Exclusions

    - Games the member has already ordered
    - Games that are not for sale in any edition

    ## No preferences

    Members without favorite tags or platforms are redirected to the default
    game listing.
    """,
    lifespan=lifespan,
    openapi_tags=[
        {"name": "games", "description": "Default catalog listing"},
        {"name": "recommendations", "description": "Personalized recommendations and explanations"},
    ]
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Setup Prometheus metrics
setup_metrics(app)

# Include routers
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests"""
    logger.info(
        "Request received",
        method=request.method,
        url=str(request.url),
        client=request.client.host if request.client else None
    )

    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code
    )

    return response


@app.get("/", tags=["root"])
def root():
    """Root endpoint"""
    return {
        "message": "Catalog Recommendation Service API",
        "version": settings.VERSION,
        "docs": "/docs",
        "status": "operational"
    }


@app.get("/health", tags=["root"], status_code=status.HTTP_200_OK)
def health_check():
    """Health check endpoint"""

    db_healthy = True
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        db_healthy = False
    finally:
        db.close()

    return {
        "status": "healthy" if db_healthy else "degraded",
        "database": "connected" if db_healthy else "disconnected",
        "version": settings.VERSION
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_recommender.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
