from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging

from rssagg.api import health, users, feeds, feed_follows
from rssagg.core.config import settings
from rssagg.core.database import engine

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for the FastAPI app"""
    logger.info(f"Starting RSS aggregator API on port {settings.PORT}")

    yield

    logger.info("Shutting down RSS aggregator API")
    await engine.dispose()


def respond_with_error(code: int, msg: str) -> JSONResponse:
    if code >= 500:
        logger.error(f"Responding with 5XX error: {msg}")
    return JSONResponse(status_code=code, content={"error": msg})


# Create FastAPI app
app = FastAPI(
    title="RSS Aggregator API",
    description="""
## RSS Aggregator Backend API

Register users, register RSS feeds and follow the feeds you care about.

### Authentication

Authenticated endpoints expect `Authorization: ApiKey <key>`, where the key
is the `api_key` returned by `POST /v1/users`.

### Errors

Every error response has the shape `{"error": "<message>"}`.
    """,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Diagnostics", "description": "Health and error checks."},
        {"name": "Users", "description": "Register users and look up the current user."},
        {"name": "Feeds", "description": "Register and list RSS feeds."},
        {"name": "Feed Follows", "description": "Follow and unfollow feeds."},
    ]
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return respond_with_error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Undecodable bodies are reported as server errors
    logger.warning(f"Could not decode parameters for {request.url.path}: {exc.errors()}")
    return respond_with_error(500, "Could not decode parameters")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return respond_with_error(500, "Internal Server Error")


# Include routers
app.include_router(health.router)
app.include_router(users.router)
app.include_router(feeds.router)
app.include_router(feed_follows.router)
