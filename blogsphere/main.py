import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blogsphere.api.blog import router as blog_router
from blogsphere.api.follows import router as follows_router
from blogsphere.api.interactions import router as interactions_router
from blogsphere.api.users import router as users_router
from blogsphere.config import Settings, get_settings
from blogsphere.database import init_db
from blogsphere.schemas import format_validation_error

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Failed validation answers 411, not FastAPI's default 422
VALIDATION_STATUS_CODE = 411


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Connected to the database")
    yield
    logger.info("Disconnected from database")


def health_check():
    return {"status": "ok"}


async def envelope_http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=VALIDATION_STATUS_CODE,
        content={"error": format_validation_error(exc.errors())},
    )


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(
        title="Blogsphere API",
        description="Blogging backend: users, posts, likes, comments, saves and follows.",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if settings.env == "prod" else "/docs",
        redoc_url=None if settings.env == "prod" else "/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_api_route("/health", health_check, methods=["GET"])

    app.include_router(users_router, prefix="/api/v1")
    app.include_router(blog_router, prefix="/api/v1")
    app.include_router(interactions_router, prefix="/api/v1")
    app.include_router(follows_router, prefix="/api/v1")

    app.add_exception_handler(StarletteHTTPException, envelope_http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    return app


app = create_app(settings)
