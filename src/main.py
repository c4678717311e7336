"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api import auth, posts
from src.config import get_settings
from src.database import init_db
from src.errors import AppError, InternalError, ValidationError

settings = get_settings()

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging(settings.log_level)
    if settings.create_tables_on_startup:
        logger.info("Creating database tables")
        init_db()
    yield


app = FastAPI(
    title="Blog API",
    description="Users, session tokens and user-owned blog posts",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth.router)
app.include_router(posts.router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as a list of field errors."""
    errors = []
    for error in exc.errors():
        loc = error.get("loc", ())
        errors.append(
            {
                "msg": error["msg"],
                "param": str(loc[-1]) if len(loc) > 1 else "",
                "location": str(loc[0]) if loc else "body",
            }
        )
    validation_error = ValidationError(errors)
    return JSONResponse(
        status_code=validation_error.status_code, content=validation_error.to_dict()
    )


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> PlainTextResponse:
    logger.exception(f"Storage error on {request.method} {request.url.path}")
    return PlainTextResponse(InternalError.default_msg, status_code=InternalError.status_code)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return PlainTextResponse(InternalError.default_msg, status_code=InternalError.status_code)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Plain text acknowledgement."""
    return "http get request sent to root api endpoint"


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
