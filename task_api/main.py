from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__, config
from .database import MongoDB
from .errors import (
    IdentifierDecodeError,
    NotFoundError,
    PersistenceError,
    TaskApiError,
    ValidationError,
)
from .logging_config import configure_logging, get_logger
from .routers import comments, profiles, tasks
from .schemas.common import ErrorResponse
from .services import CommentService, ProfileService, TaskManager

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open MongoDB, wire the services, and close the connection on shutdown."""
    configure_logging(log_level=config.LOG_LEVEL, environment=config.SERVER_TYPE)

    mongo = MongoDB()
    await mongo.open()
    try:
        await mongo.status()
    except PersistenceError:
        await mongo.close(force=True)
        raise
    logger.info("Connected to MongoDB database %s", mongo.db_name)

    app.state.mongo = mongo
    app.state.task_service = TaskManager(mongo.get_collection(config.TASKS_COLLECTION))
    app.state.comment_service = CommentService(mongo.get_collection(config.COMMENTS_COLLECTION))
    app.state.profile_service = ProfileService(mongo.get_collection(config.PROFILES_COLLECTION))

    yield

    logger.info("Shutting down...")
    await mongo.close()
    logger.info("MongoDB connection closed")


app = FastAPI(
    title="Task Manager API",
    description="Tasks with a status lifecycle, soft archival, comments and owner profiles",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tasks.router, tags=["tasks"])
app.include_router(comments.router, tags=["comments"])
app.include_router(profiles.router, tags=["profiles"])
app.include_router(tasks.account_router, prefix="/account", tags=["tasks"])
app.include_router(comments.account_router, prefix="/account", tags=["comments"])


def _error_response(code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=code, content=ErrorResponse(status=code, error_msg=message).model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        field = ".".join(str(loc) for loc in errors[0]["loc"])
        message = f"{field}: {errors[0]['msg']}"
    else:
        message = "Invalid request"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(TaskApiError)
async def service_exception_handler(request: Request, exc: TaskApiError):
    if isinstance(exc, ValidationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    if isinstance(exc, NotFoundError):
        return _error_response(status.HTTP_404_NOT_FOUND, str(exc))
    if isinstance(exc, (PersistenceError, IdentifierDecodeError)):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def get_mongo(request: Request) -> MongoDB:
    return request.app.state.mongo


@app.get("/health")
async def health_check(mongo: MongoDB = Depends(get_mongo)):
    await mongo.status()
    return {"status": "healthy"}
