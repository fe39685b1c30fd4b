"""Main FastAPI application for the Todo API."""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app import config
from app.db.init import init_db
from app.errors import AuthError, TodoAppError
from app.middleware.cors import add_cors_middleware
from app.routers import todos_router, users_router
from app.utils.logger import configure_logging

configure_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database tables on startup."""
    if config.JWT_SECRET == config.DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is not set; using the development secret")
    try:
        init_db()
        logger.info("Database tables initialized successfully.")
    except Exception as e:
        logger.warning(f"Database initialization failed: {e}")
        logger.warning("Server will continue but database operations may fail.")
    yield


# Create FastAPI application
app = FastAPI(
    title="Todo API",
    description="User registration/login and per-user todo CRUD",
    version=VERSION,
    lifespan=lifespan,
)

# Add CORS middleware
add_cors_middleware(app)


@app.exception_handler(TodoAppError)
async def todo_app_error_handler(request: Request, exc: TodoAppError):
    """Translate service errors to ``{"error": message}`` responses."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors, reported with the common error shape."""
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


@app.get("/")
async def root():
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to the Todo API",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health",
    }


app.include_router(users_router, prefix="/api")  # /api/users/register, /api/users/login
app.include_router(todos_router, prefix="/api")  # /api/todos, /api/todos/{todo_id}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
