import logging
from datetime import datetime
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.database import create_db_and_tables
from core.exceptions import AppError
from schemas.response_schema import ApiResponse
from routes.projects import router as project_router
from routes.tasks import router as tasks_router

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


# =========================================
# 🏁 Lifespan (DB initialization)
# =========================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    logger.info("✅ Database tables created on startup.")
    yield
    logger.info("✅ Application shutting down.")

# =========================================
#  ✅ FastAPI App
# =========================================
app = FastAPI(lifespan=lifespan, title="TaskBoard API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# =========================================
# ❗ Error envelope: { success: false, message, error? }
# =========================================
def _error_response(status_code: int, message: str, error=None) -> JSONResponse:
    body = ApiResponse(success=False, message=message, error=jsonable_encoder(error))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    # Non-numeric path ids
    for err in errors:
        loc = err.get("loc", ())
        if len(loc) == 2 and loc[0] == "path":
            name = str(loc[1]).replace("_id", "")
            return _error_response(status.HTTP_400_BAD_REQUEST, f"Invalid {name} ID")
    return _error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"❌ Database error on {request.method} {request.url.path}: {exc}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "A database error occurred.",
        str(exc) if settings.DEBUG else None,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Unexpected error on {request.method} {request.url.path}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred.",
        str(exc) if settings.DEBUG else None,
    )


# =========================================
# 📦 Routers
# =========================================
app.include_router(project_router, prefix="/api/projects", tags=["Projects"])
app.include_router(tasks_router, prefix="/api/projects/{project_id}/tasks", tags=["Tasks"])


# =========================================
# 🩺 Health Check
# =========================================
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "Backend is running"}


@app.get("/api")
def api_root():
    return {"message": "API Working!", "version": app.version, "timestamp": datetime.utcnow().isoformat()}


@app.get("/")
def read_root():
    return {"message": "API is running!", "version": app.version}
