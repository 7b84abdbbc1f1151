import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api import members
from .config.logging import configure_logging
from .config.settings import settings
from .exceptions import ApplicationError, DuplicateMemberError, NotFoundError, ValidationError
from .models.database import engine, Base

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    openapi_tags=[{"name": "Member", "description": "Member registration and updates"}],
)

ERROR_STATUS = {
    ValidationError: 422,
    NotFoundError: 404,
    DuplicateMemberError: 409,
}

@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)

@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), 400)
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "details": exc.details},
    )

@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    invalid_fields = {
        ".".join(str(part) for part in error["loc"]): error["msg"]
        for error in exc.errors()
    }
    logger.warning("%s %s rejected: %s", request.method, request.url.path, invalid_fields)
    return JSONResponse(
        status_code=422,
        content={"detail": "Request validation failed", "details": {"invalid_fields": invalid_fields}},
    )

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(
    members.router,
    prefix="/api",
    tags=["Member"],
)
