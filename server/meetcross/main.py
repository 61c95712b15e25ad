import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import meetcross.models  # noqa: F401
from meetcross.core.config import ConfigurationError, require_service_config, settings
from meetcross.core.db import get_engine
from meetcross.core.errors import AuthError, GatewayError, InvalidRecordError, RecordNotFoundError
from meetcross.routers import announcements as announcements_router
from meetcross.routers import auth as auth_router
from meetcross.routers import dashboard as dashboard_router
from meetcross.routers import donations as donations_router
from meetcross.routers import events as events_router
from meetcross.routers import families as families_router
from meetcross.routers import members as members_router
from meetcross.routers import settings as settings_router
from meetcross.routers import users as users_router

app = FastAPI(title="Meetcross API", version="0.1.0")

logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router)
app.include_router(members_router.router)
app.include_router(families_router.router)
app.include_router(events_router.router)
app.include_router(donations_router.router)
app.include_router(announcements_router.router)
app.include_router(users_router.router)
app.include_router(settings_router.router)
app.include_router(dashboard_router.router)

AUTH_BAD_REQUEST_CODES = {"email_taken", "weak_password"}


@app.on_event("startup")
def check_service_configuration() -> None:
    """Refuse to serve until the endpoint and key are configured."""

    try:
        require_service_config()
    except ConfigurationError as exc:
        logger.critical("service_configuration_missing", extra={"missing": exc.missing})
        raise
    get_engine()


@app.exception_handler(RecordNotFoundError)
async def handle_not_found(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc), "code": exc.code})


@app.exception_handler(InvalidRecordError)
async def handle_invalid_record(request: Request, exc: InvalidRecordError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc), "code": exc.code})


@app.exception_handler(GatewayError)
async def handle_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
    logger.error("operation_failed", extra={"path": request.url.path, "error": str(exc)})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc), "code": exc.code},
    )


@app.exception_handler(AuthError)
async def handle_auth_error(request: Request, exc: AuthError) -> JSONResponse:
    if exc.code in AUTH_BAD_REQUEST_CODES:
        status_code = status.HTTP_400_BAD_REQUEST
    elif exc.code == "network_error":
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        status_code = status.HTTP_401_UNAUTHORIZED
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "code": exc.code})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "environment": settings.ENVIRONMENT}
