"""FastAPI service for the contacts proxy."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from api.dependencies import allowed_origins, get_settings
from api.routers import contacts_router
from contacts_proxy import __version__
from contacts_proxy.config import ConfigError
from contacts_proxy.errors import ContactsProxyError, UpstreamError

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Contacts Proxy API",
    version=__version__,
    description="Normalizing, revision-checked proxy in front of Wix Contacts.",
)


@app.middleware("http")
async def log_contact_requests(request: Request, call_next):
    if request.url.path.startswith("/api/contacts"):
        logger.info("--> %s %s", request.method, request.url.path)
    try:
        return await call_next(request)
    except Exception:
        # Unclassified failures still answer with the envelope, inside CORS.
        logger.exception("%s %s error", request.method, request.url.path)
        return error_response(500, "Server error")


# Added last so it wraps every other middleware, including error responses.
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins(get_settings()),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Error Envelope
# =============================================================================

def error_response(status_code: int, error: str, details=None, **extra) -> JSONResponse:
    body = {"error": error}
    if details is not None:
        body["details"] = details
    body.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


@app.exception_handler(ContactsProxyError)
async def handle_proxy_error(request: Request, exc: ContactsProxyError) -> JSONResponse:
    logger.error("%s %s error: %s", request.method, request.url.path, exc)
    if isinstance(exc, UpstreamError):
        return error_response(
            exc.status_code, exc.message, exc.details, upstreamStatus=exc.status
        )
    return error_response(exc.status_code, exc.message, exc.details)


@app.exception_handler(ConfigError)
async def handle_config_error(request: Request, exc: ConfigError) -> JSONResponse:
    logger.error("%s %s error: %s", request.method, request.url.path, exc)
    return error_response(503, str(exc))


@app.exception_handler(RequestValidationError)
async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("%s %s rejected: invalid request", request.method, request.url.path)
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return error_response(400, "Invalid request.", details)


# =============================================================================
# Routes
# =============================================================================

@app.get("/health")
def health_check() -> dict:
    """Liveness only; does not call Wix."""
    return {"ok": True}


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Wix Contacts proxy - use /api/contacts"


app.include_router(contacts_router, prefix="/api/contacts", tags=["contacts"])
