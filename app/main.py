"""FastAPI application entrypoint. No business logic; only wiring, middleware and error translation."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import router as v1_router
from app.core import settings
from app.services.errors import ServiceError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Geodata API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Translate service errors to a status code and {"detail": message}."""
    if exc.status_code >= 500:
        logger.error(
            "Request failed: %s",
            type(exc).__name__,
            extra={"path": request.url.path, "method": request.method},
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or incomplete request input is a 400 with a field-agnostic message."""
    logger.debug(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return JSONResponse(status_code=400, content={"detail": "Missing or invalid fields"})


app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Geodata API"}
