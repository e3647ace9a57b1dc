import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from signup_api.core.config import settings
from signup_api.core.errors import RegistrationValidationError
from signup_api.core.i18n import get_translator
from signup_api.core.logging import setup_logging
from signup_api.db.base import Base
from signup_api.db.sessions import engine
from signup_api.routes import users
from signup_api.services.validation import FIELD_ORDER

# Import all models to ensure they're registered with Base
import signup_api.models

setup_logging()
logger = logging.getLogger(__name__)

# Create tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="User registration with localized validation messages"
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(users.router)


def _validation_response(request: Request, errors: dict) -> JSONResponse:
    translate = get_translator(request)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"validationErrors": {field: translate(key) for field, key in errors.items()}},
    )


@app.exception_handler(RegistrationValidationError)
async def registration_error_handler(request: Request, exc: RegistrationValidationError):
    return _validation_response(request, exc.errors)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part != "body"]
        field = loc[0] if loc and isinstance(loc[0], str) else "body"
        errors.setdefault(field, "field_invalid")
    ordered = {field: errors[field] for field in FIELD_ORDER if field in errors}
    ordered.update({field: key for field, key in errors.items() if field not in ordered})
    logger.warning("Malformed registration body: %s", list(ordered))
    return _validation_response(request, ordered)


@app.on_event("startup")
async def startup_event():
    logger.info("%s v%s starting", settings.APP_NAME, settings.APP_VERSION)


@app.get("/health")
def health():
    return {"status": "ok"}
