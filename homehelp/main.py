import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Import models so every table is registered with Base before create_all
from . import models  # noqa: F401
from .config import AUTH_MODE, DEFAULT_USER_ID, FRONTEND_URL
from .database import Base, SessionLocal, engine
from .domain.bookings.router import router as bookings_router
from .domain.catalog.router import router as catalog_router
from .domain.favorites.router import router as favorites_router
from .domain.messages.router import router as messages_router
from .domain.users.router import router as users_router
from .security_headers import SecurityHeadersMiddleware
from .seed import seed_catalog, seed_demo_user

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SECURITY_HEADERS_ENABLED = os.getenv("SECURITY_HEADERS_ENABLED", "true").lower() == "true"
SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").lower() == "true"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        # Ignore "already exists" errors from race conditions between workers
        error_msg = str(e)
        if "already exists" in error_msg or "duplicate key" in error_msg:
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")
            raise

    if SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_catalog(db)
            if AUTH_MODE == "none":
                seed_demo_user(db, DEFAULT_USER_ID)
        finally:
            db.close()

    if AUTH_MODE == "none":
        logger.warning(
            f"AUTH_MODE=none - every request acts as user {DEFAULT_USER_ID}. Never use in production!"
        )

    yield
    logger.info("Application shutting down...")


app = FastAPI(title="HomeHelp API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log request validation failures and return the usual 422 body"""
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise


if SECURITY_HEADERS_ENABLED:
    app.add_middleware(
        SecurityHeadersMiddleware, exclude_paths=["/health", "/docs", "/openapi.json"]
    )
    logger.info("Security headers enabled")
else:
    logger.warning("Security headers DISABLED - only use in development!")


# CORS Configuration
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    f"{FRONTEND_URL},http://localhost:3000",
).split(",")

logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Routes
app.include_router(users_router)
app.include_router(catalog_router)
app.include_router(bookings_router)
app.include_router(favorites_router)
app.include_router(messages_router)


@app.get("/")
def root():
    return {"message": "HomeHelp API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
