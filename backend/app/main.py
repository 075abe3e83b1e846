from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from app.config import settings
from app.database import init_db
from app.exceptions import BMITrackerError, ValidationError
from app.routers import auth, users, logs
from app.routers.deps import get_google_client


# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup
    await init_db()
    logger.info(f"{settings.APP_NAME} started")

    yield

    # Shutdown
    await get_google_client().close()


app = FastAPI(
    title=settings.APP_NAME,
    description="Daily weight log with BMI trend - identity reconciliation and measurement ingestion",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BMITrackerError)
async def bmi_tracker_error_handler(request: Request, exc: BMITrackerError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected ({exc.code}): {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "detail": exc.detail},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"{request.method} {request.url.path} rejected (validation_error): {exc.errors()}")
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"error": ValidationError.code, "detail": jsonable_encoder(exc.errors())},
    )


# Include routers
app.include_router(auth.router, prefix=f"{settings.API_V1_PREFIX}/auth", tags=["Authentication"])
app.include_router(auth.callback_router, tags=["Authentication"])
app.include_router(users.router, prefix=f"{settings.API_V1_PREFIX}/user", tags=["Users"])
app.include_router(logs.router, prefix=f"{settings.API_V1_PREFIX}/logs", tags=["Measurement Logs"])


@app.get("/")
async def root():
    return {
        "app": settings.APP_NAME,
        "version": "1.0.0",
        "status": "healthy",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
