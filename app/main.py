# app/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import get_settings
from app.api import api_router
from app.database import SessionLocal, init_db
from app.services.genre_service import GenreService

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.seed_genres:
        db = SessionLocal()
        try:
            GenreService(db).seed_default_genres(settings.default_genres)
        finally:
            db.close()
    logger.info("%s started", settings.app_name)

    yield

    logger.info("%s stopped", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Movie records with genre lookup and poster upload",
    version="1.0.0",
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed input is a client error (400), not 422"""
    logger.warning("invalid request %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


app.include_router(api_router, prefix="/api")


@app.get("/")
def read_root():
    """Service root"""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
    }

# uvicorn app.main:app --reload
