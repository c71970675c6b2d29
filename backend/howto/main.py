"""
HowTo backend - FastAPI application
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from howto.common.config import get_credentials, init_credentials, settings
from howto.common.exceptions import HowToError
from howto.common.logging_config import setup_logging
from howto.domains.search.api import router as search_router
from howto.domains.search.service import close_services

setup_logging(
    log_level="DEBUG" if settings.debug else settings.log_level,
    log_dir=settings.log_dir,
    log_file_prefix="howto",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    logger.info("🚀 HowTo backend starting...")
    credentials = init_credentials(settings)
    logger.info(f"Providers configured: {credentials.status()}")

    yield

    logger.info("Application shutting down...")
    await close_services()


app = FastAPI(
    title="HowTo API",
    description="Videos, articles and AI guides for how-to questions",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HowToError)
async def howto_error_handler(request: Request, exc: HowToError):
    if exc.status_code >= 500:
        logger.error(f"{request.url.path} failed: {exc.message}", exc_info=exc)
    else:
        logger.info(f"{request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/health")
async def health_check():
    """Health check"""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "providers": get_credentials().status(),
    }


@app.get("/api/ping")
async def ping():
    return {"message": settings.ping_message}


@app.get("/api/demo")
async def demo():
    return {"message": "Hello from the HowTo backend"}


app.include_router(search_router, prefix="/api", tags=["search"])


def run() -> None:
    import uvicorn

    logger.info("📍 API Server: http://localhost:8080")
    logger.info("📚 API Docs: http://localhost:8080/docs")
    uvicorn.run("howto.main:app", host="0.0.0.0", port=8080, reload=settings.debug)


if __name__ == "__main__":
    run()
