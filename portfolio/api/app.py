"""
FastAPI application for the portfolio and blog.
"""

import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portfolio.config import config
from portfolio.api.routes import router
from portfolio.db.database import DATABASE_URL
from portfolio.utils.logger import logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the runtime setup. The blogs table is created lazily on first use."""
    backend = DATABASE_URL.split(":", 1)[0]
    logging.info(f"{config.APP_NAME} v{config.APP_VERSION} starting (database: {backend}, debug: {config.DEBUG})")
    yield


# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for a personal portfolio, its blog, and AI-drafted posts from YouTube videos",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": f"An unexpected error occurred: {str(exc)}"},
    )


# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "Portfolio & Blog API",
    }
