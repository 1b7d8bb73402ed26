# File: backend/app/main.py
# Version: v0.4.1
"""
FastAPI app entry.

- Keeps route assembly for /api/* in backend/app/api/v1/api.py.
- Mounts the LAMP primers router (/api/v1/primers/*).
- Root logging level comes from Settings.LOG_LEVEL.
- `python -m backend.app.main` (or `mirlamp-api`) serves on Settings.HOST:PORT.
"""
from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api.v1.api import api_router
from backend.app.api.v1.primers.router import router as primers_router
from backend.app.core.config import settings

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    version=settings.APP_VERSION,
    openapi_url="/api/openapi.json",
    docs_url="/api/docs",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(primers_router)


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


# APIs under /api
app.include_router(api_router, prefix=settings.API_PREFIX)


def run() -> None:
    """Serve the app with uvicorn on Settings.HOST / Settings.PORT."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
