# File: backend/app/api/v1/api.py
# Version: v0.8.0
"""
v1 API aggregator.

Routers included under /api:
- health

The primers router carries its own /api/v1/primers prefix and is mounted by
main.py directly.
"""
from __future__ import annotations

from fastapi import APIRouter

from . import health as health_router

api_router = APIRouter()
api_router.include_router(health_router.router)
