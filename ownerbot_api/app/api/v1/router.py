"""
Top‑level router for version 1 of the API.

Aggregates the chat webhook and the service directory routes under a
unified prefix.
"""

from fastapi import APIRouter

from .endpoints import chat, services

router = APIRouter()

router.include_router(chat.router, prefix="/chat", tags=["chat"])
router.include_router(services.router, prefix="/services", tags=["services"])
