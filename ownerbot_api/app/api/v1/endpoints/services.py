"""
Read-only service directory endpoints for API v1.

These routes expose the same data as the ``export`` and query chat
commands for scripts and dashboards.  Changes go through the chat
commands only.  Both routes require the chat token as a Bearer token.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from ownerbot_api.app.core.security import get_store, require_api_token
from ownerbot_api.app.schemas.service import DirectoryDocument, ServiceRecord
from ownerbot_api.app.services.service_directory import ServiceDirectory

router = APIRouter()


async def load_directory(store: Any = Depends(get_store)) -> ServiceDirectory:
    directory = ServiceDirectory(store)
    await directory.init()
    return directory


@router.get("/", response_model=DirectoryDocument)
async def export_services(
    token: str = Depends(require_api_token),
    directory: ServiceDirectory = Depends(load_directory),
) -> DirectoryDocument:
    """Return the whole directory document."""
    return DirectoryDocument(**directory.export())


@router.get("/{name}", response_model=ServiceRecord)
async def get_service(
    name: str,
    token: str = Depends(require_api_token),
    directory: ServiceDirectory = Depends(load_directory),
) -> ServiceRecord:
    """Retrieve a service by name or alias (case-insensitive).

    Returns HTTP 404 if nothing matches.
    """
    service = directory.find(name)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return ServiceRecord(**service)
