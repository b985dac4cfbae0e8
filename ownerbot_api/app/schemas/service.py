"""
Pydantic models for service directory entries.

The directory itself stores plain dictionaries in the persisted JSON
document; these models describe that shape for the REST endpoints.
"""

from typing import List

from pydantic import BaseModel, Field


class ServiceRecord(BaseModel):
    """A single directory entry."""

    name: str = Field(..., example="NinjaPanel")
    owner: str = Field(..., example="Internal Tools")
    room: str = Field(..., example="Internal Tools")
    url: str = Field(..., example="https://chat.google.com/room/abc")
    aliases: List[str] = Field(default_factory=list, example=["np"])


class DirectoryDocument(BaseModel):
    """The whole persisted directory."""

    services: List[ServiceRecord]
    version: int
