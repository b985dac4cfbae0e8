"""
Service directory backed by a single JSON document.

The directory is a list of service records (name, owner, room, url and
aliases) plus a version counter, stored as one JSON document under a
fixed key in a key/value store.  A fresh ``ServiceDirectory`` is built
for every chat message: ``init()`` loads the document, commands read
or mutate the in-memory list, and every successful mutation writes the
whole document back with the version bumped by one.

Names and aliases are compared case-insensitively and must be unique
across the whole directory.  Uniqueness is checked when a service is
added; documents loaded from the store are trusted as-is.

There is no locking between requests.  Two concurrent mutations both
read the same document and the last write wins; the version counter is
incremented but never compared against the version that was read.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from ownerbot_api.app.core.config import settings
from ownerbot_api.app.core.errors import ConflictError, UninitializedError, ValidationError


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "owner", "room", "url", "aliases")


class ServiceDirectory:
    """CRUD over the persisted service directory."""

    def __init__(self, store: Any, key: Optional[str] = None) -> None:
        self.store = store
        self.key = key or settings.services_key
        self.services: List[Dict[str, Any]] = []
        self.version = 0
        self._initialized = False

    async def init(self) -> None:
        """Load the directory document from the store.

        A missing document yields an empty directory.  The version
        defaults to 1 when the stored document has none.
        """
        raw = await self.store.get(self.key)
        logger.debug("Loaded directory document: %s", raw)
        document = json.loads(raw) if raw else {}
        self.services = document.get("services") or []
        self.version = document.get("version") or 1
        self._initialized = True
        logger.info("%d services (v%d)", len(self.services), self.version)

    def get(self, name_or_alias: str) -> Optional[Dict[str, Any]]:
        """Look up a service by name or alias, failing if not loaded."""
        self._ensure_initialized()
        logger.info("Get %s", name_or_alias)
        return self.find(name_or_alias)

    def find(self, name_or_alias: str) -> Optional[Dict[str, Any]]:
        """Return the first service whose name or any alias matches.

        Matching is case-insensitive and follows stored order.
        """
        self._ensure_initialized()
        for service in self.services:
            if self._is_match(service, name_or_alias):
                logger.debug("Match %s", name_or_alias)
                return service
        return None

    def find_index_by_name(self, name: str) -> int:
        """Return the index of the service named ``name`` or -1.

        Aliases are never considered.
        """
        self._ensure_initialized()
        wanted = name.casefold()
        for idx, service in enumerate(self.services):
            if service["name"].casefold() == wanted:
                return idx
        return -1

    async def add(self, service: Union[BaseModel, Dict[str, Any]]) -> int:
        """Validate, append and persist a service.

        Returns the new number of services.

        Raises
        ------
        ValidationError
            A required field is missing or ``aliases`` is not a list.
        ConflictError
            The name, or one of the aliases, is already used by an
            existing service as a name or alias.
        """
        if isinstance(service, BaseModel):
            service = service.model_dump()
        self.validate(service)

        existing = self.find(service["name"])
        if existing:
            raise ConflictError(
                f"{service['name']} already exists as a service. Delete it first or use another name"
            )
        for alias in service["aliases"]:
            existing = self.find(alias)
            if existing:
                raise ConflictError(
                    f"{alias} is already a name or alias of {existing['name']}. "
                    "You can delete it or use different aliases"
                )
        seen = {service["name"].casefold()}
        for alias in service["aliases"]:
            if alias.casefold() in seen:
                raise ConflictError(f"{alias} is listed more than once for {service['name']}")
            seen.add(alias.casefold())

        logger.info("Adding %s", service["name"])
        self.services.append(service)
        await self.persist()
        count = len(self.services)
        logger.info("Have %d services", count)
        return count

    @staticmethod
    def validate(service: Dict[str, Any]) -> None:
        for field in REQUIRED_FIELDS:
            if field == "aliases" and isinstance(service.get(field), list):
                continue
            if not service.get(field):
                raise ValidationError(f"{field.capitalize()} required.")
        if not isinstance(service["aliases"], list):
            raise ValidationError("Aliases must be an array.")

    async def delete(self, name: str) -> int:
        """Remove the service named ``name`` and persist.

        Returns the new number of services, or -1 if no service has
        that name.  Aliases are not accepted.
        """
        idx = self.find_index_by_name(name)
        if idx == -1:
            return -1
        removed = self.services.pop(idx)
        logger.info("Deleted %s", removed["name"])
        await self.persist()
        return len(self.services)

    def get_names(self) -> List[str]:
        """All service names, sorted for display."""
        self._ensure_initialized()
        names = [service["name"] for service in self.services]
        return sorted(names, key=lambda name: (name.casefold(), name))

    def export(self) -> Dict[str, Any]:
        return {"services": self.services, "version": self.version}

    async def persist(self) -> None:
        """Bump the version and overwrite the stored document."""
        self.version += 1
        payload = json.dumps(self.export(), separators=(",", ":"), ensure_ascii=False)
        logger.debug("Writing directory document: %s", payload)
        await self.store.put(self.key, payload)
        logger.debug("Directory written, now v%d", self.version)

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise UninitializedError("Not initialized. Call await init()")

    @staticmethod
    def _is_match(service: Dict[str, Any], name: str) -> bool:
        wanted = name.casefold()
        if service["name"].casefold() == wanted:
            return True
        return any(alias.casefold() == wanted for alias in service.get("aliases") or [])
