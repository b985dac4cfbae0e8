"""Shared fixtures for the test suite."""

import json
from pathlib import Path

from ownerbot_api.app.core.config import settings
from ownerbot_api.app.services.kv_store import InMemoryKeyValueStore


FIXTURE_PATH = Path(__file__).resolve().parent / "test_services.json"
TOKEN = "xx"


def fixture_document() -> dict:
    with open(FIXTURE_PATH, encoding="utf-8") as fh:
        return json.load(fh)


def make_store(with_token: bool = True) -> InMemoryKeyValueStore:
    """In-memory store seeded with the fixture directory and the chat token."""
    values = {settings.services_key: json.dumps(fixture_document())}
    if with_token:
        values[settings.token_key] = TOKEN
    return InMemoryKeyValueStore(values)


def stored_document(store: InMemoryKeyValueStore) -> dict:
    return json.loads(store.values[settings.services_key])
