"""
Shared-token authentication.

The chat platform sends a static token with every event; the expected
value is kept in the key/value store under ``settings.token_key`` so it
can be rotated without a redeploy.  The same token, sent as a Bearer
token, unlocks the read-only REST endpoints.
"""

import hmac
from typing import Any, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from ownerbot_api.app.services.kv_store import SQLiteKeyValueStore


def get_store() -> Any:
    """Dependency returning the key/value store used by request handlers.

    Tests override this through ``app.dependency_overrides``.
    """
    return SQLiteKeyValueStore()


async def load_token(store: Any) -> Optional[str]:
    return await store.get(settings.token_key)


def verify_chat_token(presented: Optional[str], expected: Optional[str]) -> bool:
    """Constant-time comparison; an unset expected token never matches."""
    if not presented or not expected:
        return False
    return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))


security = HTTPBearer(auto_error=False)


async def require_api_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    store: Any = Depends(get_store),
) -> str:
    """Dependency enforcing ``Authorization: Bearer <chat token>``."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    expected = await load_token(store)
    if not verify_chat_token(credentials.credentials, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials
