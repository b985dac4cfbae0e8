"""
Chat webhook for API v1.

The chat platform POSTs every event here.  The request must carry the
shared token configured for the bot; the reply is a JSON object with a
single ``text`` field that the platform posts back into the room.

Command failures (unknown service, bad arguments, duplicate names)
are still answered with HTTP 200 and an explanatory text.  Only a
missing token (400), a wrong token (401) or an unexpected server
error (500) change the status code.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ownerbot_api.app.core.security import get_store, load_token, verify_chat_token
from ownerbot_api.app.schemas.chat import ChatEvent, ChatReply
from ownerbot_api.app.services.ownerbot_service import OwnerBotService


logger = logging.getLogger(__name__)

router = APIRouter()


def respond_with(status_code: int, text: Optional[str] = None) -> JSONResponse:
    """Build a reply; query and export answers must not be cached."""
    return JSONResponse(
        status_code=status_code,
        content=ChatReply(text=text).model_dump(),
        headers={"Cache-Control": "max-age=1"},
    )


@router.post("/", response_model=ChatReply)
async def handle_event(event: ChatEvent, store: Any = Depends(get_store)) -> JSONResponse:
    """Authenticate a chat event and answer it."""
    logger.info("Processing %s event", event.type)
    try:
        if not event.token:
            return respond_with(status.HTTP_400_BAD_REQUEST, "token required")
        logger.debug("Loading token...")
        expected = await load_token(store)
        if not verify_chat_token(event.token, expected):
            return respond_with(status.HTTP_401_UNAUTHORIZED, "Invalid token")
        bot = OwnerBotService(store)
        text = await bot.get_response(event)
        return respond_with(status.HTTP_200_OK, text)
    except Exception as exc:
        logger.exception("Unhandled error while processing chat event")
        return respond_with(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
