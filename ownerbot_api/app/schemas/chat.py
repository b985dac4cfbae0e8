"""
Pydantic models for the chat webhook.

The chat platform posts an event carrying the shared ``token``, the
event ``type`` and, for messages, the text typed after the bot
mention (``argumentText``).  The bot answers with a body holding a
single ``text`` field.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """The message part of a ``MESSAGE`` event."""

    argument_text: Optional[str] = Field(None, alias="argumentText", example="NinjaPanel")

    model_config = {
        "populate_by_name": True,
    }


class ChatEvent(BaseModel):
    """Inbound chat event.

    ``type`` is one of ``ADDED_TO_SPACE``, ``REMOVED_FROM_SPACE`` or
    ``MESSAGE``; other values are accepted and answered with a polite
    refusal rather than rejected.
    """

    token: Optional[str] = Field(None, description="Shared secret configured in the chat platform")
    type: Optional[str] = Field(None, example="MESSAGE")
    message: Optional[ChatMessage] = None


class ChatReply(BaseModel):
    """Body returned to the chat platform."""

    text: Optional[str] = None
