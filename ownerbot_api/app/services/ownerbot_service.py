"""
Chat event handling for the bot.

``OwnerBotService.get_response`` answers the three event types the
chat platform sends: the bot being added to a space, removed from a
space, and a message mentioning it.  Messages are dispatched to a
command against a freshly loaded service directory.  Any exception
raised while doing so is logged and reported back to the user as a
failure reply; nothing propagates to the HTTP layer from here.
"""

from __future__ import annotations

import logging
from typing import Any

from ownerbot_api.app.schemas.chat import ChatEvent
from ownerbot_api.app.services.commands import CommandFactory
from ownerbot_api.app.services.service_directory import ServiceDirectory


logger = logging.getLogger(__name__)

USAGE = "@ownerbot Kibana"


class OwnerBotService:
    """Turns chat events into reply text."""

    def __init__(self, store: Any) -> None:
        self.store = store

    async def get_response(self, event: ChatEvent) -> str:
        if event.type == "ADDED_TO_SPACE":
            return self.on_added_to_space()
        if event.type == "REMOVED_FROM_SPACE":
            return self.on_removed_from_space()
        if event.type == "MESSAGE":
            return await self.on_message(event)
        return "Unknown message type"

    @staticmethod
    def on_added_to_space() -> str:
        return (
            "Greetings seeker. I dispense, knowledge and wisdom of services from my codex. "
            f"Thou mayest query my vast knowledge thus: {USAGE}"
        )

    @staticmethod
    def on_removed_from_space() -> str:
        return "Fare thee well. Remember the virtues."

    async def on_message(self, event: ChatEvent) -> str:
        """Run the command found in the message and return its text."""
        try:
            argument_text = ""
            if event.message is not None:
                argument_text = event.message.argument_text or ""
            argument_text = argument_text.strip()

            service_directory = ServiceDirectory(self.store)
            await service_directory.init()

            factory = CommandFactory(service_directory, self.store)
            command = factory.create(argument_text)
            result = await command.respond()
            logger.debug("Got response %s", result)
            return result.text
        except Exception as exc:
            logger.exception("Failed to handle message")
            return f"Alas, thou hast failed. Considereth thou the following: {exc}"
