"""
Chat commands understood by the bot.

The first word of the message selects the command::

    @ownerbot Kibana
    @ownerbot add NinjaPanel 'Internal Tools' 'Internal Tools' 'https://...' 'np alias2'
    @ownerbot delete NinjaPanel
    @ownerbot help
    @ownerbot export

Anything that is not one of the keywords is a query for a service by
name or alias.  Every command answers through ``respond()`` with a
``CommandResult``.  Directory errors raised while adding a service are
not caught here; the message handler turns them into a reply.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from ownerbot_api.app.services.command_parser import tokenize
from ownerbot_api.app.services.service_directory import ServiceDirectory


logger = logging.getLogger(__name__)


class CommandKind(str, Enum):
    ADD = "add"
    DELETE = "delete"
    HELP = "help"
    EXPORT = "export"
    QUERY = "query"


@dataclass
class CommandResult:
    """Reply text plus whether the command did what was asked."""

    text: str
    success: bool = True

    def __post_init__(self) -> None:
        logger.debug("CommandResult(text=%r, success=%s)", self.text, self.success)


class Command:
    """Base for all commands.

    The raw argument text is tokenized once on construction; ``store``
    is carried for commands that need direct store access.
    """

    kind: CommandKind

    def __init__(
        self,
        argument_text: str,
        service_directory: Optional[ServiceDirectory] = None,
        store: Any = None,
    ) -> None:
        self.argument_text = argument_text
        self.service_directory = service_directory
        self.store = store
        self.command_parts: List[str] = tokenize(argument_text)
        logger.debug("%s -> %s", argument_text, self.command_parts)

    async def respond(self) -> CommandResult:
        logger.warning("%s does not override respond()", type(self).__name__)
        return CommandResult("I do not understandeth that command")


class AddCommand(Command):
    kind = CommandKind.ADD

    async def respond(self) -> CommandResult:
        parts = self.command_parts
        logger.debug("%d parts", len(parts))
        if len(parts) != 6:
            return CommandResult(
                "Adding a service requireth Name, Owner, Room Name, Google Chat Room Url and a "
                "list of '*space* separated aliases in quotes'. Consider this, and the virtues.",
                False,
            )
        _, name, owner, room, url, aliases_part = parts
        service = {
            "name": name,
            "owner": owner,
            "room": room,
            "url": url,
            "aliases": aliases_part.split(" "),
        }
        await self.service_directory.add(service)
        return CommandResult(
            f"My codex has expanded to contain knowledge of {name}. Congratulations virtuous Paladin."
        )


class DeleteCommand(Command):
    kind = CommandKind.DELETE

    async def respond(self) -> CommandResult:
        name = self.command_parts[1] if len(self.command_parts) > 1 else ""
        logger.info("Deleting %s", name)
        if self.service_directory.find_index_by_name(name) == -1:
            names = ", ".join(self.service_directory.get_names())
            return CommandResult(
                f"I knoweth not of {name} and I do not deleteth by alias. Tryeth thee one of: {names}",
                False,
            )
        await self.service_directory.delete(name)
        return CommandResult("It is done and shallt be eventually consistent in my Codex")


class HelpCommand(Command):
    kind = CommandKind.HELP

    USAGE = "\n".join(
        [
            "@ownerbot Kibana",
            "@ownerbot add NinjaPanel 'Internal Tools' 'Internal Tools' 'https://chat.google.com/room/abc' 'np alias2'",
            "@ownerbot delete NinjaPanel",
            "@ownerbot export",
            "@ownerbot help",
        ]
    )

    async def respond(self) -> CommandResult:
        return CommandResult(self.USAGE)


class QueryCommand(Command):
    """Look up a service by the whole argument text."""

    kind = CommandKind.QUERY

    async def respond(self) -> CommandResult:
        service = self.service_directory.get(self.argument_text)
        if service:
            return CommandResult(
                f"{service['owner']} owns {service['name']}. "
                f"Seeketh thee room {service['room']} - {service['url']}"
            )
        names = ", ".join(self.service_directory.get_names())
        return CommandResult(f"I knoweth not of that service. Thou mightst asketh me of: {names}")


class ExportCommand(Command):
    kind = CommandKind.EXPORT

    async def respond(self) -> CommandResult:
        return CommandResult(json.dumps(self.service_directory.export(), indent=2, ensure_ascii=False))


COMMANDS: Dict[CommandKind, Type[Command]] = {
    CommandKind.ADD: AddCommand,
    CommandKind.DELETE: DeleteCommand,
    CommandKind.HELP: HelpCommand,
    CommandKind.EXPORT: ExportCommand,
    CommandKind.QUERY: QueryCommand,
}


class CommandFactory:
    """Pick and build the command for a message."""

    def __init__(self, service_directory: Optional[ServiceDirectory] = None, store: Any = None) -> None:
        self.service_directory = service_directory
        self.store = store

    @staticmethod
    def resolve(argument_text: str) -> CommandKind:
        """Map the first word (case-sensitive) to a command kind."""
        primary = argument_text.split(" ")[0]
        try:
            return CommandKind(primary)
        except ValueError:
            return CommandKind.QUERY

    def create(self, argument_text: str) -> Command:
        command_cls = COMMANDS[self.resolve(argument_text)]
        return command_cls(argument_text, self.service_directory, self.store)
