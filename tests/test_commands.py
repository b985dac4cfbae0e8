"""
Tests for the chat commands and the command factory.
"""

import json
import unittest

from ownerbot_api.app.core.errors import ConflictError
from ownerbot_api.app.services.commands import (
    AddCommand,
    Command,
    CommandFactory,
    CommandKind,
    CommandResult,
    DeleteCommand,
    ExportCommand,
    HelpCommand,
    QueryCommand,
)
from ownerbot_api.app.services.service_directory import ServiceDirectory
from tests.helpers import make_store, stored_document


class TestCommandFactory(unittest.TestCase):

    def setUp(self):
        self.factory = CommandFactory()

    def test_help(self):
        self.assertIsInstance(self.factory.create("help"), HelpCommand)

    def test_add(self):
        self.assertIsInstance(self.factory.create("add"), AddCommand)

    def test_delete(self):
        self.assertIsInstance(self.factory.create("delete NinjaPanel"), DeleteCommand)

    def test_export(self):
        self.assertIsInstance(self.factory.create("export"), ExportCommand)

    def test_defaults_to_query(self):
        self.assertIsInstance(self.factory.create("Kibana"), QueryCommand)
        self.assertIsInstance(self.factory.create("someunrecognizedtoken"), QueryCommand)
        self.assertIsInstance(self.factory.create(""), QueryCommand)

    def test_keywords_are_case_sensitive(self):
        self.assertEqual(CommandFactory.resolve("Help"), CommandKind.QUERY)
        self.assertEqual(CommandFactory.resolve("ADD x"), CommandKind.QUERY)

    def test_command_carries_kind(self):
        self.assertEqual(self.factory.create("export").kind, CommandKind.EXPORT)


class CommandTestCase(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.store = make_store()
        self.directory = ServiceDirectory(self.store)
        await self.directory.init()


class TestAddCommand(CommandTestCase):

    def test_parses_all_args(self):
        cmd = AddCommand(
            "add NinjaPanel 'Internal Tools' 'Internal Tools' 'https://someurl.com' 'alias1 alias2'",
            self.directory,
            self.store,
        )
        self.assertEqual(
            cmd.command_parts,
            ["add", "NinjaPanel", "Internal Tools", "Internal Tools", "https://someurl.com", "alias1 alias2"],
        )

    async def test_requires_all_args(self):
        cmd = AddCommand("add SystemX 'Internal Tools' 'Internal Tools'", self.directory, self.store)
        res = await cmd.respond()
        self.assertFalse(res.success)
        self.assertEqual(len(self.directory.services), 4)
        self.assertEqual(self.directory.version, 7)

    async def test_rejects_too_many_args(self):
        cmd = AddCommand("add SystemX a b c d e", self.directory, self.store)
        res = await cmd.respond()
        self.assertFalse(res.success)

    async def test_adds_service(self):
        cmd = AddCommand(
            "add SystemX 'Internal Tools' 'Internal Tools Room' 'https://someroom' 'sx systemx-legacy'",
            self.directory,
            self.store,
        )
        res = await cmd.respond()
        self.assertTrue(res.success)
        self.assertIn("SystemX", res.text)
        added = self.directory.find("systemx-legacy")
        self.assertEqual(added["aliases"], ["sx", "systemx-legacy"])
        self.assertEqual(added["room"], "Internal Tools Room")
        self.assertEqual(stored_document(self.store)["version"], 8)

    async def test_duplicate_propagates(self):
        cmd = AddCommand(
            "add NinjaPanel 'Internal Tools' 'Internal Tools' 'http://some-abc/abc.html' 'np2'",
            self.directory,
            self.store,
        )
        with self.assertRaises(ConflictError):
            await cmd.respond()


class TestDeleteCommand(CommandTestCase):

    async def test_deletes(self):
        self.assertGreater(self.directory.find_index_by_name("Jira"), -1)
        res = await DeleteCommand("delete Jira", self.directory, self.store).respond()
        self.assertTrue(res.success)
        self.assertEqual(self.directory.find_index_by_name("Jira"), -1)
        self.assertEqual(self.directory.version, 8)

    async def test_not_found(self):
        res = await DeleteCommand("delete xxx", self.directory, self.store).respond()
        self.assertFalse(res.success)
        self.assertIn("Bitbucket, Jira, Kibana, NinjaPanel", res.text)
        self.assertEqual(len(self.directory.services), 4)

    async def test_does_not_delete_by_alias(self):
        res = await DeleteCommand("delete np", self.directory, self.store).respond()
        self.assertFalse(res.success)
        self.assertIsNotNone(self.directory.find("NinjaPanel"))

    async def test_missing_name(self):
        res = await DeleteCommand("delete", self.directory, self.store).respond()
        self.assertFalse(res.success)


class TestQueryCommand(CommandTestCase):

    async def test_by_name(self):
        res = await QueryCommand("NinjaPanel", self.directory, self.store).respond()
        self.assertTrue(res.success)
        self.assertIn("Internal Tools owns NinjaPanel", res.text)
        self.assertIn("https://chat.google.com/room/ninja", res.text)

    async def test_by_alias(self):
        res = await QueryCommand("np", self.directory, self.store).respond()
        self.assertTrue(res.success)
        self.assertIn("Internal Tools", res.text)
        self.assertIn("room Internal Tools", res.text)

    async def test_uses_whole_text(self):
        res = await QueryCommand("np please", self.directory, self.store).respond()
        self.assertTrue(res.success)
        self.assertIn("I knoweth not of that service", res.text)

    async def test_not_found_is_success_with_hint(self):
        res = await QueryCommand("blah blah blah", self.directory, self.store).respond()
        self.assertTrue(res.success)
        self.assertIn("Bitbucket, Jira, Kibana, NinjaPanel", res.text)

    async def test_added_service(self):
        await AddCommand(
            "add AdminPanel 'Internal Tools' 'Internal Tools Room' url 'alias'", self.directory, self.store
        ).respond()
        res = await QueryCommand("AdminPanel", self.directory, self.store).respond()
        self.assertTrue(res.success)
        self.assertIn("Internal Tools", res.text)


class TestHelpCommand(unittest.IsolatedAsyncioTestCase):

    async def test_returns_help_text(self):
        res = await HelpCommand("help").respond()
        self.assertTrue(res.success)
        for form in ("@ownerbot Kibana", "@ownerbot add", "@ownerbot delete", "@ownerbot help", "@ownerbot export"):
            self.assertIn(form, res.text)


class TestExportCommand(CommandTestCase):

    async def test_export_round_trips(self):
        res = await ExportCommand("export", self.directory, self.store).respond()
        self.assertTrue(res.success)
        self.assertEqual(json.loads(res.text), {"services": self.directory.services, "version": 7})
        self.assertTrue(res.text.startswith('{\n  "services": [\n'))


class TestBaseCommand(unittest.IsolatedAsyncioTestCase):

    async def test_unimplemented_command_falls_back(self):
        res = await Command("anything").respond()
        self.assertTrue(res.success)
        self.assertEqual(res.text, "I do not understandeth that command")


class TestCommandResult(unittest.TestCase):

    def test_success_defaults_to_true(self):
        self.assertTrue(CommandResult("ok").success)
        self.assertFalse(CommandResult("nope", False).success)


if __name__ == "__main__":
    unittest.main()
