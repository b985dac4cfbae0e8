"""
Tests for the command argument tokenizer.
"""

import unittest

from ownerbot_api.app.services.command_parser import tokenize


class TestTokenize(unittest.TestCase):

    def test_add_command_with_quoted_parts(self):
        parts = tokenize(
            "add NinjaPanel 'Internal Tools' 'Internal Tools' 'https://someurl.com' 'alias1 alias2'"
        )
        self.assertEqual(
            parts,
            ["add", "NinjaPanel", "Internal Tools", "Internal Tools", "https://someurl.com", "alias1 alias2"],
        )

    def test_double_quotes(self):
        self.assertEqual(tokenize('delete "Ninja Panel"'), ["delete", "Ninja Panel"])

    def test_mixed_quotes_keep_other_quote_inside(self):
        # The inner apostrophe survives extraction but is stripped afterwards.
        self.assertEqual(tokenize('add "Bob\'s Tools"'), ["add", "Bobs Tools"])

    def test_plain_whitespace_split(self):
        self.assertEqual(tokenize("blah  blah\tblah"), ["blah", "blah", "blah"])

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   "), [])

    def test_unterminated_quote_is_dropped(self):
        self.assertEqual(tokenize("ab'cd"), ["ab", "cd"])


if __name__ == "__main__":
    unittest.main()
