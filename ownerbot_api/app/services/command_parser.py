"""
Tokenizer for chat command arguments.

Arguments are separated by whitespace, except that a span wrapped in
double or single quotes is kept together as one argument::

    add NinjaPanel 'Internal Tools' 'Internal Tools' 'https://x' 'np alias2'

becomes six parts.  Quote characters are stripped from every part
afterwards, including stray quotes inside an unquoted word.  Quotes
cannot be escaped.
"""

import re
from typing import List


_TOKEN_PATTERN = re.compile(r"""[^\s"']+|"[^"]*"|'[^']*'""")


def tokenize(text: str) -> List[str]:
    """Split ``text`` into parts, keeping quoted spans together."""
    if not text:
        return []
    parts = [match.group(0) for match in _TOKEN_PATTERN.finditer(text)]
    return [part.replace('"', "").replace("'", "") for part in parts]
