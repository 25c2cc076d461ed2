"""Line-level tokenizer for ASA 'show running-config' text."""

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


class TokenType(Enum):
    COMMAND = auto()        # starts in column 0
    SUBCOMMAND = auto()     # indented, belongs to the block above it
    COMMENT = auto()        # '!' separators, ': Saved' banners


@dataclass
class Token:
    type: TokenType
    line_num: int
    indent: int = 0
    text: str = ""              # stripped line
    words: List[str] = field(default_factory=list)

    @property
    def keyword(self) -> str:
        return self.words[0].lower() if self.words else ""

    def rest(self, start: int) -> str:
        """Original text from word index 'start' to end of line.

        Keeps the spacing of free-text fields such as descriptions.
        """
        if start >= len(self.words):
            return ""
        parts = self.text.split(None, start)
        return parts[start] if len(parts) > start else ""


_INDENT_RE = re.compile(r'^(\s*)')


def tokenize(text: str) -> List[Token]:
    """Tokenize ASA configuration text into a list of Tokens."""
    tokens = []
    for line_num, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.rstrip()

        # Skip blank lines
        if not line.strip():
            continue

        stripped = line.strip()
        indent = len(_INDENT_RE.match(line.expandtabs(1)).group(1))

        # '!' separators and ': Saved' / ': Hardware' banners
        if stripped.startswith('!') or stripped.startswith(':'):
            tokens.append(Token(
                type=TokenType.COMMENT,
                line_num=line_num,
                indent=indent,
                text=stripped,
            ))
            continue

        tokens.append(Token(
            type=TokenType.SUBCOMMAND if indent else TokenType.COMMAND,
            line_num=line_num,
            indent=indent,
            text=stripped,
            words=stripped.split(),
        ))

    return tokens
