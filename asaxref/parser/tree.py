"""Stack-based parser that nests indented sub-commands under their block header."""

import logging
from dataclasses import dataclass, field
from typing import List

from ..util import AsaParseError
from .tokenizer import Token, TokenType

log = logging.getLogger(__name__)


# Tree structure:
# [
#   Node(object network Web01)
#       Node(host 10.1.1.10)
#       Node(nat (inside,outside) static 81.144.153.67)
#   Node(access-list outside_access_in extended permit ...)
#   Node(tunnel-group 203.0.113.5 ipsec-attributes)
#       Node(ikev1 pre-shared-key *****)
#   ...
# ]


@dataclass
class Node:
    token: Token
    children: List["Node"] = field(default_factory=list)

    @property
    def words(self) -> List[str]:
        return self.token.words

    @property
    def line_num(self) -> int:
        return self.token.line_num

    def matches(self, *prefix: str) -> bool:
        """True if the line starts with the given keywords (case-insensitive)."""
        if len(self.words) < len(prefix):
            return False
        return all(w.lower() == p for w, p in zip(self.words, prefix))


def build_tree(tokens: List[Token], strict: bool = False) -> List[Node]:
    """Build the list of top-level nodes using an indentation stack.

    Each stack frame is a Node; a token is attached to the nearest frame with
    a smaller indent. With strict=True an indented line that has no block to
    belong to raises AsaParseError; otherwise it is logged and skipped.
    """
    roots: List[Node] = []
    stack: List[Node] = []

    for tok in tokens:
        if tok.type == TokenType.COMMENT:
            continue

        # Close every block at the same or deeper indentation
        while stack and stack[-1].token.indent >= tok.indent:
            stack.pop()

        node = Node(token=tok)

        if tok.type == TokenType.COMMAND:
            roots.append(node)
        elif stack:
            stack[-1].children.append(node)
        else:
            if strict:
                raise AsaParseError(f"indented line outside of a block: '{tok.text}'", tok.line_num)
            log.warning(f"Line {tok.line_num}: indented line outside of a block, skipping")
            continue

        stack.append(node)

    return roots


def get_blocks(tree: List[Node], *prefix: str) -> List[Node]:
    """Top-level nodes whose first words match prefix."""
    return [n for n in tree if n.matches(*prefix)]
