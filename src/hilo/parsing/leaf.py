"""Leaf consumer: attach a line of inline content to a block.

Scans tokens from an offset up to and including the end of the current
line and attaches each one, converted with Token.to_node(), as a child
of the block. The block itself is left open; closing it is the block
rule's job.
"""

from __future__ import annotations

from hilo.lexer import Tokenizer
from hilo.nodes import Tree
from hilo.tokens import TokenType


def consume(tree: Tree, node: int, start: int, source: str) -> int | None:
    """Consume one line of inline content into node.

    Args:
        tree: Tree holding node
        node: Arena index of the open block receiving the content
        start: Offset to start scanning from
        source: Source text

    Returns:
        Offset just past the last token consumed (past the newline, if the
        line had one), or None if nothing remained to consume.
    """
    end: int | None = None
    for token in Tokenizer(source, start):
        tree.attach(node, token.to_node())
        end = token.end
        if token.type is TokenType.NEWLINE:
            break
    return end
