"""Paragraph block rule.

The fallback block: it opens on any line that is not blank and runs
line by line until a blank line, the end of the source, or a line where
an interrupting rule (by default, a heading) would open.
"""

from __future__ import annotations

from collections.abc import Sequence

from hilo.lexer import Tokenizer
from hilo.nodes import Kind, Link, Node, Tree
from hilo.parsing import leaf
from hilo.parsing.blocks.heading import HeadingRule
from hilo.parsing.protocols import BlockRule
from hilo.tokens import Token, TokenType


class ParagraphRule:
    """Block rule for runs of plain lines.

    Args:
        interrupts: Rules whose match at a line start ends the paragraph
            before that line. Defaults to a HeadingRule.

    """

    __slots__ = ("_interrupts",)

    name = "paragraph"

    def __init__(self, interrupts: Sequence[BlockRule] | None = None) -> None:
        if interrupts is None:
            interrupts = (HeadingRule(),)
        self._interrupts = tuple(interrupts)

    @property
    def interrupts(self) -> tuple[BlockRule, ...]:
        return self._interrupts

    def open(
        self,
        tree: Tree,
        parent: int,
        a: Token | None,
        b: Token | None,
        c: Token | None,
    ) -> Link | None:
        """Match any line that has content.

        Nothing is consumed by open(); the whole line is inline content.
        """
        if a is None or a.type is TokenType.NEWLINE:
            return None
        return Link(Node(Kind.PARAGRAPH, a.start), a.start)

    def consume(self, tree: Tree, node: int, start: int, source: str) -> int | None:
        paragraph = tree[node]
        end = leaf.consume(tree, node, start, source)
        if end is None:
            paragraph.close(start)
            return None

        while self._continues(tree, paragraph.parent, end, source):
            next_end = leaf.consume(tree, node, end, source)
            if next_end is None:
                break
            end = next_end

        paragraph.close(end)
        return end

    def _continues(self, tree: Tree, parent: int | None, offset: int, source: str) -> bool:
        """Check whether the line starting at offset continues the paragraph."""
        a, b, c = Tokenizer(source, offset).lookahead(3)
        if a is None or a.type is TokenType.NEWLINE:
            return False
        # A line of only whitespace is blank too
        if a.type is TokenType.WHITESPACE and (b is None or b.type is TokenType.NEWLINE):
            return False

        owner = parent if parent is not None else Tree.ROOT
        return not any(rule.open(tree, owner, a, b, c) is not None for rule in self._interrupts)
