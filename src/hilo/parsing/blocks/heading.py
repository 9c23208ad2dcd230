"""ATX heading block rule.

A heading opens on a run of 1-6 ``#`` followed by whitespace and always
closes at the end of its line: there is no continuation onto the next
line, so a heading is Closed after its first consume() call.
"""

from __future__ import annotations

from hilo.config import get_parse_config
from hilo.nodes import Kind, Link, Node, Tree
from hilo.parsing import leaf
from hilo.tokens import Token, TokenType


class HeadingRule:
    """Block rule for ``# Heading`` lines."""

    __slots__ = ()

    name = "heading"

    def open(
        self,
        tree: Tree,
        parent: int,
        a: Token | None,
        b: Token | None,
        c: Token | None,
    ) -> Link | None:
        """Match ``HASH WHITESPACE ...`` with a hash run no longer than the max level.

        Returns:
            Link to a detached Heading node starting at the hash run, with
            the offset just past the separating whitespace; None otherwise.
        """
        if a is None or b is None:
            return None
        if a.type is not TokenType.HASH or b.type is not TokenType.WHITESPACE:
            return None

        level = a.end - a.start
        if level > get_parse_config().max_heading_level:
            return None

        return Link(Node(Kind.heading(level), a.start), b.end)

    def consume(self, tree: Tree, node: int, start: int, source: str) -> int | None:
        heading = tree[node]
        end = leaf.consume(tree, node, start, source)
        # Headings cannot be continued onto the next line
        if end is None:
            heading.close(start)
            return None
        heading.close(end)
        return end
