"""Protocols defining the block rule contracts.

Every block type (heading, paragraph, and any rule a caller adds) is
tried by the driver through the same two calls:

1. ``open`` inspects up to three lookahead tokens at a line start and
   either returns a Link (a detached node plus the offset consumed so
   far) or None, meaning "not this rule, try the next one".
2. ``consume`` is called once the node is attached. It scans the block's
   content, closes the node, and returns the new offset, or None if the
   block contributed nothing past ``start``.

Neither call raises on unexpected input.

Thread Safety:
    Protocols are purely structural; no runtime overhead.
"""

from typing import Protocol, runtime_checkable

from hilo.nodes import Link, Tree
from hilo.tokens import Token


@runtime_checkable
class BlockRule(Protocol):
    """Contract for a block opener.

    Implemented by: HeadingRule, ParagraphRule
    Required by: Parser
    """

    name: str

    def open(
        self,
        tree: Tree,
        parent: int,
        a: Token | None,
        b: Token | None,
        c: Token | None,
    ) -> Link | None: ...

    def consume(self, tree: Tree, node: int, start: int, source: str) -> int | None: ...


@runtime_checkable
class LeafConsumer(Protocol):
    """Contract for the inline content scanner.

    Provided by: hilo.parsing.leaf.consume
    Required by: HeadingRule, ParagraphRule
    """

    def __call__(self, tree: Tree, node: int, start: int, source: str) -> int | None: ...
