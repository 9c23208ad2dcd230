"""Line driver for the Hilo parser.

Walks the source one block at a time. At every line start it peeks three
tokens, skips blank lines, and offers the lookahead to each block rule
in priority order. The first rule to open a block gets its node attached
under the document root and is asked to consume the block's content.
The offset it returns is where the next line start is tried.

Usage:
    >>> tree = Parser("# Title\\n\\nBody").parse()
    >>> [node.kind for node in tree.blocks()]
    [Heading(1), Paragraph]

Thread Safety:
    Parser instances are single-use. Create one per source string.
    Configuration is read from a ContextVar at construction time.

"""

from __future__ import annotations

from typing import NoReturn

from hilo.config import get_parse_config
from hilo.errors import ParseError
from hilo.lexer import Tokenizer
from hilo.location import SourceLocation
from hilo.nodes import Tree
from hilo.parsing.blocks import default_block_rules
from hilo.parsing.protocols import BlockRule
from hilo.tokens import Token, TokenType
from hilo.utils.logger import get_logger

logger = get_logger(__name__)

LOOKAHEAD = 3


class Parser:
    """Build a node tree from source text.

    Args:
        source: Decoded source text
        source_file: Optional source file path for error messages

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_rules",
        "_pos",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        config = get_parse_config()
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._rules: tuple[BlockRule, ...] = config.block_rules or default_block_rules(
            interrupt_paragraphs=config.interrupt_paragraphs
        )
        self._pos = 0

    @property
    def rules(self) -> tuple[BlockRule, ...]:
        return self._rules

    def parse(self) -> Tree:
        """Parse the whole source.

        Returns:
            Tree whose root is a closed Document spanning the source.

        Raises:
            ParseError: If no block rule matches a line, or a rule fails to advance.
        """
        tree = Tree()
        self._pos = 0

        while self._pos < self._source_len:
            a, b, c = Tokenizer(self._source, self._pos).lookahead(LOOKAHEAD)
            assert a is not None

            blank_end = self._blank_line_end(a, b)
            if blank_end is not None:
                logger.debug("Skipped blank line at %d", self._pos)
                self._pos = blank_end
                continue

            self._pos = self._parse_block(tree, a, b, c)

        tree.root.close(self._source_len)
        logger.debug(
            "Parsed %d blocks (%d nodes) from %d chars",
            len(tree.root.children),
            len(tree),
            self._source_len,
        )
        return tree

    def _parse_block(self, tree: Tree, a: Token, b: Token | None, c: Token | None) -> int:
        """Open and consume one block at the current position.

        Returns:
            Offset where the next line start should be tried.
        """
        for rule in self._rules:
            link = rule.open(tree, Tree.ROOT, a, b, c)
            if link is None:
                continue

            node = tree.attach(Tree.ROOT, link.node)
            end = rule.consume(tree, node, link.offset, self._source)
            new_pos = link.offset if end is None else end
            logger.debug(
                "Opened %s block %r at %d, closed at %s",
                rule.name,
                link.node.kind,
                link.node.start,
                link.node.end,
            )

            if new_pos <= self._pos:
                self._fail(f"block rule {rule.name!r} did not advance past offset {self._pos}")
            return new_pos

        self._fail(f"no block rule matched {a!r}")

    def _blank_line_end(self, a: Token, b: Token | None) -> int | None:
        """Return the offset past a blank line at the cursor, or None."""
        if a.type is TokenType.NEWLINE:
            return a.end
        if a.type is TokenType.WHITESPACE:
            if b is None:
                return a.end
            if b.type is TokenType.NEWLINE:
                return b.end
        return None

    def _fail(self, message: str) -> NoReturn:
        loc = SourceLocation.from_offset(self._source, self._pos, self._source_file)
        logger.warning("%s (at %s)", message, loc)
        raise ParseError(
            message,
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            source_file=loc.source_file,
        )
