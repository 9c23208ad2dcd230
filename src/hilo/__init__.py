"""
Hilo — Offset-based Markdown tokenizer and block tree builder.

Turns Markdown source into a stream of typed spans, then into an
arena-backed tree of block and inline nodes. Tokens and nodes carry
(start, end) offsets into the source and never copy text.

Quick Start:
    >>> from hilo import parse, tokenize
    >>> tokenize("### Header Text")[:2]
    [Token(HASH, 0:3), Token(WHITESPACE, 3:4)]

    >>> tree = parse("# Hello\\n\\nWorld")
    >>> [block.kind for block in tree.blocks()]
    [Heading(1), Paragraph]

Custom Rules:
    >>> from hilo import ParseConfig, HeadingRule, ParagraphRule
    >>> config = ParseConfig(block_rules=(HeadingRule(), ParagraphRule()))
    >>> tree = parse("# Hello", config=config)

"""

from hilo.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from hilo.errors import HiloError, NodeStateError, ParseError
from hilo.lexer import Tokenizer, TokenizerState, tokenize
from hilo.location import SourceLocation
from hilo.nodes import Kind, Link, Node, NodeType, Tree
from hilo.parser import Parser
from hilo.parsing.blocks import HeadingRule, ParagraphRule, default_block_rules
from hilo.parsing.protocols import BlockRule, LeafConsumer
from hilo.tokens import Token, TokenType

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Tree:
    """Parse Markdown source into a node tree.

    Args:
        source: Markdown source text
        source_file: Optional source file path for error messages
        config: Parse configuration for this call. None uses the config
            already active in this context.

    Returns:
        Tree with a closed Document root

    Example:
        >>> tree = parse("## Section")
        >>> tree.blocks()[0].kind.level
        2
    """
    if config is None:
        return Parser(source, source_file=source_file).parse()

    with parse_config_context(config):
        return Parser(source, source_file=source_file).parse()


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "tokenize",
    # Tokens
    "Token",
    "TokenType",
    "Tokenizer",
    "TokenizerState",
    # Tree
    "Kind",
    "Link",
    "Node",
    "NodeType",
    "Tree",
    # Block rules
    "BlockRule",
    "LeafConsumer",
    "HeadingRule",
    "ParagraphRule",
    "default_block_rules",
    "Parser",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "HiloError",
    "NodeStateError",
    "ParseError",
    # Location
    "SourceLocation",
]
