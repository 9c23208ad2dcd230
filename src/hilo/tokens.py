"""Token and TokenType definitions for the Hilo tokenizer.

The tokenizer produces a stream of Token objects that block rules consume.
Each Token has a type and a half-open [start, end) slice into the source.
Tokens never copy source text; call Token.text(source) when the text is
actually needed.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from hilo.nodes import Kind, Node


class TokenType(Enum):
    """Token types produced by the tokenizer.

    The set is closed. Marker types are only meaningful at line start;
    block rules decide that, the tokenizer does not.

    """

    # Line-start markers
    RIGHT_CARET = auto()  # >
    HASH = auto()  # run of #
    DASH = auto()  # -
    ASTERISK = auto()  # *
    PLUS = auto()  # +
    NUM_DOT = auto()  # 12.
    NUM_PAREN = auto()  # 12)

    # Content
    PLAINTEXT = auto()
    WHITESPACE = auto()  # run of space/tab
    NEWLINE = auto()  # exactly one \n


_WHITESPACE_TYPES = frozenset({TokenType.WHITESPACE, TokenType.NEWLINE})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        type: The token type (from TokenType enum)
        start: Start offset in source (inclusive)
        end: End offset in source (exclusive)

    """

    type: TokenType
    start: int
    end: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.type.name}, {self.start}:{self.end})"

    @property
    def slice(self) -> tuple[int, int]:
        return (self.start, self.end)

    def text(self, source: str) -> str:
        """Return the source text covered by this token."""
        return source[self.start : self.end]

    @property
    def inline_kind(self) -> Kind:
        """The inline node kind this token maps to.

        Whitespace and newlines become Whitespace; every other token,
        markers included, becomes Plaintext.
        """
        if self.type in _WHITESPACE_TYPES:
            return Kind.WHITESPACE
        return Kind.PLAINTEXT

    def to_node(self) -> Node:
        """Convert to a closed, detached inline leaf node over the same slice."""
        return Node.inline(self.inline_kind, self.start, self.end)
