"""State-machine tokenizer with O(n) guaranteed performance.

Scans one character at a time with a single character of lookahead.
Each call to next_token() runs the automaton from UNSET to DONE and
emits exactly one token; there is no backtracking and no token is ever
retracted once emitted.

Thread Safety:
Tokenizer instances own their cursor. Create one per scan; instances
share no mutable state and may be restarted at any offset.

"""

from __future__ import annotations

from collections.abc import Iterator

from hilo.lexer.modes import (
    DIGIT_CHARS,
    NUMBER_TERMINATORS,
    SINGLE_CHAR_TOKENS,
    WHITESPACE_CHARS,
    TokenizerState,
)
from hilo.tokens import Token, TokenType


class Tokenizer:
    """Pull-based tokenizer over a source string.

    Produces contiguous, non-overlapping tokens starting at ``start``
    until the end of the source. Every character is classified;
    PLAINTEXT is the fallback.

    Usage:
            >>> list(Tokenizer("1. Item"))
        [Token(NUM_DOT, 0:2), Token(WHITESPACE, 2:3), Token(PLAINTEXT, 3:7)]

            >>> Tokenizer("# Title", start=2).next_token()
        Token(PLAINTEXT, 2:7)

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
    )

    def __init__(self, source: str, start: int = 0) -> None:
        """Initialize tokenizer at an offset into source.

        Args:
            source: Decoded source text
            start: Offset to start scanning from (0 <= start <= len(source))

        Raises:
            ValueError: If start is outside the source.
        """
        if not 0 <= start <= len(source):
            raise ValueError(f"start offset {start} outside source of length {len(source)}")
        self._source = source
        self._source_len = len(source)
        self._pos = start

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    @property
    def position(self) -> int:
        """Offset of the next character to be scanned."""
        return self._pos

    def lookahead(self, count: int) -> tuple[Token | None, ...]:
        """Peek at the next ``count`` tokens without moving the cursor.

        Slots past the end of the source are None.
        """
        probe = Tokenizer(self._source, self._pos)
        return tuple(probe.next_token() for _ in range(count))

    def next_token(self) -> Token | None:
        """Scan and return the next token, or None at end of source.

        Complexity: O(k) where k = length of the returned token.
        """
        source = self._source
        source_len = self._source_len
        start = self._pos
        pos = start
        state = TokenizerState.UNSET
        token_type: TokenType | None = None

        while state is not TokenizerState.DONE:
            char = source[pos] if pos < source_len else ""

            match state:
                case TokenizerState.UNSET:
                    if not char:
                        state = TokenizerState.DONE
                    elif char in SINGLE_CHAR_TOKENS:
                        token_type = SINGLE_CHAR_TOKENS[char]
                        pos += 1
                        state = TokenizerState.DONE
                    elif char in DIGIT_CHARS:
                        pos += 1
                        state = TokenizerState.NUMBER
                    elif char == "#":
                        pos += 1
                        state = TokenizerState.HASH
                    elif char in WHITESPACE_CHARS:
                        pos += 1
                        state = TokenizerState.WHITESPACE
                    else:
                        pos += 1
                        state = TokenizerState.PLAINTEXT

                case TokenizerState.WHITESPACE:
                    if char in WHITESPACE_CHARS:
                        pos += 1
                    else:
                        token_type = TokenType.WHITESPACE
                        state = TokenizerState.DONE

                case TokenizerState.NUMBER:
                    if char in DIGIT_CHARS:
                        pos += 1
                    elif char in NUMBER_TERMINATORS:
                        token_type = NUMBER_TERMINATORS[char]
                        pos += 1
                        state = TokenizerState.DONE
                    else:
                        # Not a list number: the digits so far become the head
                        # of a plaintext run. char is re-examined as plaintext.
                        state = TokenizerState.PLAINTEXT

                case TokenizerState.HASH:
                    if char == "#":
                        pos += 1
                    else:
                        token_type = TokenType.HASH
                        state = TokenizerState.DONE

                case TokenizerState.PLAINTEXT:
                    if not char or char == "\n" or char in WHITESPACE_CHARS:
                        token_type = TokenType.PLAINTEXT
                        state = TokenizerState.DONE
                    else:
                        pos += 1

        self._pos = pos
        if token_type is None:
            return None
        return Token(token_type, start, pos)


def tokenize(source: str, start: int = 0) -> list[Token]:
    """Tokenize source eagerly from start to end.

    Args:
        source: Decoded source text
        start: Offset to start from

    Returns:
        All tokens, in order. Empty if start == len(source).
    """
    return list(Tokenizer(source, start))
