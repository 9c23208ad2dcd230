"""Tokenizer states and character classes.

This module defines the finite state machine states for the tokenizer
and the character sets its transitions test against.
"""

from __future__ import annotations

from enum import Enum, auto

from hilo.tokens import TokenType


class TokenizerState(Enum):
    """Tokenizer automaton states.

    One token is produced per run of the automaton:
    - UNSET: Initial state, re-entered after every emitted token
    - WHITESPACE: Accumulating a run of spaces/tabs
    - PLAINTEXT: Accumulating unclassified characters
    - NUMBER: Accumulating digits, waiting for "." or ")"
    - HASH: Accumulating a run of "#"
    - DONE: Terminal, the pending token is complete

    """

    UNSET = auto()
    WHITESPACE = auto()
    PLAINTEXT = auto()
    NUMBER = auto()
    HASH = auto()
    DONE = auto()


WHITESPACE_CHARS = frozenset(" \t")
DIGIT_CHARS = frozenset("0123456789")

# Characters that close a token on their own, straight from UNSET.
# Repeats are not merged: "--" is two DASH tokens.
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "-": TokenType.DASH,
    "*": TokenType.ASTERISK,
    "+": TokenType.PLUS,
    "\n": TokenType.NEWLINE,
    ">": TokenType.RIGHT_CARET,
}

# Characters that end a digit run as a list-number marker (included in the slice).
NUMBER_TERMINATORS: dict[str, TokenType] = {
    ".": TokenType.NUM_DOT,
    ")": TokenType.NUM_PAREN,
}
