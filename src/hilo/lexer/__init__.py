"""State-machine tokenizer for the Hilo markdown parser.

The tokenizer turns source text into contiguous typed spans. It knows
nothing about blocks: whether a HASH run opens a heading is decided by
the block rules in hilo.parsing.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, TokenizerState, tokenize
├── core.py              # Tokenizer automaton
└── modes.py             # TokenizerState enum, character classes

Usage:
    >>> from hilo.lexer import Tokenizer
    >>> for token in Tokenizer("# Hello"):
    ...     print(token)
Token(HASH, 0:1)
Token(WHITESPACE, 1:2)
Token(PLAINTEXT, 2:7)

"""

from hilo.lexer.core import Tokenizer, tokenize
from hilo.lexer.modes import TokenizerState

__all__ = ["Tokenizer", "TokenizerState", "tokenize"]
