"""Tests for Token and the token → inline node mapping."""

import dataclasses

import pytest

from hilo.nodes import Kind
from hilo.tokens import Token, TokenType

PLAINTEXT_TYPES = [
    TokenType.RIGHT_CARET,
    TokenType.HASH,
    TokenType.DASH,
    TokenType.ASTERISK,
    TokenType.PLUS,
    TokenType.NUM_DOT,
    TokenType.NUM_PAREN,
    TokenType.PLAINTEXT,
]


class TestToken:
    def test_slice_and_text(self) -> None:
        token = Token(TokenType.PLAINTEXT, 4, 10)
        assert token.slice == (4, 10)
        assert token.text("### Header Text") == "Header"

    def test_repr(self) -> None:
        assert repr(Token(TokenType.NUM_DOT, 0, 2)) == "Token(NUM_DOT, 0:2)"

    def test_frozen(self) -> None:
        token = Token(TokenType.HASH, 0, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.end = 2  # type: ignore[misc]

    def test_equality_is_structural(self) -> None:
        assert Token(TokenType.HASH, 0, 1) == Token(TokenType.HASH, 0, 1)
        assert Token(TokenType.HASH, 0, 1) != Token(TokenType.PLAINTEXT, 0, 1)


class TestToNode:
    """Every token converts to a closed, detached leaf over the same slice."""

    @pytest.mark.parametrize("token_type", PLAINTEXT_TYPES)
    def test_markers_and_text_become_plaintext(self, token_type: TokenType) -> None:
        node = Token(token_type, 3, 5).to_node()
        assert node.kind == Kind.PLAINTEXT
        assert node.slice == (3, 5)

    @pytest.mark.parametrize("token_type", [TokenType.WHITESPACE, TokenType.NEWLINE])
    def test_spacing_becomes_whitespace(self, token_type: TokenType) -> None:
        node = Token(token_type, 3, 4).to_node()
        assert node.kind == Kind.WHITESPACE
        assert node.slice == (3, 4)

    def test_mapping_is_total(self) -> None:
        for token_type in TokenType:
            node = Token(token_type, 0, 1).to_node()
            assert not node.kind.is_container

    def test_node_is_detached_and_childless(self) -> None:
        node = Token(TokenType.PLAINTEXT, 0, 1).to_node()
        assert node.parent is None
        assert node.children == []
        assert not node.is_open

    def test_each_call_builds_a_fresh_node(self) -> None:
        token = Token(TokenType.PLAINTEXT, 0, 1)
        assert token.to_node() is not token.to_node()
