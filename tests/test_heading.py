"""Tests for the heading block rule (open/consume)."""

import pytest

from hilo.config import ParseConfig, parse_config_context
from hilo.errors import NodeStateError
from hilo.lexer import Tokenizer
from hilo.nodes import Kind, Link, Tree
from hilo.parsing.blocks.heading import HeadingRule
from hilo.parsing.protocols import BlockRule
from hilo.tokens import Token, TokenType


def _open(source: str, start: int = 0) -> tuple[Tree, Link | None]:
    tree = Tree()
    a, b, c = Tokenizer(source, start).lookahead(3)
    return tree, HeadingRule().open(tree, Tree.ROOT, a, b, c)


def _open_and_attach(source: str) -> tuple[Tree, int, int]:
    tree, link = _open(source)
    assert link is not None
    return tree, tree.attach(Tree.ROOT, link.node), link.offset


class TestOpen:
    @pytest.mark.parametrize("level", range(1, 7))
    def test_levels_one_through_six(self, level: int) -> None:
        _, link = _open("#" * level + " Title")

        assert link is not None
        assert link.node.kind == Kind.heading(level)
        assert link.node.start == 0
        assert link.offset == level + 1

    @pytest.mark.parametrize("level", [7, 8, 20])
    def test_seven_or_more_hashes_do_not_open(self, level: int) -> None:
        _, link = _open("#" * level + " Title")
        assert link is None

    def test_seven_hash_lookahead(self) -> None:
        """'####### x' lookahead is rejected on the hash run length alone."""
        link = HeadingRule().open(
            Tree(),
            Tree.ROOT,
            Token(TokenType.HASH, 0, 7),
            Token(TokenType.WHITESPACE, 7, 8),
            Token(TokenType.PLAINTEXT, 8, 9),
        )
        assert link is None

    def test_offset_stops_after_whole_whitespace_run(self) -> None:
        _, link = _open("##   Title")
        assert link is not None
        assert link.offset == 5

    def test_node_is_detached_and_open(self) -> None:
        tree, link = _open("# Title")
        assert link is not None
        assert link.node.parent is None
        assert link.node.is_open
        assert len(tree) == 1

    def test_third_lookahead_slot_is_ignored(self) -> None:
        rule = HeadingRule()
        a = Token(TokenType.HASH, 0, 1)
        b = Token(TokenType.WHITESPACE, 1, 2)
        with_text = rule.open(Tree(), Tree.ROOT, a, b, Token(TokenType.PLAINTEXT, 2, 3))
        without = rule.open(Tree(), Tree.ROOT, a, b, None)
        assert with_text == without

    def test_opens_mid_source(self) -> None:
        _, link = _open("intro\n## Next", start=6)
        assert link is not None
        assert link.node.kind == Kind.heading(2)
        assert link.node.start == 6
        assert link.offset == 9

    @pytest.mark.parametrize(
        "source",
        [
            "#Title",  # no whitespace
            "#",  # nothing after
            "#\nTitle",  # newline instead of whitespace
            "Title #",  # not at line start
            " # Title",  # leading whitespace
            "",  # nothing at all
        ],
    )
    def test_non_matching_lookahead(self, source: str) -> None:
        _, link = _open(source)
        assert link is None

    def test_max_heading_level_from_config(self) -> None:
        with parse_config_context(ParseConfig(max_heading_level=3)):
            _, three = _open("### Title")
            _, four = _open("#### Title")
        assert three is not None
        assert four is None

    def test_satisfies_block_rule_protocol(self) -> None:
        assert isinstance(HeadingRule(), BlockRule)


class TestConsume:
    def test_hash_space_at_end_of_input(self) -> None:
        """'# ' opens at level 1, consumes to 2, and closes empty at 2."""
        tree, node, offset = _open_and_attach("# ")
        assert tree[node].kind == Kind.heading(1)
        assert offset == 2

        assert HeadingRule().consume(tree, node, offset, "# ") is None
        assert tree[node].slice == (0, 2)
        assert tree[node].children == []

    def test_consumes_to_end_of_line(self) -> None:
        source = "# Title here\nNext line"
        tree, node, offset = _open_and_attach(source)

        end = HeadingRule().consume(tree, node, offset, source)

        assert end == 13
        assert tree[node].slice == (0, 13)
        assert [(n.kind, n.slice) for n in tree.children(node)] == [
            (Kind.PLAINTEXT, (2, 7)),
            (Kind.WHITESPACE, (7, 8)),
            (Kind.PLAINTEXT, (8, 12)),
            (Kind.WHITESPACE, (12, 13)),
        ]

    def test_consumes_to_end_of_input(self) -> None:
        source = "## Title"
        tree, node, offset = _open_and_attach(source)

        assert HeadingRule().consume(tree, node, offset, source) == 8
        assert tree[node].slice == (0, 8)

    def test_empty_heading_line_with_newline(self) -> None:
        source = "# \nbody"
        tree, node, offset = _open_and_attach(source)

        assert HeadingRule().consume(tree, node, offset, source) == 3
        assert tree[node].slice == (0, 3)

    def test_closes_after_exactly_one_call(self) -> None:
        source = "# Title\nmore"
        tree, node, offset = _open_and_attach(source)
        rule = HeadingRule()

        end = rule.consume(tree, node, offset, source)
        assert not tree[node].is_open

        assert end is not None
        with pytest.raises(NodeStateError, match="is closed"):
            rule.consume(tree, node, end, source)

    def test_failed_second_consume_leaves_tree_unchanged(self) -> None:
        source = "# Title\nmore text"
        tree, node, offset = _open_and_attach(source)
        rule = HeadingRule()
        end = rule.consume(tree, node, offset, source)
        assert end is not None
        before = (len(tree), list(tree[node].children), tree[node].slice)

        with pytest.raises(NodeStateError):
            rule.consume(tree, node, end, source)

        assert (len(tree), tree[node].children, tree[node].slice) == before

    def test_second_consume_at_end_of_input(self) -> None:
        tree, node, offset = _open_and_attach("# ")
        rule = HeadingRule()
        rule.consume(tree, node, offset, "# ")

        with pytest.raises(NodeStateError, match="already closed"):
            rule.consume(tree, node, offset, "# ")
        assert tree[node].slice == (0, 2)
        assert len(tree) == 2
