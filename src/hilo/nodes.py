"""Node kinds and the arena-backed node tree.

Nodes do not hold references to each other. A Tree owns every Node in a
flat list, and nodes refer to their parent and children by index into
that list. Back-references are plain integer lookups.

Kind Hierarchy:
Kind
├── container
│   ├── Document
│   ├── Heading(level)
│   └── Paragraph
└── leaf
    ├── Plaintext
    └── Whitespace

Lifecycle:
A block rule creates a detached Node (parent is None, end is None) and
returns it in a Link. The driver attaches it to the tree, the rule's
consume() fills in children and closes it. Once closed, a node's span
never changes.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, NamedTuple

from hilo.errors import NodeStateError

MAX_HEADING_LEVEL = 6


class NodeType(Enum):
    """Closed set of node categories."""

    # Containers
    DOCUMENT = auto()
    HEADING = auto()  # # .. ######
    PARAGRAPH = auto()

    # Inline leaves
    PLAINTEXT = auto()
    WHITESPACE = auto()


_CONTAINER_TYPES = frozenset({NodeType.DOCUMENT, NodeType.HEADING, NodeType.PARAGRAPH})


@dataclass(frozen=True, slots=True)
class Kind:
    """The kind of a node: a NodeType plus its payload.

    Only headings carry a payload (their level, 1-6).

    Usage:
        >>> Kind.heading(2)
        Heading(2)
        >>> Kind.PLAINTEXT.is_container
        False

    """

    type: NodeType
    level: int | None = None

    DOCUMENT: ClassVar[Kind]
    PARAGRAPH: ClassVar[Kind]
    PLAINTEXT: ClassVar[Kind]
    WHITESPACE: ClassVar[Kind]

    def __post_init__(self) -> None:
        if self.type is NodeType.HEADING:
            if self.level is None or not 1 <= self.level <= MAX_HEADING_LEVEL:
                raise ValueError(f"Heading level must be 1-{MAX_HEADING_LEVEL}, got {self.level}")
        elif self.level is not None:
            raise ValueError(f"{self.type.name} kind does not take a level")

    @classmethod
    def heading(cls, level: int) -> Kind:
        return cls(NodeType.HEADING, level)

    @property
    def is_container(self) -> bool:
        """True for block kinds that may own children."""
        return self.type in _CONTAINER_TYPES

    def __repr__(self) -> str:
        name = self.type.name.capitalize()
        if self.level is not None:
            return f"{name}({self.level})"
        return name


Kind.DOCUMENT = Kind(NodeType.DOCUMENT)
Kind.PARAGRAPH = Kind(NodeType.PARAGRAPH)
Kind.PLAINTEXT = Kind(NodeType.PLAINTEXT)
Kind.WHITESPACE = Kind(NodeType.WHITESPACE)


@dataclass(slots=True)
class Node:
    """A tree element spanning [start, end) of the source.

    Attributes:
        kind: What this node is
        start: Start offset in source
        end: End offset in source, None while the block is still open
        parent: Arena index of the parent, None while detached (and for the root)
        children: Arena indices of children, in source order

    """

    kind: Kind
    start: int
    end: int | None = None
    parent: int | None = None
    children: list[int] = field(default_factory=list)

    @classmethod
    def inline(cls, kind: Kind, start: int, end: int) -> Node:
        """Create a closed leaf node over [start, end)."""
        return cls(kind=kind, start=start, end=end)

    @property
    def is_open(self) -> bool:
        return self.end is None

    @property
    def slice(self) -> tuple[int, int]:
        """The node's (start, end) span.

        Raises:
            NodeStateError: If the node has not been closed yet.
        """
        if self.end is None:
            raise NodeStateError(f"{self.kind!r} at {self.start} is still open")
        return (self.start, self.end)

    def close(self, end: int) -> None:
        """Set the end offset. Allowed exactly once.

        Raises:
            NodeStateError: If already closed, or end precedes start.
        """
        if self.end is not None:
            raise NodeStateError(f"{self.kind!r} at {self.start} is already closed at {self.end}")
        if end < self.start:
            raise NodeStateError(f"{self.kind!r} cannot end at {end}, before its start {self.start}")
        self.end = end

    def text(self, source: str) -> str:
        """Return the source text covered by this node."""
        start, end = self.slice
        return source[start:end]


class Link(NamedTuple):
    """A newly opened block: a detached node and the offset consumed so far."""

    node: Node
    offset: int


class Tree:
    """Arena of nodes addressed by stable integer indices.

    Index 0 is always the Document root. Indices never change once
    assigned; nodes are only ever appended.

    Usage:
        >>> tree = Tree()
        >>> idx = tree.attach(Tree.ROOT, Node(Kind.heading(1), 0))
        >>> tree[idx].parent
        0

    Thread Safety:
        Not thread-safe. A tree is built by a single parse pass.

    """

    ROOT: ClassVar[int] = 0

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: list[Node] = [Node(Kind.DOCUMENT, 0)]

    def __getitem__(self, index: int) -> Node:
        if not 0 <= index < len(self._nodes):
            raise NodeStateError("no such node in tree", node=index)
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Tree(nodes={len(self._nodes)}, blocks={len(self.root.children)})"

    @property
    def root(self) -> Node:
        return self._nodes[self.ROOT]

    def attach(self, parent: int, node: Node) -> int:
        """Append a detached node to the arena as the last child of parent.

        Args:
            parent: Arena index of a container node
            node: A node that has not been attached anywhere yet

        Returns:
            The new node's arena index.

        Raises:
            NodeStateError: If parent is unknown, a leaf, or already closed,
                or node already has a parent.
        """
        owner = self[parent]
        if not owner.kind.is_container:
            raise NodeStateError(f"{owner.kind!r} cannot own children", node=parent)
        if owner.end is not None:
            raise NodeStateError(f"{owner.kind!r} at {owner.start} is closed", node=parent)
        if node.parent is not None or node is self.root:
            raise NodeStateError(f"{node.kind!r} at {node.start} is already attached")

        index = len(self._nodes)
        node.parent = parent
        self._nodes.append(node)
        owner.children.append(index)
        return index

    def children(self, index: int) -> list[Node]:
        """Return the child nodes of the node at index."""
        return [self._nodes[child] for child in self[index].children]

    def blocks(self) -> list[Node]:
        """Return the top-level blocks, in source order."""
        return self.children(self.ROOT)

    def walk(self, index: int = ROOT) -> Iterator[tuple[int, Node]]:
        """Yield (index, node) pairs depth-first, parents before children."""
        stack = [index]
        while stack:
            current = stack.pop()
            node = self[current]
            yield current, node
            stack.extend(reversed(node.children))
