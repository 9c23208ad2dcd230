"""Exception classes for Hilo.

Tokenizing and block matching never fail on input: a rule that does not
match returns None. These exceptions cover programming errors only, such
as a block rule that breaks the open/consume contract or misuse of the
node arena.
"""

from __future__ import annotations


class HiloError(Exception):
    """Base exception for all Hilo errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(HiloError):
    """Error during block parsing.

    Raised by the parser driver when a block rule violates its contract
    (for example, consuming without advancing the cursor).
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class NodeStateError(HiloError):
    """Invalid operation on a node or the node arena.

    Raised when a node is closed twice, attached to a second parent,
    or looked up by an index the tree does not hold.
    """

    def __init__(self, message: str, node: int | None = None) -> None:
        """Initialize node state error.

        Args:
            message: Description of the invalid operation
            node: Arena index of the offending node (optional)
        """
        self.node = node
        prefix = f"Node {node}: " if node is not None else ""
        super().__init__(f"{prefix}{message}")
