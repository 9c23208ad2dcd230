"""Block-level parsing for Hilo.

Provides:
- protocols: BlockRule and LeafConsumer contracts
- leaf: the inline line consumer
- blocks: heading and paragraph rules
"""

from hilo.parsing.protocols import BlockRule, LeafConsumer

__all__ = ["BlockRule", "LeafConsumer"]
