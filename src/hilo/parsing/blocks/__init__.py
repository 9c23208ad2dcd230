"""Block rules for the Hilo parser.

Each rule implements the BlockRule protocol (open/consume). The driver
tries them in priority order at every line start and keeps the first
match.
"""

from hilo.parsing.blocks.heading import HeadingRule
from hilo.parsing.blocks.paragraph import ParagraphRule


def default_block_rules(
    *, interrupt_paragraphs: bool = True
) -> tuple[HeadingRule, ParagraphRule]:
    """The default rule order: heading first, paragraph as the fallback.

    Args:
        interrupt_paragraphs: Let a heading line end a running paragraph
    """
    heading = HeadingRule()
    interrupts = (heading,) if interrupt_paragraphs else ()
    return (heading, ParagraphRule(interrupts=interrupts))


__all__ = ["HeadingRule", "ParagraphRule", "default_block_rules"]
