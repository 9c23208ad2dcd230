"""ContextVar-based parse configuration for Hilo.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per parse, read by the driver and the block rules.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from hilo.config import parse_config_context, ParseConfig

    with parse_config_context(ParseConfig(max_heading_level=3)):
        tree = Parser(source).parse()

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

from hilo.nodes import MAX_HEADING_LEVEL

if TYPE_CHECKING:
    from hilo.parsing.protocols import BlockRule


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is per-call state, not configuration. It stays on
    the Parser instance.

    Attributes:
        max_heading_level: Longest hash run that still opens a heading (1-6)
        block_rules: Block rules to try at each line start, in priority order.
            None uses the default (heading, then paragraph).
        interrupt_paragraphs: Let a heading end a paragraph without a blank line.
            Only applies to the default rules; when block_rules is given, each
            ParagraphRule carries its own interrupts and this flag is ignored.

    """

    max_heading_level: int = MAX_HEADING_LEVEL
    block_rules: tuple[BlockRule, ...] | None = None
    interrupt_paragraphs: bool = True

    def __post_init__(self) -> None:
        if not 1 <= self.max_heading_level <= MAX_HEADING_LEVEL:
            raise ValueError(
                f"max_heading_level must be 1-{MAX_HEADING_LEVEL}, got {self.max_heading_level}"
            )
        if self.block_rules is not None and not self.block_rules:
            raise ValueError("block_rules must name at least one rule")

    @classmethod
    def from_dict(cls, config_dict: dict) -> ParseConfig:
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ParseConfig.from_dict({"max_heading_level": 3, "other": 1})
            ParseConfig(max_heading_level=3, block_rules=None, interrupt_paragraphs=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if isinstance(filtered.get("block_rules"), list):
            filtered["block_rules"] = tuple(filtered["block_rules"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "hilo_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(max_heading_level=2)):
        ...     get_parse_config().max_heading_level
        2

    """
    token = _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
