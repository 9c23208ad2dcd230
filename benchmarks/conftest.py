"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large markdown document (~60KB)."""
    sections = []
    for i in range(200):
        sections.append(f"""
# Section {i}

This is paragraph {i} with some plain text, 3 numbers and a #tag.
It continues on a second line.

## Subsection {i}.1

1. First item
2) Second item
- Dash item
> Quoted line {i}
""")
    return "\n".join(sections)
