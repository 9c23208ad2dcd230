"""Benchmark tokenizing and parsing a large document.

Run with:
    pytest benchmarks/benchmark_tokenizer.py -v --benchmark-only
"""

import pytest

from hilo import parse, tokenize


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize(benchmark, large_document):
    """Benchmark a full tokenizer pass over the document."""
    tokens = benchmark(tokenize, large_document)
    assert tokens[-1].end == len(large_document)


@pytest.mark.benchmark(group="parse")
def test_benchmark_parse(benchmark, large_document):
    """Benchmark building the full block tree."""
    tree = benchmark(parse, large_document)
    assert tree.root.end == len(large_document)
