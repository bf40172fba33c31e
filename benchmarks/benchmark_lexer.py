"""Benchmark lexer throughput.

Run with:
    pytest benchmarks/benchmark_lexer.py -v --benchmark-only
"""

import pytest

from calclex import Lexer, tokenize


@pytest.mark.benchmark(group="lex")
def test_benchmark_drain_program(benchmark, large_program):
    """Drain a large program from a str source."""
    benchmark(lambda: list(Lexer(large_program)))


@pytest.mark.benchmark(group="lex")
def test_benchmark_drain_chunked(benchmark, large_program):
    """Drain the same program fed line by line."""
    lines = large_program.splitlines(keepends=True)
    benchmark(lambda: list(Lexer(lines)))


@pytest.mark.benchmark(group="lex")
def test_benchmark_tokenize_with_config(benchmark, large_program):
    """Drain through tokenize(), which checks every token for errors."""
    benchmark(lambda: list(tokenize(large_program)))


@pytest.mark.benchmark(group="lex-operands")
def test_benchmark_long_identifiers(benchmark, long_identifiers):
    benchmark(lambda: list(Lexer(long_identifiers)))
