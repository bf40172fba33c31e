"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_program() -> str:
    """Generate a large program (~100KB) of assignment statements."""
    lines = []
    for i in range(1, 2001):
        lines.append(f"v_{i} := (v_{i - 1} * 2.5E3 - -{i}) / rate_{i % 7} + 0.{i}")
    return "\n".join(lines)


@pytest.fixture
def long_identifiers() -> str:
    return " ".join("identifier_" + "x" * 64 for _ in range(2000))
