"""Pytest configuration and fixtures for pugjsx tests."""

import pytest

from pugjsx import Compiler, TranspileConfig


@pytest.fixture
def compiler():
    """Create a Compiler with the default configuration."""
    return Compiler()


@pytest.fixture
def strict_compiler():
    """Create a Compiler that only accepts the ':' / '@' shorthands."""
    return Compiler(TranspileConfig(long_form_bindings=False))


@pytest.fixture
def no_colors(monkeypatch):
    """Disable terminal colors so diagnostics compare as plain text."""
    from pugjsx import terminal

    monkeypatch.setattr(terminal, "_USE_COLORS", False)
