"""Shared fixtures for lintcheck tests."""

from __future__ import annotations

import pytest

from lintcheck.contracts import RunContext


@pytest.fixture
def context() -> RunContext:
    return RunContext(owner="octo", repo="widgets", sha="abc123")


@pytest.fixture
def pr_context() -> RunContext:
    return RunContext(owner="octo", repo="widgets", sha="abc123", pull_number=7, changed_files=2)
