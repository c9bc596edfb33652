"""Test configuration for local imports without installing the package."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


def pytest_configure():
    """Ensure the src/ directory is importable for tests."""
    root = Path(__file__).resolve().parents[1] / "src"
    sys.path.insert(0, str(root))


@pytest.fixture
def roots():
    from checksim.art import Check

    return {tid: Check.root(seed) for tid, seed in {1: 100, 2: 200, 3: 300, 4: 400, 5: 500}.items()}


@pytest.fixture
def records_path(tmp_path, roots):
    path = tmp_path / "checks.jsonl"
    rows = [{"token_id": tid, "checks_count": c.checks_count, "check_struct": c.to_record()} for tid, c in roots.items()]
    path.write_text("\n".join(json.dumps(r) for r in rows) + "\n")
    return path
