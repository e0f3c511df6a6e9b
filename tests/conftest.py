"""Global pytest configuration for encryption enforcement tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC_ROOT = _REPO_ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

from encryption_enforcement import ResourceNode  # noqa: E402


@pytest.fixture
def stack() -> ResourceNode:
    """Empty root node standing in for a deployment stack."""

    root = ResourceNode("TestStack", "stack")
    ResourceNode("TestVpc", "network", parent=root)
    return root
