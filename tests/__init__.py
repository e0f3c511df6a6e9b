"""Test package helpers shared across encryption enforcement suites."""

from __future__ import annotations

from typing import Any, Dict, List

DIAGNOSTIC_FIELDS: tuple[str, ...] = ("path", "rule_id", "severity", "message")


def canonicalize_diagnostics(root) -> List[Dict[str, Any]]:
    """Flatten a tree's diagnostics into ordered plain mappings for comparisons."""

    collected: List[Dict[str, Any]] = []
    for node in root.walk():
        for diagnostic in node.diagnostics:
            payload = diagnostic.to_dict()
            missing = [field for field in DIAGNOSTIC_FIELDS if field not in payload]
            if missing:
                raise AssertionError(f"Missing diagnostic fields: {', '.join(missing)}")
            collected.append({field: payload[field] for field in DIAGNOSTIC_FIELDS})
    return collected


__all__ = ["canonicalize_diagnostics"]
