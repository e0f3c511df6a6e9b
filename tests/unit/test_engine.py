"""Enforcement engine traversal and ordering."""

from __future__ import annotations

import logging

import pytest

from encryption_enforcement import (
    DatabaseEncryptionRule,
    EnforcementEngine,
    FileSystemEncryptionRule,
    ResourceNode,
    Rule,
    apply,
)
from encryption_enforcement import engine as engine_module


class _EveryNodeRule(Rule):
    id = "TEST-ALL"
    message = "visited"

    def matches(self, node):
        return True

    def is_compliant(self, node):
        return False


def _tree():
    root = ResourceNode("Root", "stack")
    a = ResourceNode("A", "group", parent=root)
    ResourceNode("A1", "managed-filesystem", parent=a, properties={"encrypted": False})
    ResourceNode("A2", "managed-filesystem", parent=a, properties={"encrypted": True})
    ResourceNode("B", "managed-filesystem", parent=root)
    return root


def test_every_node_is_visited_once_in_pre_order():
    root = _tree()
    apply(_EveryNodeRule(), root)
    paths = [d.path for node in root.walk() for d in node.diagnostics]
    assert paths == ["/Root", "/Root/A", "/Root/A/A1", "/Root/A/A2", "/Root/B"]


def test_apply_on_subtree_only_touches_subtree():
    root = _tree()
    apply(FileSystemEncryptionRule(), root.find("/Root/A"))
    assert root.find("/Root/A/A1").diagnostics
    assert root.find("/Root/B").diagnostics == ()


def test_violations_do_not_stop_traversal():
    root = _tree()
    apply(FileSystemEncryptionRule(), root)
    assert len(root.find("/Root/A/A1").diagnostics) == 1
    assert len(root.find("/Root/B").diagnostics) == 1


def test_applying_twice_does_not_deduplicate():
    root = _tree()
    rule = FileSystemEncryptionRule()
    apply(rule, root)
    apply(rule, root)
    assert len(root.find("/Root/A/A1").diagnostics) == 2
    assert len(root.find("/Root/A/A2").diagnostics) == 0


def test_engine_never_mutates_properties():
    root = _tree()
    before = {node.path: dict(node.properties) for node in root.walk()}
    apply(FileSystemEncryptionRule(), root)
    assert {node.path: dict(node.properties) for node in root.walk()} == before


def test_suppressed_nodes_skip_exclusion_lookup(monkeypatch):
    calls = []

    def _record(node, exclusion_list):
        calls.append(node.path)
        return False

    monkeypatch.setattr(engine_module, "is_excluded", _record)
    root = ResourceNode("Root", "stack")
    ResourceNode("Member", "database-instance", parent=root, properties={"clusterIdentifier": "c"})
    ResourceNode("Cluster", "database-cluster", parent=root, properties={"storageEncrypted": True})
    apply(DatabaseEncryptionRule({"excludeResources": ["Member"]}), root)
    assert calls == ["/Root/Cluster"]


def test_engine_runs_rules_in_registration_order():
    root = ResourceNode("Root", "stack")
    node = ResourceNode("X", "managed-filesystem", parent=root)
    first, second = _EveryNodeRule(), FileSystemEncryptionRule()
    engine = EnforcementEngine()
    engine.add(first)
    engine.add(second)
    engine.run(root)
    assert engine.all == (first, second)
    assert [d.rule_id for d in node.diagnostics] == ["TEST-ALL", "ENC-EFS-001"]


def test_engine_rejects_non_rules():
    with pytest.raises(TypeError):
        EnforcementEngine().add(FileSystemEncryptionRule)  # type: ignore[arg-type]


def test_pass_summary_is_logged(caplog):
    root = _tree()
    with caplog.at_level(logging.DEBUG, logger="encryption_enforcement.engine"):
        apply(FileSystemEncryptionRule({"excludeResources": ["B"]}), root)
    messages = [record.getMessage() for record in caplog.records]
    assert "ENC-EFS-001: skipping /Root/B (excluded)" in messages
    assert "ENC-EFS-001: 1 diagnostic(s) under /Root" in messages
