"""Enforcement engine: walks a resource tree and applies rules to it."""

from __future__ import annotations

import logging
from typing import List, Tuple

from .exclusion import is_excluded
from .model import ResourceNode
from .rules.base import Rule

logger = logging.getLogger(__name__)


def apply(rule: Rule, root: ResourceNode) -> None:
    """Evaluate ``rule`` against every node under ``root``, inclusive.

    Violations are attached to the offending node with
    :meth:`ResourceNode.report_error`; nothing is raised and nothing is
    deduplicated, so applying a rule twice reports every violation twice.
    """

    emitted = 0
    for node in root.walk():
        if not rule.matches(node):
            continue
        if rule.is_suppressed(node):
            logger.debug("%s: skipping %s (suppressed)", rule.id, node.path)
            continue
        if is_excluded(node, rule.exclude_resources):
            logger.debug("%s: skipping %s (excluded)", rule.id, node.path)
            continue
        if not rule.is_compliant(node):
            node.report_error(rule.message, rule_id=rule.id)
            emitted += 1

    logger.info("%s: %d diagnostic(s) under %s", rule.id, emitted, root.path)


class EnforcementEngine:
    """Ordered set of rules applied to a tree as independent passes."""

    def __init__(self) -> None:
        self._rules: List[Rule] = []

    def add(self, rule: Rule) -> None:
        if not isinstance(rule, Rule):
            raise TypeError(f"Expected a Rule instance, got {type(rule).__name__}")
        self._rules.append(rule)

    @property
    def all(self) -> Tuple[Rule, ...]:
        return tuple(self._rules)

    def run(self, root: ResourceNode) -> None:
        for rule in self._rules:
            apply(rule, root)
