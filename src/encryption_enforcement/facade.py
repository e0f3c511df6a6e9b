"""One-call registration of the default encryption rules."""

from __future__ import annotations

from typing import Any, Mapping, Union

from .engine import EnforcementEngine
from .model import ResourceNode
from .options import EnforcementOptions
from .rules import DEFAULT_RULES


def add_all(
    root: ResourceNode,
    options: Union[EnforcementOptions, Mapping[str, Any], None] = None,
) -> EnforcementEngine:
    """Register the default rules with shared ``options`` and apply them to ``root``.

    Rules run in registration order, filesystem first. The engine is returned
    so callers can inspect what was registered.
    """

    shared = EnforcementOptions.coerce(options)
    engine = EnforcementEngine()
    for rule_cls in DEFAULT_RULES:
        engine.add(rule_cls(shared))
    engine.run(root)
    return engine
