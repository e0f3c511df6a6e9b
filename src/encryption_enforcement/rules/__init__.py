"""Rule registry and manifest helpers for encryption enforcement."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple, Type

from .base import Rule

_registry: List[Type[Rule]] = []


def register(rule_cls: Type[Rule]) -> Type[Rule]:
    if any(existing.id == rule_cls.id for existing in _registry):
        raise ValueError(f"Duplicate rule id registered: {rule_cls.id}")
    _registry.append(rule_cls)
    return rule_cls


def get_all_rules() -> List[Type[Rule]]:
    """Return the ordered list of default rule classes."""

    return list(_registry)


def build_rule_manifest() -> List[Dict[str, Any]]:
    """Return deterministic manifest entries for every registered rule."""

    manifest: List[Dict[str, Any]] = []
    for rule_cls in sorted(get_all_rules(), key=lambda rule: rule.id):
        manifest.append(
            {
                "id": rule_cls.id,
                "severity": rule_cls.severity,
                "resource_types": sorted(rule_cls.resource_types),
                "message": rule_cls.message,
                "python_class": f"{rule_cls.__module__}.{rule_cls.__name__}",
                "description": (rule_cls.__doc__ or "").strip(),
            }
        )
    return manifest


# Registration order is application order: filesystem before database.
from . import rule_filesystem_encryption as _rule_filesystem_encryption  # noqa: F401,E402
from . import rule_database_encryption as _rule_database_encryption  # noqa: F401,E402
from .rule_database_encryption import DatabaseEncryptionRule  # noqa: E402
from .rule_filesystem_encryption import FileSystemEncryptionRule  # noqa: E402

# Fixed at import time; later registrations do not join the default set.
DEFAULT_RULES: Tuple[Type[Rule], ...] = (FileSystemEncryptionRule, DatabaseEncryptionRule)

__all__ = [
    "DEFAULT_RULES",
    "DatabaseEncryptionRule",
    "FileSystemEncryptionRule",
    "Rule",
    "build_rule_manifest",
    "get_all_rules",
    "register",
]
