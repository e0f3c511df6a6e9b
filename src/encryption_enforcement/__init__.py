"""Encryption-at-rest enforcement rules for declared infrastructure trees."""

from __future__ import annotations

from .annotations import Annotations
from .constants import EFS_ENCRYPTION_MESSAGE, RDS_ENCRYPTION_MESSAGE
from .engine import EnforcementEngine, apply
from .errors import (
    DuplicateNodeError,
    EnforcementError,
    OptionsError,
    TreeDefinitionError,
)
from .exclusion import is_excluded
from .facade import add_all
from .model import DatabaseView, Diagnostic, FileSystemView, ResourceNode
from .options import EnforcementOptions
from .rules import (
    DEFAULT_RULES,
    DatabaseEncryptionRule,
    FileSystemEncryptionRule,
    Rule,
    build_rule_manifest,
    get_all_rules,
)

__all__ = [
    "DEFAULT_RULES",
    "Annotations",
    "DatabaseEncryptionRule",
    "DatabaseView",
    "Diagnostic",
    "DuplicateNodeError",
    "EFS_ENCRYPTION_MESSAGE",
    "EnforcementEngine",
    "EnforcementError",
    "EnforcementOptions",
    "FileSystemEncryptionRule",
    "FileSystemView",
    "OptionsError",
    "RDS_ENCRYPTION_MESSAGE",
    "ResourceNode",
    "Rule",
    "TreeDefinitionError",
    "add_all",
    "apply",
    "build_rule_manifest",
    "get_all_rules",
    "is_excluded",
]
