"""Resource tree model consumed by the enforcement engine.

A :class:`ResourceNode` is one declared infrastructure element. Nodes are
attached to their parent at construction time, keep only a weak reference
back to it, and act as the sink for the diagnostics the rules emit.
"""

from __future__ import annotations

import weakref
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .constants import (
    PROP_CLUSTER_IDENTIFIER,
    PROP_ENCRYPTED,
    PROP_SOURCE_CLUSTER_IDENTIFIER,
    PROP_STORAGE_ENCRYPTED,
    SEVERITY_ERROR,
)
from .errors import DuplicateNodeError, TreeDefinitionError

_TREE_KEYS = {"id", "type", "properties", "children"}


@dataclass(frozen=True)
class Diagnostic:
    """An error attached to exactly one node of the tree."""

    severity: str
    message: str
    path: str
    rule_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity,
            "message": self.message,
            "path": self.path,
            "rule_id": self.rule_id,
        }


class ResourceNode:
    """One declared resource, its containment links and its diagnostics."""

    def __init__(
        self,
        node_id: str,
        type_tag: str,
        parent: Optional["ResourceNode"] = None,
        properties: Optional[Mapping[str, Any]] = None,
    ) -> None:
        if not isinstance(node_id, str) or not node_id:
            raise TreeDefinitionError(f"Node id must be a non-empty string, got {node_id!r}")
        if not isinstance(type_tag, str):
            raise TreeDefinitionError(f"Type tag for {node_id!r} must be a string")
        self._id = node_id
        self._type_tag = type_tag
        self._properties = MappingProxyType(dict(properties or {}))
        self._children: List[ResourceNode] = []
        self._diagnostics: List[Diagnostic] = []
        self._parent_ref: Optional[weakref.ReferenceType[ResourceNode]] = None
        if parent is not None:
            parent._attach(self)
            self._parent_ref = weakref.ref(parent)

    def __repr__(self) -> str:
        return f"ResourceNode({self._id!r}, {self._type_tag!r})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def type_tag(self) -> str:
        return self._type_tag

    @property
    def parent(self) -> Optional["ResourceNode"]:
        if self._parent_ref is None:
            return None
        parent = self._parent_ref()
        if parent is None:
            raise TreeDefinitionError(
                f"Parent of {self._id!r} was garbage collected; keep a reference to the root"
            )
        return parent

    @property
    def properties(self) -> Mapping[str, Any]:
        return self._properties

    @property
    def children(self) -> Tuple["ResourceNode", ...]:
        return tuple(self._children)

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    @property
    def path(self) -> str:
        segments: List[str] = []
        node: Optional[ResourceNode] = self
        while node is not None:
            segments.append(node.id)
            node = node.parent
        return "/" + "/".join(reversed(segments))

    def report_error(self, message: str, rule_id: Optional[str] = None) -> Diagnostic:
        """Attach an error diagnostic to this node and return it."""

        diagnostic = Diagnostic(
            severity=SEVERITY_ERROR,
            message=message,
            path=self.path,
            rule_id=rule_id,
        )
        self._diagnostics.append(diagnostic)
        return diagnostic

    def walk(self) -> Iterator["ResourceNode"]:
        """Yield this node and every descendant, depth-first pre-order."""

        stack: List[ResourceNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def find(self, path: str) -> Optional["ResourceNode"]:
        """Return the descendant whose path equals ``path``, if any."""

        for node in self.walk():
            if node.path == path:
                return node
        return None

    def _attach(self, child: "ResourceNode") -> None:
        if any(existing.id == child.id for existing in self._children):
            raise DuplicateNodeError(
                f"There is already a child with id {child.id!r} under {self.path}"
            )
        self._children.append(child)

    @classmethod
    def from_dict(
        cls,
        definition: Mapping[str, Any],
        parent: Optional["ResourceNode"] = None,
    ) -> "ResourceNode":
        """Build a subtree from nested ``{id, type, properties, children}`` mappings.

        The whole definition is validated before any node is created, so a
        malformed entry leaves ``parent`` untouched.
        """

        _validate_definition(definition)
        return cls._build(definition, parent)

    @classmethod
    def _build(
        cls,
        definition: Mapping[str, Any],
        parent: Optional["ResourceNode"],
    ) -> "ResourceNode":
        node = cls(
            definition["id"],
            definition.get("type", ""),
            parent=parent,
            properties=definition.get("properties") or {},
        )
        for child in definition.get("children") or []:
            cls._build(child, node)
        return node

    # Defined last: the name shadows the builtin inside the class body.
    def property(self, name: str) -> Any:
        """Return the declared value of ``name``, or ``None`` when unset."""

        return self._properties.get(name)


class FileSystemView:
    """Read-only view of the properties the filesystem rule inspects."""

    def __init__(self, node: ResourceNode) -> None:
        self._node = node

    @property
    def encrypted(self) -> Any:
        return self._node.property(PROP_ENCRYPTED)


class DatabaseView:
    """Read-only view over a database instance or cluster node."""

    def __init__(self, node: ResourceNode) -> None:
        self._node = node

    @property
    def storage_encrypted(self) -> Any:
        return self._node.property(PROP_STORAGE_ENCRYPTED)

    @property
    def cluster_identifier(self) -> Any:
        return self._node.property(PROP_CLUSTER_IDENTIFIER)

    @property
    def source_cluster_identifier(self) -> Any:
        return self._node.property(PROP_SOURCE_CLUSTER_IDENTIFIER)

    @property
    def is_cluster_member(self) -> bool:
        # Members inherit encryption from their owning cluster.
        return (
            self.cluster_identifier is not None
            or self.source_cluster_identifier is not None
        )


def _validate_definition(definition: Any) -> None:
    stack: List[Any] = [definition]
    while stack:
        current = stack.pop()
        if not isinstance(current, Mapping):
            raise TreeDefinitionError(
                f"Tree definition must be a mapping, got {type(current).__name__}"
            )
        unknown = sorted(set(current) - _TREE_KEYS)
        if unknown:
            raise TreeDefinitionError(f"Unknown tree keys: {', '.join(unknown)}")
        node_id = current.get("id")
        if not isinstance(node_id, str) or not node_id:
            raise TreeDefinitionError(f"Node id must be a non-empty string, got {node_id!r}")
        if not isinstance(current.get("type", ""), str):
            raise TreeDefinitionError(f"Type tag for {node_id!r} must be a string")
        if not isinstance(current.get("properties") or {}, Mapping):
            raise TreeDefinitionError(f"'properties' of {node_id!r} must be a mapping")
        children = current.get("children") or []
        if not isinstance(children, (list, tuple)):
            raise TreeDefinitionError(f"'children' of {node_id!r} must be a list")
        seen = set()
        for child in children:
            child_id = child.get("id") if isinstance(child, Mapping) else None
            if child_id in seen:
                raise DuplicateNodeError(f"Duplicate child id {child_id!r} under {node_id!r}")
            seen.add(child_id)
        stack.extend(children)
