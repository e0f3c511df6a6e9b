"""Rule base class for encryption enforcement."""

from __future__ import annotations

from typing import Any, FrozenSet, Mapping, Tuple, Union

from ..constants import SEVERITY_ERROR
from ..model import ResourceNode
from ..options import EnforcementOptions


class Rule:
    """Type-scoped compliance check plus its exclusion configuration.

    Subclasses set ``id``, ``resource_types`` and ``message`` and override
    :meth:`is_compliant`. The engine owns traversal; rules only answer
    questions about a single node.
    """

    id = "UNSET"
    severity = SEVERITY_ERROR
    resource_types: FrozenSet[str] = frozenset()
    message = ""

    def __init__(
        self,
        options: Union[EnforcementOptions, Mapping[str, Any], None] = None,
    ) -> None:
        self.options = EnforcementOptions.coerce(options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(exclude_resources={list(self.exclude_resources)!r})"

    @property
    def exclude_resources(self) -> Tuple[str, ...]:
        return self.options.exclude_resources

    def matches(self, node: ResourceNode) -> bool:
        return node.type_tag in self.resource_types

    def is_suppressed(self, node: ResourceNode) -> bool:
        """Return True for nodes the rule must neither check nor report."""

        return False

    def is_compliant(self, node: ResourceNode) -> bool:
        return True
