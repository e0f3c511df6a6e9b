"""Id-based exclusion lookup."""

from __future__ import annotations

from typing import Sequence

from .errors import OptionsError
from .model import ResourceNode


def is_excluded(node: ResourceNode, exclusion_list: Sequence[str]) -> bool:
    """Return True when the node id or its parent's id is in ``exclusion_list``.

    Raw resources are excluded by their own id. Resources declared through a
    wrapper get a synthesized child id, so the wrapper id is checked as well.
    """

    if isinstance(exclusion_list, (str, bytes)):
        raise OptionsError("Exclusion list must be a sequence of ids, not a single string")
    if node.id in exclusion_list:
        return True
    parent = node.parent
    return parent is not None and parent.id in exclusion_list
