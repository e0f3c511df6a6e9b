"""Read-side queries over the diagnostics attached to a resource tree."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .constants import SEVERITY_ERROR
from .model import Diagnostic, ResourceNode

ANY_PATH = "*"


class Annotations:
    """Snapshot of every diagnostic in a tree, in pre-order node order."""

    def __init__(self, diagnostics: List[Diagnostic]) -> None:
        self._diagnostics = tuple(diagnostics)

    @classmethod
    def from_tree(cls, root: ResourceNode) -> "Annotations":
        collected: List[Diagnostic] = []
        for node in root.walk():
            collected.extend(node.diagnostics)
        return cls(collected)

    @property
    def all(self) -> Tuple[Diagnostic, ...]:
        return self._diagnostics

    def find_errors(
        self,
        path: str = ANY_PATH,
        message: Optional[str] = None,
    ) -> List[Diagnostic]:
        """Return error diagnostics matching ``path`` and ``message``.

        ``"*"`` matches every path and ``None`` matches every message.
        """

        return [
            diagnostic
            for diagnostic in self._diagnostics
            if diagnostic.severity == SEVERITY_ERROR
            and (path == ANY_PATH or diagnostic.path == path)
            and (message is None or diagnostic.message == message)
        ]

    def has_error(self, path: str, message: Optional[str] = None) -> bool:
        return bool(self.find_errors(path, message))

    def has_no_error(self, path: str = ANY_PATH, message: Optional[str] = None) -> bool:
        return not self.find_errors(path, message)
