"""Rule ENC-EFS-001: managed filesystems must be encrypted at rest."""

from __future__ import annotations

from . import register
from .base import Rule
from ..constants import EFS_ENCRYPTION_MESSAGE, FILESYSTEM_TYPE
from ..model import FileSystemView, ResourceNode


@register
class FileSystemEncryptionRule(Rule):
    """Managed filesystems must set 'encrypted' to true."""

    id = "ENC-EFS-001"
    resource_types = frozenset({FILESYSTEM_TYPE})
    message = EFS_ENCRYPTION_MESSAGE

    def is_compliant(self, node: ResourceNode) -> bool:
        # Unresolved references and strings are not proof of encryption.
        return FileSystemView(node).encrypted is True
