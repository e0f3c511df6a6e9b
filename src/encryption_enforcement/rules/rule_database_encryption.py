"""Rule ENC-RDS-001: relational databases must enable storage encryption."""

from __future__ import annotations

from . import register
from .base import Rule
from ..constants import (
    DATABASE_CLUSTER_TYPE,
    DATABASE_INSTANCE_TYPE,
    RDS_ENCRYPTION_MESSAGE,
)
from ..model import DatabaseView, ResourceNode


@register
class DatabaseEncryptionRule(Rule):
    """Database instances and clusters must set 'storageEncrypted' to true."""

    id = "ENC-RDS-001"
    resource_types = frozenset({DATABASE_INSTANCE_TYPE, DATABASE_CLUSTER_TYPE})
    message = RDS_ENCRYPTION_MESSAGE

    def is_suppressed(self, node: ResourceNode) -> bool:
        # Cluster members take their encryption from the owning cluster, which
        # is checked on its own. Some member declarations do not expose
        # 'storageEncrypted' at all, and the platform rejects members that
        # disagree with their cluster.
        return DatabaseView(node).is_cluster_member

    def is_compliant(self, node: ResourceNode) -> bool:
        # 'storageEncrypted' has the same meaning on instances and clusters.
        return DatabaseView(node).storage_encrypted is True
