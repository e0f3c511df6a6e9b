"""Shared constants for the encryption enforcement rules."""

SEVERITY_ERROR = "error"

FILESYSTEM_TYPE = "managed-filesystem"
DATABASE_INSTANCE_TYPE = "database-instance"
DATABASE_CLUSTER_TYPE = "database-cluster"

PROP_ENCRYPTED = "encrypted"
PROP_STORAGE_ENCRYPTED = "storageEncrypted"
PROP_CLUSTER_IDENTIFIER = "clusterIdentifier"
PROP_SOURCE_CLUSTER_IDENTIFIER = "sourceClusterIdentifier"

EFS_ENCRYPTION_MESSAGE = (
    "EFS FileSystem must be encrypted. Please set the 'encrypted' property to true."
)
RDS_ENCRYPTION_MESSAGE = (
    "RDS database must have storage encryption enabled. "
    "Please set the 'storageEncrypted' property to true."
)
