from encryption_enforcement import ResourceNode
from encryption_enforcement.constants import (
    DATABASE_CLUSTER_TYPE,
    DATABASE_INSTANCE_TYPE,
    FILESYSTEM_TYPE,
)

WRAPPED_CHILD_ID = "Resource"


def declare(scope, node_id, type_tag, *, wrapped=False, **properties):
    """Declare a resource directly, or as the 'Resource' child of a wrapper.

    Returns the node carrying the type tag and properties.
    """
    if wrapped:
        wrapper = ResourceNode(node_id, f"{type_tag}-wrapper", parent=scope)
        return ResourceNode(WRAPPED_CHILD_ID, type_tag, parent=wrapper, properties=properties)
    return ResourceNode(node_id, type_tag, parent=scope, properties=properties)


def declare_filesystem(scope, node_id, *, wrapped=False, **properties):
    return declare(scope, node_id, FILESYSTEM_TYPE, wrapped=wrapped, **properties)


def declare_instance(scope, node_id, *, wrapped=False, **properties):
    return declare(scope, node_id, DATABASE_INSTANCE_TYPE, wrapped=wrapped, **properties)


def declare_cluster(scope, node_id, *, wrapped=False, members=(), **properties):
    """Declare a cluster; wrapped clusters get member instances under the wrapper."""
    cluster = declare(scope, node_id, DATABASE_CLUSTER_TYPE, wrapped=wrapped, **properties)
    owner = cluster.parent if wrapped else scope
    for member_id in members:
        member = ResourceNode(member_id, "cluster-instance", parent=owner)
        ResourceNode(
            WRAPPED_CHILD_ID,
            DATABASE_INSTANCE_TYPE,
            parent=member,
            properties={"clusterIdentifier": {"Ref": cluster.path}},
        )
    return cluster
