"""Helpers for Kubernetes object metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

CLUSTER_LABEL = "v1alpha1.mysql.oracle.com/cluster"
CLUSTER_GROUP = "mysql.oracle.com"
CLUSTER_VERSION = "v1alpha1"
CLUSTER_KIND = "Cluster"


@dataclass(frozen=True)
class ClusterRef:
    """The identifying metadata of a MySQL cluster resource."""

    name: str
    namespace: str = ""
    uid: str = ""


def namespace_and_name(obj: Any) -> str:
    """Return "<namespace>/<name>", or just the name when there is no namespace."""
    if not obj.namespace:
        return obj.name
    return f"{obj.namespace}/{obj.name}"


def controller_ref(cluster: ClusterRef) -> dict[str, Any]:
    """Return an owner reference marking the cluster as the controller."""
    return {
        "apiVersion": f"{CLUSTER_GROUP}/{CLUSTER_VERSION}",
        "kind": CLUSTER_KIND,
        "name": cluster.name,
        "uid": cluster.uid,
        "controller": True,
        "blockOwnerDeletion": True,
    }