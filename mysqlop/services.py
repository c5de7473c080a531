"""Headless services for MySQL clusters."""

from __future__ import annotations

from typing import Any

from mysqlop.kube import CLUSTER_LABEL, ClusterRef, controller_ref

MYSQL_PORT = 3306
CLUSTER_IP_NONE = "None"
TOLERATE_UNREADY_ANNOTATION = "service.alpha.kubernetes.io/tolerate-unready-endpoints"


def new_for_cluster(cluster: ClusterRef) -> dict[str, Any]:
    """Return a headless service for the cluster."""
    return {
        "metadata": {
            "labels": {CLUSTER_LABEL: cluster.name},
            "name": cluster.name,
            "namespace": cluster.namespace,
            "ownerReferences": [controller_ref(cluster)],
            "annotations": {TOLERATE_UNREADY_ANNOTATION: "true"},
        },
        "spec": {
            "ports": [{"port": MYSQL_PORT}],
            "selector": {CLUSTER_LABEL: cluster.name},
            "clusterIP": CLUSTER_IP_NONE,
        },
    }