from mysqlop.kube import (
    CLUSTER_GROUP,
    CLUSTER_KIND,
    CLUSTER_VERSION,
    ClusterRef,
    controller_ref,
    namespace_and_name,
)


def test_namespace_and_name_with_namespace():
    assert namespace_and_name(ClusterRef(name="db", namespace="prod")) == "prod/db"


def test_namespace_and_name_without_namespace():
    assert namespace_and_name(ClusterRef(name="db")) == "db"


def test_controller_ref_points_at_cluster():
    ref = controller_ref(ClusterRef(name="db", namespace="prod", uid="uid-1"))
    assert ref["apiVersion"] == f"{CLUSTER_GROUP}/{CLUSTER_VERSION}"
    assert ref["kind"] == CLUSTER_KIND
    assert ref["name"] == "db"
    assert ref["uid"] == "uid-1"
    assert ref["controller"] is True
    assert ref["blockOwnerDeletion"] is True