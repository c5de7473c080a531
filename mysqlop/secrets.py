"""Root password secrets for MySQL clusters."""

from __future__ import annotations

import random
import string
from typing import Any

from mysqlop.kube import CLUSTER_LABEL, ClusterRef, controller_ref

_CHARS = string.ascii_lowercase + string.ascii_uppercase + string.digits
_rng = random.SystemRandom()

_ROOT_PASSWORD_LENGTH = 16


def random_alphanumeric_string(length: int) -> str:
    """Return a random string of letters and digits of the given length."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return "".join(_rng.choices(_CHARS, k=length))


def get_root_password_secret_name(cluster: ClusterRef) -> str:
    """Return the name of the root password secret for the cluster."""
    return f"{cluster.name}-root-password"


def new_mysql_root_password(cluster: ClusterRef) -> dict[str, Any]:
    """Return a secret holding a freshly generated MySQL root password."""
    generated = random_alphanumeric_string(_ROOT_PASSWORD_LENGTH)
    encoded = generated.encode()
    return {
        "metadata": {
            "labels": {CLUSTER_LABEL: cluster.name},
            "name": get_root_password_secret_name(cluster),
            "ownerReferences": [controller_ref(cluster)],
            "namespace": cluster.namespace,
        },
        "data": {"password": encoded},
    }