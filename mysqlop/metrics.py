"""Labelled counters and gauges for operator and agent events."""

from __future__ import annotations

import enum
import threading
from dataclasses import dataclass, field
from typing import Any, Mapping


class MetricsConfigError(RuntimeError):
    """Raised when metrics are registered before the required names are set."""


class MetricKind(enum.Enum):
    COUNTER = "counter"
    GAUGE = "gauge"


@dataclass
class LabeledMetric:
    """A counter or gauge whose values are keyed by a fixed set of labels."""

    kind: MetricKind
    namespace: str
    subsystem: str
    name: str
    help: str
    label_names: tuple[str, ...]
    _values: dict[tuple[str, ...], float] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def full_name(self) -> str:
        return "_".join(part for part in (self.namespace, self.subsystem, self.name) if part)

    def _key(self, labels: Mapping[str, str]) -> tuple[str, ...]:
        if set(labels) != set(self.label_names):
            raise ValueError(
                f"{self.full_name}: labels {sorted(labels)} do not match "
                f"{sorted(self.label_names)}"
            )
        return tuple(labels[n] for n in self.label_names)

    def _add(self, labels: Mapping[str, str], delta: float) -> None:
        key = self._key(labels)
        with self._lock:
            self._values[key] = self._values.get(key, 0.0) + delta

    def inc(self, labels: Mapping[str, str]) -> None:
        """Add one to the value for the given labels."""
        self._add(labels, 1.0)

    def dec(self, labels: Mapping[str, str]) -> None:
        """Subtract one from the value for the given labels; gauges only."""
        if self.kind is not MetricKind.GAUGE:
            raise TypeError(f"{self.full_name} is a counter and cannot be decremented")
        self._add(labels, -1.0)

    def value(self, labels: Mapping[str, str]) -> float:
        """Return the current value for the given labels."""
        key = self._key(labels)
        with self._lock:
            return self._values.get(key, 0.0)


@dataclass
class _Identity:
    pod_name: str = ""
    cluster_name: str = ""


_identity = _Identity()
_registry: dict[str, LabeledMetric] = {}
_registry_lock = threading.Lock()


def register_pod_name(name: str) -> None:
    """Set the name of the current pod."""
    _identity.pod_name = name


def register_cluster_name(name: str) -> None:
    """Set the name of the current cluster."""
    _identity.cluster_name = name


def _assert_pod_name() -> None:
    if not _identity.pod_name:
        raise MetricsConfigError("Metrics package requires podName. Unable to register metrics")


def _assert_cluster_name() -> None:
    if not _identity.cluster_name:
        raise MetricsConfigError(
            "Metrics package requires clusterName. Unable to register metrics"
        )


def _register(metric: LabeledMetric) -> None:
    with _registry_lock:
        if metric.full_name in _registry:
            raise ValueError(f"metric {metric.full_name} is already registered")
        _registry[metric.full_name] = metric


def register_operator_metric(metric: LabeledMetric) -> None:
    """Register a single operator metric."""
    _assert_pod_name()
    _register(metric)


def register_agent_metric(metric: LabeledMetric) -> None:
    """Register a single agent metric."""
    _assert_pod_name()
    _assert_cluster_name()
    _register(metric)


def registered_metrics() -> tuple[LabeledMetric, ...]:
    """Return every registered metric in registration order."""
    with _registry_lock:
        return tuple(_registry.values())


def new_operator_event_counter(name: str, help: str) -> LabeledMetric:
    return LabeledMetric(MetricKind.COUNTER, "mysql_operator", "cluster", name, help, ("podName",))


def new_operator_event_gauge(name: str, help: str) -> LabeledMetric:
    return LabeledMetric(MetricKind.GAUGE, "mysql_operator", "cluster", name, help, ("podName",))


def new_agent_event_counter(name: str, help: str) -> LabeledMetric:
    return LabeledMetric(
        MetricKind.COUNTER, "mysql", "innodb", name, help, ("podName", "clusterName")
    )


def new_agent_status_counter(name: str, help: str) -> LabeledMetric:
    return LabeledMetric(
        MetricKind.COUNTER,
        "mysql",
        "innodb",
        name,
        help,
        ("podName", "clusterName", "instanceStatus"),
    )


def _event_labels() -> dict[str, str]:
    labels = {"podName": _identity.pod_name}
    if _identity.cluster_name:
        labels["clusterName"] = _identity.cluster_name
    return labels


def _status_labels(status: Any) -> dict[str, str]:
    status_text = status.value if isinstance(status, enum.Enum) else status
    return {
        "podName": _identity.pod_name,
        "clusterName": _identity.cluster_name,
        "instanceStatus": str(status_text),
    }


def inc_event_counter(counter: LabeledMetric) -> None:
    counter.inc(_event_labels())


def inc_event_gauge(gauge: LabeledMetric) -> None:
    gauge.inc(_event_labels())


def dec_event_gauge(gauge: LabeledMetric) -> None:
    gauge.dec(_event_labels())


def inc_status_counter(counter: LabeledMetric, status: Any) -> None:
    counter.inc(_status_labels(status))