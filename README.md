# mysqlop

Building blocks for an operator that manages MySQL InnoDB clusters.

## What is inside

- `mysqlop.kube`: `ClusterRef` (name, namespace, uid), `namespace_and_name(obj)`
  which gives `"<namespace>/<name>"` or just the name, and
  `controller_ref(cluster)` which builds an owner reference marking the cluster
  as controller.
- `mysqlop.secrets`: `random_alphanumeric_string(length)` (raises `ValueError`
  for a negative length), `new_mysql_root_password(cluster)` which builds a
  secret holding a generated 16-character root password, and
  `get_root_password_secret_name(cluster)` which returns
  `"<cluster name>-root-password"`.
- `mysqlop.services`: `new_for_cluster(cluster)` builds the headless service
  (port 3306, `clusterIP: None`) that fronts a cluster's members.
- `mysqlop.metrics`: `LabeledMetric` counters and gauges with `inc`, `dec`
  (gauges only) and `value`; constructors `new_operator_event_counter`,
  `new_operator_event_gauge`, `new_agent_event_counter` and
  `new_agent_status_counter`; `register_pod_name`, `register_cluster_name`,
  `register_operator_metric`, `register_agent_metric` and
  `registered_metrics()`; and `inc_event_counter`, `inc_event_gauge`,
  `dec_event_gauge` and `inc_status_counter`, which fill in the pod and cluster
  labels. Registering before the required names are set raises
  `MetricsConfigError`.
- `mysqlop.signals`: `shutdown_signals()` lists the shutdown signals for the
  platform (SIGINT, plus SIGTERM outside Windows); `setup_signal_handler(cancel)`
  calls `cancel` on the first such signal and exits with status 1 on the
  second. It may be called only once per process; a second call raises
  `RuntimeError`.
- `mysqlop.options`: `Options`, a dict rendered by `str()` as a Python
  dictionary literal, and `quoted(value)`, which leaves `true`/`false` bare as
  `True`/`False` and quotes everything else.
- `mysqlop.mysqlsh`: `MySQLShell`, which drives `mysqlsh` to create, inspect,
  check, add, rejoin, remove and reboot the InnoDB cluster named `Cluster`.
  When the shell fails with a traceback on stderr it raises `ShellError`
  (with `error_type` and `message`); other failures raise
  `subprocess.CalledProcessError`. Helpers `strip_password_warning`,
  `sanitize_json`, `error_from_stderr` and `subprocess_runner` are public too.
- `mysqlop.version`: `get_build_version()`, empty for development builds.

## Installing

```
pip install .
pip install ".[test]"   # with pytest
```

## Example

```python
from mysqlop.kube import ClusterRef
from mysqlop.secrets import get_root_password_secret_name
from mysqlop.mysqlsh import MySQLShell
from mysqlop.options import Options

cluster = ClusterRef(name="example-cluster", namespace="default")
print(get_root_password_secret_name(cluster))  # example-cluster-root-password

shell = MySQLShell("user:password@localhost:3306")
if not shell.is_clustered():
    status = shell.create_cluster(Options({"multiMaster": "True"}))
    print(status["clusterName"])
```

`MySQLShell` runs the `mysqlsh` executable, which must be on `PATH`. A
different runner can be passed to `MySQLShell(uri, runner)`; it receives the
full argument list and returns a `CommandResult` (`returncode`, `stdout`,
`stderr`).

## What it does not do

The package has no command and no controller loop. It does not talk to a
Kubernetes API server: the secret and service builders return plain
dictionaries for the caller to submit. Metrics are kept in memory and are not
exposed over HTTP or in any exposition format.

## Running the tests

```
pytest
```