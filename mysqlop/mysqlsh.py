"""Run InnoDB cluster administration commands through MySQL Shell."""

from __future__ import annotations

import json
import logging
import re
import subprocess
import threading
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from mysqlop.options import Options

log = logging.getLogger(__name__)

DEFAULT_CLUSTER_NAME = "Cluster"

_INSECURE_CLI_WARNING = (
    "mysqlx: [Warning] Using a password on the command line interface can be insecure.\n"
)

# Parses Python tracebacks written by the shell to stderr.
_ERROR_RE = re.compile(r"Traceback.*\n(?:  (.*)\n){1,}(?P<type>[\w\.]+)\: (?P<message>.*)")


class ShellError(Exception):
    """An error reported by a MySQL Shell command."""

    def __init__(self, error_type: str, message: str) -> None:
        super().__init__(f"{error_type}: {message}")
        self.error_type = error_type
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShellError):
            return NotImplemented
        return (self.error_type, self.message) == (other.error_type, other.message)

    def __hash__(self) -> int:
        return hash((self.error_type, self.message))


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of a finished command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


Runner = Callable[[Sequence[str]], CommandResult]


def subprocess_runner(args: Sequence[str]) -> CommandResult:
    """Run a command and capture its output."""
    completed = subprocess.run(list(args), capture_output=True, text=True, check=False)
    return CommandResult(completed.returncode, completed.stdout, completed.stderr)


def strip_password_warning(text: str) -> str:
    """Remove the shell's warning about a password given on the command line."""
    return text.replace(_INSECURE_CLI_WARNING, "", 1)


def sanitize_json(text: str) -> str:
    """Undo the shell's escaping of single quotes, which is invalid JSON."""
    return text.replace("\\'", "'")


def error_from_stderr(stderr: str) -> ShellError | None:
    """Return the last error found in a shell traceback, or None if there is none."""
    last = None
    for last in _ERROR_RE.finditer(stderr):
        pass
    if last is None:
        return None
    return ShellError(last.group("type"), last.group("message"))


def _decode(text: str, what: str) -> Any:
    try:
        return json.loads(sanitize_json(text))
    except json.JSONDecodeError as exc:
        raise ValueError(f"decoding {what} output: {text!r}: {exc}") from exc


class MySQLShell:
    """Administers the default InnoDB cluster through the mysqlsh command."""

    def __init__(self, uri: str, runner: Runner = subprocess_runner) -> None:
        self.uri = uri
        self._runner = runner
        self._lock = threading.Lock()

    def _run(self, python: str) -> str:
        args = ["mysqlsh", "--no-wizard", "--uri", self.uri, "--py", "-e", python]
        with self._lock:
            log.debug("Running command: %s", args)
            result = self._runner(args)
        log.debug(
            "stdout: %s stderr: %s returncode: %s",
            result.stdout,
            result.stderr,
            result.returncode,
        )
        if result.returncode != 0:
            underlying = error_from_stderr(result.stderr)
            if underlying is not None:
                raise underlying
            raise subprocess.CalledProcessError(
                result.returncode, args, output=result.stdout, stderr=result.stderr
            )
        return strip_password_warning(result.stdout)

    def is_clustered(self) -> bool:
        """Return whether the instance belongs to the default cluster."""
        try:
            self._run(f"dba.get_cluster('{DEFAULT_CLUSTER_NAME}')")
        except (ShellError, subprocess.CalledProcessError, OSError):
            return False
        return True

    def create_cluster(self, opts: Options | None = None) -> dict[str, Any]:
        """Create the default cluster and return its status."""
        opts = Options(opts or {})
        output = self._run(
            f"print dba.create_cluster('{DEFAULT_CLUSTER_NAME}', {opts}).status()"
        )
        # The shell may print other text before the JSON status line.
        json_line = next((line for line in output.split("\n") if line.startswith("{")), "")
        if not json_line:
            raise ValueError(f"no json found in output: {output!r}")
        return _decode(json_line, "cluster status")

    def get_cluster_status(self) -> dict[str, Any]:
        """Return the status of the default cluster."""
        output = self._run(f"print dba.get_cluster('{DEFAULT_CLUSTER_NAME}').status()")
        return _decode(output, "cluster status")

    def check_instance_state(self, uri: str) -> dict[str, Any]:
        """Check that the instance's data does not prevent it joining the cluster."""
        output = self._run(
            f"print dba.get_cluster('{DEFAULT_CLUSTER_NAME}').check_instance_state('{uri}')"
        )
        return _decode(output, "instance state")

    def add_instance_to_cluster(self, uri: str, opts: Options | None = None) -> None:
        """Add the instance to the default cluster."""
        opts = Options(opts or {})
        self._run(f"dba.get_cluster('{DEFAULT_CLUSTER_NAME}').add_instance('{uri}', {opts})")

    def rejoin_instance_to_cluster(self, uri: str, opts: Options | None = None) -> None:
        """Rejoin the instance to the default cluster."""
        opts = Options(opts or {})
        self._run(
            f"dba.get_cluster('{DEFAULT_CLUSTER_NAME}').rejoin_instance('{uri}', {opts})"
        )

    def remove_instance_from_cluster(self, uri: str, opts: Options | None = None) -> None:
        """Remove the instance from the default cluster."""
        opts = Options(opts or {})
        self._run(
            f"dba.get_cluster('{DEFAULT_CLUSTER_NAME}').remove_instance('{uri}', {opts})"
        )

    def reboot_cluster_from_complete_outage(self) -> None:
        """Recover the cluster after all of its members have failed."""
        # Peers not yet resolvable would stop group replication from starting,
        # so the seed list is cleared first.
        self._run("session.query('SET GLOBAL group_replication_group_seeds = \"\"')")
        self._run(f"dba.reboot_cluster_from_complete_outage('{DEFAULT_CLUSTER_NAME}')")