"""Build version of the operator."""

# Set at build time by the release tooling; empty for development builds.
_build_version = ""


def get_build_version() -> str:
    """Return the operator build version."""
    return _build_version