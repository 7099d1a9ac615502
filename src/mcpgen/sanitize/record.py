"""Record-level sanitization and local path detection.

``sanitize_record`` applies the credential classifier across a server
record's ``env`` map and ``key=value`` style ``args``. It never mutates
its input: the result is a new record with fresh ``env`` and ``args``
containers.

``has_local_paths`` flags records that reference absolute filesystem
paths. Such records are tied to one machine and are left out of the
shared collection.
"""

from __future__ import annotations

from typing import Any

from mcpgen.sanitize.classifier import classify

# Substrings that mark a value as rooted in someone's home directory.
_HOME_MARKERS: tuple[str, ...] = ("/Users/", "/home/")


def _sanitize_arg(arg: Any) -> Any:
    """Classify the value half of a ``key=value`` argument."""
    if not isinstance(arg, str) or "=" not in arg:
        return arg
    key, value = arg.split("=", 1)
    return f"{key}={classify(value)}"


def sanitize_record(record: Any) -> Any:
    """Return a copy of a server record with secret-looking values redacted.

    Args:
        record: A server definition (``command``, ``args``, ``env``, ...).
            Non-dict values are returned unchanged.

    Returns:
        A new dict. Unknown fields are carried over as-is.
    """
    if not isinstance(record, dict):
        return record

    sanitized = dict(record)

    env = record.get("env")
    if isinstance(env, dict):
        sanitized["env"] = {k: classify(v, k) for k, v in env.items()}

    args = record.get("args")
    if isinstance(args, list):
        sanitized["args"] = [_sanitize_arg(a) for a in args]

    return sanitized


def _is_local_path(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return value.startswith("/") or any(m in value for m in _HOME_MARKERS)


def has_local_paths(record: Any) -> bool:
    """Check whether a record references machine-specific absolute paths.

    Any ``args`` element or ``env`` value that contains ``/Users/`` or
    ``/home/``, or starts with ``/``, counts. The check is deliberately
    coarse and will also flag absolute values that are not paths.

    Args:
        record: A server definition.

    Returns:
        True if the record should be treated as unshareable.
    """
    if not isinstance(record, dict):
        return False

    args = record.get("args")
    if isinstance(args, list) and any(_is_local_path(a) for a in args):
        return True

    env = record.get("env")
    if isinstance(env, dict) and any(_is_local_path(v) for v in env.values()):
        return True

    return False
