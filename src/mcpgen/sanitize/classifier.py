"""Credential classification for MCP server config values.

Decides whether a single string value is a placeholder, a secret with a
recognizable vendor shape, a generically secret-shaped string, or an
ordinary value, and returns either the value itself or a redaction token
of the form ``<YOUR_{KIND}>``.

Decision order:
    1. Empty and non-string values are returned unchanged.
    2. Placeholder shapes (``<...>``, ``YOUR_...``, ``${...}``, ``xxx``,
       ``placeholder``) are returned unchanged. This is the main guard
       against redacting values that are already safe to share.
    3. Known vendor prefixes are matched in catalog order; the first match
       names the redaction kind.
    4. A sensitive-looking key (``API_TOKEN``, ``DB_PASSWORD``) combined
       with a 20+ character opaque value is redacted as ``SECRET``.
    5. Any 40+ character opaque value is redacted as ``SECRET``.

The heuristics are static and lightweight. False positives and false
negatives are accepted.
"""

from __future__ import annotations

import re
from typing import Any

# ---------------------------------------------------------------------------
# Placeholder shapes (never redacted)
# ---------------------------------------------------------------------------

_PLACEHOLDER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^<.*>$"),
    re.compile(r"^USE_YOUR_"),
    re.compile(r"^YOUR_"),
    re.compile(r"^\$\{.*\}$"),
    re.compile(r"^x{3,}$", re.IGNORECASE),
    re.compile(r"^placeholder$", re.IGNORECASE),
    re.compile(r"^your_", re.IGNORECASE),
)


# ---------------------------------------------------------------------------
# Known secret shapes -> canonical kind
# ---------------------------------------------------------------------------

# Evaluated in order; the first match wins.
SECRET_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^sk-[a-zA-Z0-9]+"), "API_KEY"),
    (re.compile(r"^ghp_[a-zA-Z0-9]+"), "GITHUB_TOKEN"),
    (re.compile(r"^glpat-[a-zA-Z0-9]+"), "GITLAB_TOKEN"),
    (re.compile(r"^xox[baprs]-[a-zA-Z0-9-]+"), "SLACK_TOKEN"),
    (re.compile(r"^secret_[a-zA-Z0-9]+"), "SECRET"),
    (re.compile(r"^ntn_[a-zA-Z0-9]+"), "NOTION_TOKEN"),
    (re.compile(r"^ATATT[a-zA-Z0-9]+"), "ATLASSIAN_TOKEN"),
    (re.compile(r"^[0-9]+//[a-zA-Z0-9_-]+"), "REFRESH_TOKEN"),
    (re.compile(r"^eyJ[a-zA-Z0-9_-]+\.eyJ"), "JWT_TOKEN"),
)


# ---------------------------------------------------------------------------
# Generic heuristics
# ---------------------------------------------------------------------------

_SENSITIVE_KEY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"token", re.IGNORECASE),
    re.compile(r"secret", re.IGNORECASE),
    re.compile(r"key", re.IGNORECASE),
    re.compile(r"password", re.IGNORECASE),
    re.compile(r"credential", re.IGNORECASE),
    re.compile(r"auth", re.IGNORECASE),
    re.compile(r"api_key", re.IGNORECASE),
    re.compile(r"apikey", re.IGNORECASE),
    re.compile(r"access", re.IGNORECASE),
    re.compile(r"private", re.IGNORECASE),
)

# Sensitive key + medium-length opaque value ('=' allowed for base64 padding).
_SENSITIVE_VALUE_RE: re.Pattern[str] = re.compile(r"^[a-zA-Z0-9_=-]{20,}$")

# Long opaque value, key-independent.
_OPAQUE_VALUE_RE: re.Pattern[str] = re.compile(r"^[a-zA-Z0-9_-]{40,}$")

GENERIC_KIND = "SECRET"


def redaction_token(kind: str) -> str:
    """Return the placeholder that replaces a secret of the given kind."""
    return f"<YOUR_{kind}>"


def is_placeholder(value: str) -> bool:
    """Check if a value is already a placeholder and must be left alone."""
    return any(pat.search(value) for pat in _PLACEHOLDER_PATTERNS)


def is_sensitive_key(key: Any) -> bool:
    """Check if an env var or argument name suggests a credential.

    Non-string keys never count as sensitive.
    """
    if not isinstance(key, str):
        return False
    return any(pat.search(key) for pat in _SENSITIVE_KEY_PATTERNS)


def match_secret_kind(value: str) -> str | None:
    """Return the canonical kind of a known secret shape, or None.

    Args:
        value: Candidate secret string.

    Returns:
        The kind label of the first matching pattern (e.g. "GITHUB_TOKEN"),
        or None if no known shape matches.
    """
    for pattern, kind in SECRET_PATTERNS:
        if pattern.search(value):
            return kind
    return None


def classify(value: Any, key: Any = "") -> Any:
    """Return ``value`` unchanged, or a redaction token if it looks secret.

    Args:
        value: The config value to classify. Non-string values are
            returned unchanged.
        key: Optional name the value is bound to (env var name). Only
            used by the sensitive-key heuristic.

    Returns:
        Either the original value or a ``<YOUR_{KIND}>`` token.
    """
    if not isinstance(value, str) or value == "":
        return value

    if is_placeholder(value):
        return value

    kind = match_secret_kind(value)
    if kind is not None:
        return redaction_token(kind)

    if is_sensitive_key(key) and _SENSITIVE_VALUE_RE.match(value):
        return redaction_token(GENERIC_KIND)

    if _OPAQUE_VALUE_RE.match(value):
        return redaction_token(GENERIC_KIND)

    return value
