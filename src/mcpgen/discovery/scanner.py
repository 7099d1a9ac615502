"""Home directory walk that finds candidate MCP config files.

Walks ``ScanConfig.home_root`` once, pruning every subtree matched by an
ignore pattern, and keeps each regular file whose home-relative path
matches any search pattern. Hidden files and directories are walked like
any other.

Discovery Algorithm:
    1. Compile the search and ignore globs (``**`` spans directories,
       ``*``, ``?`` and ``[...]`` stay within one path segment).
    2. Walk directories depth-first without following symlinked
       directories. Unreadable directories are recorded as skips.
    3. Union the matches of every pattern and return them sorted, so the
       merge that consumes them sees a deterministic order.
"""

from __future__ import annotations

import fnmatch
import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

from mcpgen.config import ScanConfig
from mcpgen.discovery.models import UNREADABLE_DIR, DiscoveryResult, SkippedItem

logger = logging.getLogger(__name__)


class GlobPattern:
    """A ``**``-aware glob over POSIX relative paths.

    Each path segment is matched with ``fnmatch`` (``*``, ``?`` and
    ``[...]`` classes stay inside one segment). A ``**`` segment spans
    zero or more segments, or at least one when it ends the pattern.

    Usage::

        pattern = GlobPattern("**/node_modules/**")
        pattern.match("app/node_modules/pkg", is_dir=True)  # True
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._parts: list[re.Pattern[str] | None] = [
            None if part == "**" else re.compile(fnmatch.translate(part))
            for part in pattern.split("/")
        ]

    def __repr__(self) -> str:
        return f"GlobPattern({self.pattern!r})"

    def match(self, rel: str, is_dir: bool = False) -> bool:
        """Check a home-relative POSIX path against the pattern.

        Directories carry an empty trailing segment, so ``dir/**`` matches
        the directory ``dir`` itself.
        """
        segments = rel.split("/")
        if is_dir:
            segments.append("")
        return self._match_from(0, segments, 0)

    def _match_from(self, p_idx: int, segments: list[str], s_idx: int) -> bool:
        parts = self._parts
        if p_idx == len(parts):
            return s_idx == len(segments)

        part = parts[p_idx]
        if part is None:
            if p_idx == len(parts) - 1:
                return s_idx < len(segments)
            return any(
                self._match_from(p_idx + 1, segments, i)
                for i in range(s_idx, len(segments) + 1)
            )

        if s_idx == len(segments) or not part.match(segments[s_idx]):
            return False
        return self._match_from(p_idx + 1, segments, s_idx + 1)


class DiscoveryScanner:
    """Finds candidate MCP config files under a home directory.

    Usage::

        scanner = DiscoveryScanner(ScanConfig.default())
        result = scanner.discover()
        for path in result.files:
            print(path)
    """

    def __init__(self, config: ScanConfig) -> None:
        self._config = config
        self._search = [GlobPattern(p) for p in config.search_patterns]
        self._ignore = [GlobPattern(p) for p in config.ignore_patterns]

    def _is_ignored(self, rel: str, is_dir: bool) -> bool:
        """Check a home-relative path against the ignore globs."""
        return any(pat.match(rel, is_dir) for pat in self._ignore)

    def _matches(self, rel: str) -> bool:
        return any(pat.match(rel) for pat in self._search)

    def _walk(self, root: Path, skipped: list[SkippedItem]) -> Iterator[Path]:
        """Yield every non-ignored regular file under ``root``."""
        stack = [root]
        while stack:
            directory = stack.pop()
            try:
                entries = sorted(directory.iterdir())
            except (PermissionError, OSError) as exc:
                logger.debug("Skipping unreadable directory: %s", directory)
                skipped.append(SkippedItem(str(directory), UNREADABLE_DIR, str(exc)))
                continue

            subdirs: list[Path] = []
            for entry in entries:
                rel = entry.relative_to(root).as_posix()
                try:
                    if entry.is_symlink() and entry.is_dir():
                        continue
                    if entry.is_dir():
                        if not self._is_ignored(rel, is_dir=True):
                            subdirs.append(entry)
                    elif entry.is_file() and not self._is_ignored(rel, is_dir=False):
                        yield entry
                except (PermissionError, OSError):
                    continue
            stack.extend(reversed(subdirs))

    def discover(self) -> DiscoveryResult:
        """Walk the home root and collect candidate config files.

        Returns:
            A ``DiscoveryResult`` with sorted, de-duplicated absolute paths
            and the directories that could not be read.
        """
        root = self._config.home_root
        result = DiscoveryResult()
        if not root.is_dir():
            logger.warning("Home root does not exist: %s", root)
            return result

        found: set[Path] = set()
        for path in self._walk(root, result.skipped):
            if self._matches(path.relative_to(root).as_posix()):
                found.add(path.absolute())

        result.files = sorted(found)
        logger.debug("Discovered %d candidate config file(s)", len(result.files))
        return result


def discover(config: ScanConfig) -> list[Path]:
    """Return the candidate config files for ``config``.

    Convenience wrapper around ``DiscoveryScanner.discover``.
    """
    return DiscoveryScanner(config).discover().files


def display_path(path: Path | str, home: Path) -> str:
    """Render a path with the home directory abbreviated to ``~``."""
    text = str(path)
    home_text = str(home)
    if text == home_text or text.startswith(home_text + "/"):
        return "~" + text[len(home_text):]
    return text


def display_paths(paths: Iterable[Path], home: Path) -> list[str]:
    return [display_path(p, home) for p in paths]
