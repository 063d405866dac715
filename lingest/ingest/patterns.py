"""
Path Filtering

Shell-style glob matching against root-relative, forward-slash paths.

Grammar (anchored, case-sensitive):
- ``*`` matches any run of characters, separators included
- ``?`` matches any single character
- ``[abc]`` / ``[a-z]`` / ``[!abc]`` character classes
- ``**`` as a whole path segment matches zero or more directories

A pattern that cannot be compiled matches nothing. The dialect is that of
the Rust `glob` crate with its default match options.
"""

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional

from lingest.configs.logging import get_logger

logger = get_logger("ingest.patterns")


class _GlobSyntaxError(ValueError):
    """Raised internally while translating a malformed glob."""


def normalize_path(path: str) -> str:
    """Use forward slashes regardless of host conventions."""
    return path.replace("\\", "/")


def lossy_name(name: str) -> str:
    """Decode a file name as UTF-8, replacing undecodable bytes with U+FFFD."""
    return os.fsencode(name).decode("utf-8", "replace")


def _translate_class(pattern: str, start: int) -> tuple[str, int]:
    """Translate the ``[...]`` class opening at ``start``; return (regex, next index)."""
    n = len(pattern)
    i = start + 1
    negate = False
    if i < n and pattern[i] == "!":
        negate = True
        i += 1

    body_start = i
    # A ']' right after the opening bracket is a literal member
    if i < n and pattern[i] == "]":
        i += 1
    end = pattern.find("]", i)
    if end == -1:
        raise _GlobSyntaxError(f"unterminated character class at {start}")

    body = pattern[body_start:end]
    items = []
    k = 0
    while k < len(body):
        if k + 2 < len(body) and body[k + 1] == "-":
            lo, hi = body[k], body[k + 2]
            # Reversed ranges contain nothing
            if lo <= hi:
                items.append(f"{re.escape(lo)}-{re.escape(hi)}")
            k += 3
        else:
            items.append(re.escape(body[k]))
            k += 1

    if not items:
        return ("." if negate else "(?!)"), end + 1
    return ("[^" if negate else "[") + "".join(items) + "]", end + 1


def _translate(pattern: str) -> str:
    """Translate a glob into an anchored regular expression."""
    parts: list[str] = []
    i, n = 0, len(pattern)

    while i < n:
        c = pattern[i]
        if c == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            count = j - i
            if count > 2:
                raise _GlobSyntaxError("wildcards are either `*` or `**`")
            if count == 2:
                # ** must be a whole path segment
                if i > 0 and pattern[i - 1] != "/":
                    raise _GlobSyntaxError("`**` must follow a separator")
                if j == n:
                    parts.append(".*")
                elif pattern[j] == "/":
                    parts.append("(?:.*/)?")
                    j += 1
                else:
                    raise _GlobSyntaxError("`**` must be followed by a separator")
            else:
                parts.append(".*")
            i = j
        elif c == "?":
            parts.append(".")
            i += 1
        elif c == "[":
            translated, i = _translate_class(pattern, i)
            parts.append(translated)
        else:
            parts.append(re.escape(c))
            i += 1

    return "(?s:" + "".join(parts) + r")\Z"


@lru_cache(maxsize=4096)
def compile_glob(pattern: str) -> Optional[re.Pattern]:
    """
    Compile one glob pattern.

    Args:
        pattern: Glob pattern string

    Returns:
        Compiled regex, or None if the pattern is malformed
    """
    try:
        return re.compile(_translate(pattern))
    except (_GlobSyntaxError, re.error) as e:
        logger.debug(f"Invalid glob {pattern!r} will match nothing: {e}")
        return None


def matches(path: str, patterns: Iterable[str]) -> bool:
    """True iff any pattern matches the normalized relative path."""
    path = normalize_path(path)
    for pattern in patterns:
        compiled = compile_glob(pattern)
        if compiled is not None and compiled.match(path):
            return True
    return False


def should_ignore(path: str, ignore_patterns: Iterable[str]) -> bool:
    return matches(path, ignore_patterns)


def should_include(path: str, include_patterns: Iterable[str]) -> bool:
    """An empty include list admits every path."""
    include_patterns = tuple(include_patterns)
    return not include_patterns or matches(path, include_patterns)


def _normalize_abspath(path: str) -> str:
    return os.path.normcase(os.path.abspath(path))


@dataclass(frozen=True)
class FilterConfig:
    """Read-only filter settings shared by the tree and content passes."""

    ignore_patterns: tuple[str, ...] = ()
    include_patterns: tuple[str, ...] = ()
    excluded_path: Optional[str] = None

    @classmethod
    def build(
        cls,
        root: str,
        output_path: Optional[str],
        ignore_patterns: Iterable[str] = (),
        include_patterns: Iterable[str] = (),
    ) -> "FilterConfig":
        """Build a config; a relative output path is taken relative to root."""
        excluded = None
        if output_path:
            excluded = _normalize_abspath(os.path.join(root, output_path))
        return cls(
            ignore_patterns=tuple(ignore_patterns),
            include_patterns=tuple(include_patterns),
            excluded_path=excluded,
        )

    def should_ignore(self, rel_path: str) -> bool:
        return should_ignore(rel_path, self.ignore_patterns)

    def should_include(self, rel_path: str) -> bool:
        return should_include(rel_path, self.include_patterns)

    def accepts_file(self, rel_path: str) -> bool:
        return not self.should_ignore(rel_path) and self.should_include(rel_path)

    def is_excluded(self, abs_path: str) -> bool:
        """True if abs_path is the output artifact."""
        return self.excluded_path is not None and _normalize_abspath(abs_path) == self.excluded_path
