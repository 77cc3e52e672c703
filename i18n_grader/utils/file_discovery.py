"""Source file discovery and reading."""

import os
import re
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Optional, Pattern

_BRACE_GROUP = re.compile(r'\{([^{}]*)\}')
_GLOB_CHARS = re.compile(r"[*?\[]")


class FileAccessError(Exception):
    """A single source file could not be read. The run continues without it."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


@dataclass
class SourceRecord:
    """One scanned file: its project-relative path and full text."""
    path: str
    text: str


def expand_braces(pattern: str) -> List[str]:
    """
    Expand ``{a,b}`` alternatives in a glob pattern.

    Examples:
        >>> expand_braces('src/**/*.{js,tsx}')
        ['src/**/*.js', 'src/**/*.tsx']
    """
    match = _BRACE_GROUP.search(pattern)
    if not match:
        return [pattern]

    head, tail = pattern[:match.start()], pattern[match.end():]
    expanded = []
    for option in match.group(1).split(','):
        for candidate in expand_braces(head + option + tail):
            if candidate not in expanded:
                expanded.append(candidate)
    return expanded


def _normalize(pattern: str) -> str:
    while pattern.startswith('./'):
        pattern = pattern[2:]
    return pattern


def _display_path(file_path: Path, root: Path) -> str:
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()


def is_ignored(relative_path: str, ignore_pattern: Optional[str]) -> bool:
    """Check a project-relative POSIX path against the exclusion glob."""
    if not ignore_pattern:
        return False

    for pattern in expand_braces(_normalize(ignore_pattern)):
        if fnmatchcase(relative_path, pattern):
            return True
        # '**/' also matches zero directories
        if pattern.startswith('**/') and fnmatchcase(relative_path, pattern[3:]):
            return True
    return False


def glob_to_regex(pattern: str) -> Pattern:
    """
    Compile a path glob into a regex over POSIX relative paths.

    ``**/`` matches zero or more directories, ``*`` and ``?`` stay within
    one path segment, ``[...]`` is a character class (``[!...]`` negated).

    Examples:
        >>> bool(glob_to_regex('**/*.js').match('src/App.js'))
        True
        >>> bool(glob_to_regex('*.js').match('src/App.js'))
        False
    """
    parts = []
    i, n = 0, len(pattern)

    while i < n:
        if pattern.startswith('**/', i):
            parts.append('(?:[^/]+/)*')
            i += 3
        elif pattern.startswith('**', i):
            parts.append('.*')
            i += 2
        elif pattern[i] == '*':
            parts.append('[^/]*')
            i += 1
        elif pattern[i] == '?':
            parts.append('[^/]')
            i += 1
        elif pattern[i] == '[' and pattern.find(']', i + 1) != -1:
            end = pattern.find(']', i + 1)
            body = pattern[i + 1:end].replace('\\', '\\\\')
            if body.startswith('!'):
                body = '^' + body[1:]
            parts.append(f'[{body}]')
            i = end + 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1

    return re.compile(''.join(parts) + r'\Z')


def find_source_files(
    source_pattern: str,
    ignore_pattern: Optional[str] = None,
    root: Optional[Path] = None,
) -> List[Path]:
    """
    Find files matching the inclusion glob minus the exclusion glob.

    Relative patterns are resolved against ``root`` (default: current
    directory). Supports ``**`` and ``{a,b}`` alternatives. Files and
    directories whose name starts with a dot are skipped unless the pattern
    itself names a dot segment. Ignored directories are never descended into.

    Returns:
        Sorted, de-duplicated list of file paths
    """
    root = Path(root) if root is not None else Path.cwd()
    found = set()

    for pattern in expand_braces(source_pattern):
        pattern_path = Path(pattern)
        if pattern_path.is_absolute():
            base = Path(pattern_path.anchor)
            relative_pattern = pattern[len(pattern_path.anchor):]
        else:
            base = root
            relative_pattern = _normalize(pattern)

        if not relative_pattern:
            continue

        found.update(_walk_pattern(base, relative_pattern, root, ignore_pattern))

    return sorted(found)


def _walk_pattern(
    base: Path,
    relative_pattern: str,
    root: Path,
    ignore_pattern: Optional[str],
) -> Iterator[Path]:
    segments = relative_pattern.split('/')

    # Literal leading directories are joined instead of walked
    literal = []
    while len(segments) > 1 and not _GLOB_CHARS.search(segments[0]):
        literal.append(segments.pop(0))

    start = base.joinpath(*literal)
    if not start.is_dir():
        return

    matcher = glob_to_regex('/'.join(segments))
    include_dot = any(segment.startswith('.') for segment in segments)
    max_depth = None if any('**' in segment for segment in segments) else len(segments) - 1

    for dirpath, dirnames, filenames in os.walk(start):
        current = Path(dirpath)
        relative_dir = current.relative_to(start).as_posix()
        depth = 0 if relative_dir == '.' else relative_dir.count('/') + 1
        prefix = '' if relative_dir == '.' else f'{relative_dir}/'

        if max_depth is not None and depth >= max_depth:
            dirnames[:] = []
        else:
            dirnames[:] = sorted(
                name for name in dirnames
                if (include_dot or not name.startswith('.'))
                and not is_ignored(f"{_display_path(current / name, root)}/", ignore_pattern)
            )

        for name in filenames:
            if not include_dot and name.startswith('.'):
                continue
            if not matcher.match(prefix + name):
                continue

            file_path = current / name
            if is_ignored(_display_path(file_path, root), ignore_pattern):
                continue
            yield file_path


def read_source_record(file_path: Path, root: Path, max_file_size: Optional[int] = None) -> SourceRecord:
    """
    Read one source file.

    Raises:
        FileAccessError: File is unreadable, not UTF-8, or larger than
            ``max_file_size`` bytes
    """
    display = _display_path(file_path, root)

    try:
        size = file_path.stat().st_size
        if max_file_size is not None and size > max_file_size:
            raise FileAccessError(display, f"File too large: {size} bytes (max: {max_file_size})")

        with open(file_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (IOError, OSError, UnicodeDecodeError) as e:
        raise FileAccessError(display, str(e)) from e

    return SourceRecord(path=display, text=text)
