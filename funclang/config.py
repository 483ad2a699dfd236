from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Defaults
_DEFAULT_READ_DIRS = [Path.cwd]
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    """Directories listed in `var` (os.pathsep separated), else `defaults`.

    Entries are stripped, `~` is expanded and repeated directories are kept
    only at their first position, so search order is preserved.
    """
    raw = os.environ.get(var)
    entries = raw.split(os.pathsep) if raw else [str(p) for p in defaults]
    roots: List[Path] = []
    for entry in entries:
        entry = entry.strip()
        if not entry:
            continue
        path = Path(entry).expanduser()
        if path not in roots:
            roots.append(path)
    return roots


def get_read_roots() -> List[Path]:
    # cwd is resolved at call time, not import time
    return paths_from_env('FUNCLANG_READ_PATH', [d() for d in _DEFAULT_READ_DIRS])


def get_log_level() -> str:
    return os.environ.get('FUNCLANG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def resolve_read_path(name: str, roots: Iterable[Path] | None = None) -> Path:
    """Find `name` under the first read root that contains it.

    Absolute paths are returned untouched. When no root contains the file the
    candidate under the first root is returned so the caller's open() reports
    a meaningful error.
    """
    p = Path(name)
    if p.is_absolute():
        return p
    roots = list(roots) if roots is not None else get_read_roots()
    for root in roots:
        candidate = root / p
        if candidate.is_file():
            return candidate
    return (roots[0] / p) if roots else p
