"""Filesystem helpers for upward marker search."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

_SEPARATORS = tuple(s for s in (os.sep, os.altsep) if s)


def has_trailing_sep(path: str | os.PathLike[str]) -> bool:
    """Return True if *path* ends with a path separator."""
    return os.fspath(path).endswith(_SEPARATORS)


def strip_trailing_sep(path: str | os.PathLike[str]) -> str:
    """Remove all trailing separators from *path*."""
    return os.fspath(path).rstrip("".join(_SEPARATORS))


def resolve_path(path: str | os.PathLike[str], trailing_sep: bool = False) -> str:
    """Return the canonical absolute form of *path*.

    Parameters
    ----------
    path : str or PathLike
        Path to resolve.  ``~`` is expanded and symlinks are followed; the
        path does not need to exist.
    trailing_sep : bool
        If True, the result ends with exactly one separator.  Otherwise any
        trailing separator is dropped (except for the filesystem root).

    Returns
    -------
    str
    """
    resolved = Path(path).expanduser().resolve()
    text = str(resolved)
    # The filesystem root is the only resolved path that keeps its separator
    if resolved.parent == resolved:
        return text
    return text + os.sep if trailing_sep else text


def is_path_prefix(prefix: str | os.PathLike[str], path: str | os.PathLike[str]) -> bool:
    """Return True if *prefix* is *path* or one of its ancestors.

    Both sides are resolved and compared with a trailing separator, so
    ``/foo/bar`` is not treated as a prefix of ``/foo/barbaz``.
    """
    return resolve_path(path, trailing_sep=True).startswith(
        resolve_path(prefix, trailing_sep=True)
    )


def iter_ancestors(start: str | os.PathLike[str]) -> Iterator[Path]:
    """Yield *start* and then each of its parents up to the filesystem root."""
    current = Path(start)
    yield current
    yield from current.parents


def find_dir_upward(name: str, start: str | os.PathLike[str]) -> Path | None:
    """Find the nearest directory called *name* in *start* or its ancestors.

    Returns the path of the directory found (``<ancestor>/<name>``), or None
    once the filesystem root has been checked without a hit.
    """
    for parent in iter_ancestors(start):
        candidate = parent / name
        if candidate.is_dir():
            logger.debug("Found directory %s", candidate)
            return candidate
    return None


def find_file_upward(
    name: str,
    start: str | os.PathLike[str],
    suffixes: Iterable[str] = (),
) -> Path | None:
    """Find the nearest non-directory entry called *name* upward from *start*.

    At each level *name* is tried first, then ``name + suffix`` for every
    entry of *suffixes* in order.
    """
    names = [name, *(name + suffix for suffix in suffixes if suffix)]
    for parent in iter_ancestors(start):
        for candidate_name in names:
            candidate = parent / candidate_name
            if candidate.exists() and not candidate.is_dir():
                logger.debug("Found file %s", candidate)
                return candidate
    return None
