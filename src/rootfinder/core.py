"""Upward marker search and the generic nearest-directory finder."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rootfinder.editor import (
    BufferList,
    EditorOptions,
    default_buffers,
    default_options,
    search_path,
)
from rootfinder.utils import (
    find_dir_upward,
    find_file_upward,
    has_trailing_sep,
    is_path_prefix,
    resolve_path,
    strip_trailing_sep,
)

logger = logging.getLogger(__name__)


def is_dir_pattern(pattern: str) -> bool:
    """Return True if *pattern* names a directory marker (trailing separator)."""
    return has_trailing_sep(pattern)


def find_marker_root(
    origin: str | os.PathLike[str],
    pattern: str,
    options: EditorOptions | None = None,
) -> Path | None:
    """Find the project root marked by *pattern* at or above *origin*.

    Parameters
    ----------
    origin : str or PathLike
        Directory the search starts from.
    pattern : str
        Marker name.  A trailing separator (``".git/"``) restricts the search
        to directories; otherwise only non-directory entries match.
    options : EditorOptions, optional
        Editor options in effect.  ``suffixesadd`` is cleared for the
        duration of a file lookup so only the exact name matches, and is
        restored afterwards.  Defaults to :data:`rootfinder.editor.default_options`.

    Returns
    -------
    Path or None
        For a file marker, the directory containing the file.  For a
        directory marker, the marker directory itself when it lies on the
        path to *origin* (it *is* the root), otherwise the directory that
        contains it.  None when nothing matches up to the filesystem root.

    Raises
    ------
    ValueError
        If *pattern* is empty.
    """
    name = strip_trailing_sep(pattern)
    if not name:
        raise ValueError(f"Marker pattern must name a file or directory, got {pattern!r}")

    options = options if options is not None else default_options
    origin = Path(resolve_path(origin))

    if is_dir_pattern(pattern):
        match = find_dir_upward(name, origin)
    else:
        with options.override(suffixesadd=()):
            match = find_file_upward(name, origin, options.suffixesadd)

    if match is None:
        logger.debug("No %r marker above %s", pattern, origin)
        return None

    if not is_dir_pattern(pattern):
        return Path(resolve_path(match.parent))

    if is_path_prefix(match, origin):
        # origin is inside the marker directory, which is the root itself
        return Path(resolve_path(match))
    return Path(resolve_path(match.parent))


def find_nearest_dir(
    buffer_id: int,
    dir_name: str,
    buffers: BufferList | None = None,
) -> Path | None:
    """Return the nearest directory called *dir_name* above a buffer's file.

    The directory found is returned as is (resolved), not its parent.
    None if the buffer has no file name or nothing matches.
    """
    name = strip_trailing_sep(dir_name)
    if not name:
        raise ValueError(f"Directory name must not be empty, got {dir_name!r}")

    buffers = buffers if buffers is not None else default_buffers
    path = buffers.path(buffer_id)
    if path is None:
        return None

    match = find_dir_upward(name, search_path(path))
    if match is None:
        logger.debug("No %r directory above buffer %d", name, buffer_id)
        return None
    return Path(resolve_path(match))
