"""Version-control root discovery for editor buffers."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from dotenv import load_dotenv

from rootfinder.core import find_marker_root
from rootfinder.editor import BufferList, default_buffers, search_path

logger = logging.getLogger(__name__)

load_dotenv()

# File form first so submodules and worktrees (".git" file) resolve too
VCS_MARKERS: tuple[str, ...] = (".git", ".git/")

_DEFAULT_GIT = "git"


def _get_git() -> str:
    """Return the git executable from ROOTFINDER_GIT, defaulting to ``git``."""
    return os.environ.get("ROOTFINDER_GIT", "").strip() or _DEFAULT_GIT


def get_vcs_markers() -> tuple[str, ...]:
    """Return the marker candidates, in search order.

    ROOTFINDER_MARKERS, a comma-separated list such as ``".hg/,.git/"``,
    replaces :data:`VCS_MARKERS` when set to a non-blank value.
    """
    raw = os.environ.get("ROOTFINDER_MARKERS", "")
    markers = tuple(m.strip() for m in raw.split(",") if m.strip())
    return markers or VCS_MARKERS


# ---------------------------------------------------------------------------
# Marker-based lookup
# ---------------------------------------------------------------------------


def find_vcs_root(
    buffer_id: int,
    buffers: BufferList | None = None,
    markers: tuple[str, ...] | list[str] | None = None,
) -> Path | None:
    """Find the version-control root above a buffer's file.

    Parameters
    ----------
    buffer_id : int
        Buffer whose file name anchors the search.
    buffers : BufferList, optional
        Defaults to :data:`rootfinder.editor.default_buffers`.
    markers : sequence of str, optional
        Marker patterns tried in order; the first hit wins.
        Defaults to :func:`get_vcs_markers`.

    Returns
    -------
    Path or None
        None for unknown or unnamed buffers, or when no marker matches.
    """
    buffers = buffers if buffers is not None else default_buffers
    path = buffers.path(buffer_id)
    if path is None:
        return None

    origin = search_path(path)
    for marker in markers if markers is not None else get_vcs_markers():
        root = find_marker_root(origin, marker)
        if root is not None:
            logger.debug("Buffer %d root %s (marker %r)", buffer_id, root, marker)
            return root
    return None


def vcs_root_or_default(
    buffer_id: int,
    buffers: BufferList | None = None,
    markers: tuple[str, ...] | list[str] | None = None,
) -> Path:
    """Like :func:`find_vcs_root`, falling back to the current working directory."""
    root = find_vcs_root(buffer_id, buffers=buffers, markers=markers)
    if root is None:
        logger.debug("No VCS root for buffer %d, using working directory", buffer_id)
        return Path.cwd()
    return root


# ---------------------------------------------------------------------------
# Shell lookup
# ---------------------------------------------------------------------------


def git_root_via_shell(cwd: str | os.PathLike[str] | None = None) -> Path | None:
    """Ask git for the top-level directory of the repository containing *cwd*.

    Runs ``git rev-parse --show-toplevel``.  Noticeably slower than
    :func:`find_vcs_root` since it spawns a process.

    Parameters
    ----------
    cwd : str or PathLike, optional
        Directory to run git in.  Defaults to the process working directory.

    Returns
    -------
    Path or None
        The first line of git's output, or None if git exits nonzero
        (whatever it printed) or cannot be started.
    """
    git = _get_git()
    try:
        result = subprocess.run(
            [git, "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.warning("Could not run %s: %s", git, exc)
        return None

    if result.returncode != 0:
        logger.debug("%s rev-parse exited with %d", git, result.returncode)
        return None

    lines = result.stdout.splitlines()
    if not lines or not lines[0]:
        return None
    return Path(lines[0])
