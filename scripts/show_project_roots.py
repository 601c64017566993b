"""Project-root discovery demonstration.

Opens one buffer per path given on the command line (the current
directory when none are given) and logs the roots each finder reports.
"""

import logging
import sys
from pathlib import Path

import coloredlogs

from rootfinder.core import find_marker_root, find_nearest_dir
from rootfinder.editor import BufferList, search_path
from rootfinder.vcs import find_vcs_root, get_vcs_markers, git_root_via_shell, vcs_root_or_default

sys.stdout.reconfigure(encoding="utf-8")
coloredlogs.install(level="INFO", fmt="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)


# ── Parameters ────────────────────────────────────────────────────
PATHS = sys.argv[1:] or [str(Path.cwd())]
FILE_MARKERS = ["pyproject.toml", "package.json"]
NEAREST_DIR = "src"

buffers = BufferList()
for path in PATHS:
    buffers.add(path)

# ── Run Lookups ───────────────────────────────────────────────────
logger.info("Markers: %s", ", ".join(get_vcs_markers()))
logger.info("")

for buffer in buffers:
    logger.info("-- Buffer %d: %s", buffer.number, buffer.name)
    origin = search_path(buffer.name)

    logger.info("  VCS root:           %s", find_vcs_root(buffer.number, buffers) or "-")
    logger.info("  Root or default:    %s", vcs_root_or_default(buffer.number, buffers))
    for marker in FILE_MARKERS:
        logger.info("  %-18s  %s", marker + ":", find_marker_root(origin, marker) or "-")
    logger.info(
        "  Nearest %-10s  %s",
        NEAREST_DIR + ":",
        find_nearest_dir(buffer.number, NEAREST_DIR, buffers) or "-",
    )
    logger.info("  git rev-parse:      %s", git_root_via_shell(origin) or "-")
    logger.info("")
