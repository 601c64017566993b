from rootfinder.core import find_marker_root as find_marker_root
from rootfinder.core import find_nearest_dir as find_nearest_dir
from rootfinder.core import is_dir_pattern as is_dir_pattern
from rootfinder.editor import Buffer as Buffer
from rootfinder.editor import BufferList as BufferList
from rootfinder.editor import EditorOptions as EditorOptions
from rootfinder.editor import default_buffers as default_buffers
from rootfinder.editor import default_options as default_options
from rootfinder.editor import search_path as search_path
from rootfinder.vcs import VCS_MARKERS as VCS_MARKERS
from rootfinder.vcs import find_vcs_root as find_vcs_root
from rootfinder.vcs import get_vcs_markers as get_vcs_markers
from rootfinder.vcs import git_root_via_shell as git_root_via_shell
from rootfinder.vcs import vcs_root_or_default as vcs_root_or_default
