"""
Depth-first filesystem traversal that builds the tree and its stats.
"""

import os
import stat
from dataclasses import dataclass, field
from typing import List, Optional

from fstree.core.options import WalkOptions
from fstree.core.stats import TreeStats
from fstree.core.tree import TreeNode
from fstree.utils.error_handling import TraversalError, record_error
from fstree.utils.logging import WalkContext, get_logger

logger = get_logger(__name__)

UNKNOWN_MODE = "?---------"


@dataclass
class WalkResult:
    tree: TreeNode
    stats: TreeStats
    notices: List[str] = field(default_factory=list)


class TreeWalker:
    """Walks one directory tree, applying the filters in ``options``."""

    def __init__(self, options: Optional[WalkOptions] = None):
        self.options = options or WalkOptions()
        self.stats = TreeStats()
        self.notices: List[str] = []

    def _label(self, path: str, name: str) -> str:
        if self.options.full_path:
            return path
        return name

    def _meta(self, path: str) -> Optional[str]:
        if not self.options.permissions:
            return None
        try:
            return stat.filemode(os.lstat(path).st_mode)
        except OSError as e:
            # Entry vanished (or became unreadable) after the listing.
            logger.debug("Cannot stat entry", path=path, reason=e.strerror or str(e))
            return UNKNOWN_MODE

    def _list_dir(self, path: str, depth: int) -> Optional[List[os.DirEntry]]:
        try:
            with os.scandir(path) as it:
                return sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            reason = e.strerror or str(e)
            if depth == 0:
                raise TraversalError(f"{path} [error opening dir]", path=path, reason=reason) from e
            self.notices.append(f"{path} [error opening dir]")
            record_error(
                f"Cannot open directory: {path}",
                error_type=type(e).__name__,
                context={"path": path, "reason": reason},
            )
            return None

    def _walk_dir(self, path: str, node: TreeNode, depth: int) -> None:
        if self.options.max_depth is not None and depth == self.options.max_depth:
            return

        entries = self._list_dir(path, depth)
        if entries is None:
            return

        # The count includes hidden entries, whether or not they are shown.
        file_limit = self.options.file_limit
        if file_limit is not None and len(entries) > file_limit:
            if depth == 0:
                self.notices.append(
                    f"fstree: [ {len(entries)} entries exceeds filelimit, not opening dir]"
                )
            logger.debug(
                "Skipping directory over file limit",
                path=path,
                entries=len(entries),
                file_limit=file_limit,
            )
            return

        for entry in entries:
            if not self.options.all_files and entry.name.startswith("."):
                continue

            full_path = os.path.normpath(os.path.join(path, entry.name))
            label = self._label(full_path, entry.name)

            if entry.is_dir(follow_symlinks=False):
                self.stats.directories += 1
                branch = node.add_branch(label, meta=self._meta(full_path))
                self._walk_dir(full_path, branch, depth + 1)
            else:
                if self.options.dirs_only:
                    continue
                self.stats.files += 1
                node.add_node(label, meta=self._meta(full_path))

    def walk(self, root_path: str) -> WalkResult:
        if not os.path.lexists(root_path):
            raise TraversalError(f"{root_path} does not exist.", path=root_path)
        if not os.path.isdir(root_path):
            raise TraversalError(f"{root_path} is not a directory.", path=root_path)

        root = TreeNode(root_path, is_dir=True)
        with WalkContext(root_path):
            self._walk_dir(root_path, root, 0)

        logger.debug(
            "Traversal finished",
            directories=self.stats.directories,
            files=self.stats.files,
            notices=len(self.notices),
        )
        return WalkResult(tree=root, stats=self.stats, notices=self.notices)


def walk(root_path: str, options: Optional[WalkOptions] = None) -> WalkResult:
    """
    Walk ``root_path`` depth first and build its tree.

    Args:
        root_path: Directory to start from; it labels the root node
        options: Filters to apply (defaults to showing every non-hidden entry)

    Returns:
        WalkResult with the tree, the directory/file counts and any notices
        produced along the way (file limit hits, unreadable directories)
    """
    return TreeWalker(options).walk(root_path)
