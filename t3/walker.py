"""Directory walk producing the candidate file list."""

import logging
import os
from pathlib import Path
from typing import Iterable, List

from t3.exceptions import TraversalError


logger = logging.getLogger(__name__)

DEFAULT_IGNORED_DIRS = ('.git', 'node_modules')


def walk_files(root: Path, ignored_dirs: Iterable[str] = DEFAULT_IGNORED_DIRS) -> List[Path]:
    """
    Collect every regular file below root.

    Any directory whose name is in ignored_dirs is skipped, at any depth.
    Entries are visited in sorted name order. Symlinked directories are not
    followed.

    Args:
        root: Directory to start from
        ignored_dirs: Directory names to skip

    Returns:
        File paths, joined onto root as given

    Raises:
        TraversalError: If a directory cannot be listed
    """
    ignored = set(ignored_dirs)
    files: List[Path] = []
    _walk(Path(root), ignored, files)
    logger.debug(f"Walk of {root} found {len(files)} file(s)")
    return files


def _walk(directory: Path, ignored: set, files: List[Path]) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise TraversalError(f"Cannot read directory {directory}: {e}", directory) from e

    for entry in entries:
        path = directory / entry.name
        if entry.is_dir(follow_symlinks=False):
            if entry.name in ignored:
                logger.debug(f"Skipping ignored directory: {path}")
                continue
            _walk(path, ignored, files)
        elif entry.is_file():
            files.append(path)
