"""
Centralized file walking utilities for the WoW API MCP server.

Every corpus pass discovers its annotation files through FileWalker so that
traversal order is the same on every platform and every run.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Any

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ('.lua',)


class FileWalker:
    """Recursive, sorted file discovery filtered by extension."""

    def __init__(self, extensions: Optional[List[str]] = None):
        """
        Initialize the file walker.

        Args:
            extensions: File suffixes to yield, defaults to ``.lua``
        """
        self.extensions = tuple(ext.lower() for ext in (extensions or DEFAULT_EXTENSIONS))

    def walk_files(self, root_path: str) -> Iterator[Path]:
        """
        Walk through all matching files below a directory.

        Directories and files are visited in sorted order and symlinked
        directories are followed. A missing or unreadable root yields nothing.

        Args:
            root_path: Root directory to walk

        Yields:
            Path objects for files with a recognized extension
        """
        if not os.path.isdir(root_path):
            logger.debug(f"Directory not found, skipping: {root_path}")
            return

        def _on_error(error: OSError) -> None:
            logger.warning(f"Cannot read directory {error.filename}: {error}")

        for root, dirs, files in os.walk(root_path, onerror=_on_error, followlinks=True):
            dirs.sort()
            for file in sorted(files):
                if file.lower().endswith(self.extensions):
                    yield Path(root) / file

    def find_files(self, root_path: str) -> List[Path]:
        """Return every matching file below ``root_path`` as a list."""
        return list(self.walk_files(root_path))

    def walk_with_callback(self, root_path: str, callback: Callable[[Path], Any]) -> List[Any]:
        """
        Walk files and apply a callback to each one.

        Args:
            root_path: Root directory to walk
            callback: Function to call for each file

        Returns:
            List of non-None callback results
        """
        results = []
        for file_path in self.walk_files(root_path):
            result = callback(file_path)
            if result is not None:
                results.append(result)
        return results


def create_file_walker(extensions: Optional[List[str]] = None) -> FileWalker:
    """
    Factory function to create a FileWalker for the given extensions.

    Args:
        extensions: File suffixes to yield

    Returns:
        Configured FileWalker instance
    """
    return FileWalker(extensions)
