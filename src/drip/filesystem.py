"""Filesystem abstraction for testability.

The RealFileSystem implementation wraps the standard library operations
used by postinstall steps.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path, os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def copy_file(self, src: Path, dst: Path) -> Path:
        """Copy a single file. If ``dst`` is a directory the file keeps its name.

        Returns:
            Path of the written file.
        """
        return Path(shutil.copy(src, dst))

    def append_line(self, path: Path, text: str) -> None:
        """Append ``text`` and a newline to an existing file.

        Raises:
            FileNotFoundError: If the file does not exist. It is never created.
        """
        fd = os.open(path, os.O_WRONLY | os.O_APPEND)
        with open(fd, "a", encoding="utf-8") as f:
            f.write(f"{text}\n")
