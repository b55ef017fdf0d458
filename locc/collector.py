"""File collection: walk a project root honoring include/exclude globs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

# Directories never descended into, whatever the globs say
SKIP_DIRS = frozenset(
    {
        ".git",
        ".svn",
        ".hg",
        "node_modules",
        "__pycache__",
        ".tox",
        ".venv",
        "venv",
        ".eggs",
        ".mypy_cache",
        ".pytest_cache",
    }
)


class FileCollector:
    """Collect files under a root matching any include glob and no exclude glob.

    Globs are ``pathlib`` patterns relative to the root (``**/*.py``,
    ``src/**``). Excluding a directory excludes everything below it.
    """

    def __init__(
        self,
        include: Iterable[str] = ("**/*",),
        exclude: Iterable[str] = (),
        skip_dirs: Iterable[str] = SKIP_DIRS,
    ) -> None:
        self.include = list(include)
        self.exclude = list(exclude)
        self.skip_dirs = frozenset(skip_dirs)

    def collect(self, root: str | Path) -> list[Path]:
        root = Path(root)
        if root.is_file():
            return [root]
        if not root.is_dir():
            raise FileNotFoundError(f"Path not found: {root}")

        excluded: set[Path] = set()
        for pattern in self.exclude:
            excluded.update(root.glob(pattern))

        files: set[Path] = set()
        for pattern in self.include:
            for hit in root.glob(pattern):
                if not hit.is_file():
                    continue
                relative = hit.relative_to(root)
                if self.skip_dirs.intersection(relative.parts[:-1]):
                    continue
                if hit in excluded or excluded.intersection(hit.parents):
                    continue
                files.add(hit)

        logger.debug("Collected %d files under %s (%d excluded)", len(files), root, len(excluded))
        return sorted(files)
