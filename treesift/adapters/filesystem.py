"""Filesystem producer for TreeSift.

Lets TreeSift search directory trees. Elements are ``pathlib.Path``
objects; files are leaves.
"""

from pathlib import Path
from typing import Iterator, Optional, Set, Union

from ..core.producer import ChildrenProducer
from ..criteria import Criteria


class FileSystemProducer(ChildrenProducer):
    """Produces the entries of a directory, sorted by name.

    Unlike a best-effort scanner, this producer does not hide unreadable
    directories: a PermissionError or other OSError raised while listing
    aborts the build and reaches the caller as a BuildFailureError.
    """

    def __init__(self,
                 follow_symlinks: bool = False,
                 include_hidden: bool = True,
                 exclude_dirs: Optional[Set[str]] = None):
        """Initialize filesystem producer.

        Args:
            follow_symlinks: Whether to descend into symlinked entries
            include_hidden: Whether to include entries starting with '.'
            exclude_dirs: Directory names to leave out (e.g. {'.git'})
        """
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden
        self.exclude_dirs = exclude_dirs or set()

    def get_children(self, element: Union[str, Path]) -> Iterator[Path]:
        path = Path(element) if isinstance(element, str) else element
        if not path.is_dir():
            return  # No children for files

        for child_path in sorted(path.iterdir()):
            if not self.include_hidden and child_path.name.startswith('.'):
                continue

            if not self.follow_symlinks and child_path.is_symlink():
                continue

            if child_path.name in self.exclude_dirs and child_path.is_dir():
                continue

            yield child_path

    def __repr__(self) -> str:
        return (
            f"FileSystemProducer(follow_symlinks={self.follow_symlinks}, "
            f"include_hidden={self.include_hidden})"
        )


def name_matches(pattern: str) -> Criteria:
    """Match paths whose name matches a glob pattern (e.g. '*.py')."""
    return Criteria(
        lambda path: Path(path).match(pattern),
        description=f"name~{pattern!r}",
    )


def is_directory() -> Criteria:
    """Match directories."""
    return Criteria(lambda path: Path(path).is_dir(), description="is_dir")


def is_file() -> Criteria:
    """Match regular files."""
    return Criteria(lambda path: Path(path).is_file(), description="is_file")
