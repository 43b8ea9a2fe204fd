"""Content comparison of several directories.

A Comparison scans each input directory, hashes every regular file in it and
groups the files of all directories by digest. The result can be narrowed
down to the groups that represent a difference between the directories.
"""
import logging
import os
from pathlib import Path
from typing import Callable, Iterable, NamedTuple

from .issues import ComparisonIssue, IssueKind
from .utils.digest import DEFAULT_HASH_ALGORITHM, HASH_ALGORITHMS, compute_digest
from .utils.scanner import scan_directory

logger = logging.getLogger(__name__)


class FileEntry(NamedTuple):
    """A regular file found directly inside one of the input directories.

    Attributes:
        path: Path of the file
        directory_index: Position of the owning directory in the input list
    """
    path: Path
    directory_index: int

    @property
    def name(self) -> str:
        return self.path.name


class ContentGroup(NamedTuple):
    """All files, across all input directories, sharing one digest."""
    digest: str
    files: list[FileEntry]

    def files_in(self, directory_index: int) -> list[FileEntry]:
        return [f for f in self.files if f.directory_index == directory_index]


def is_difference(files: list[FileEntry], directory_count: int) -> bool:
    """Tell whether a group of identical files shows a difference between the directories.

    A group shows no difference exactly when every directory contributes one
    file to it and all those files have the same name. It is a difference
    when the content is missing from a directory, occurs more than once in a
    directory, or goes by different names.

    Args:
        files: Members of the group (never empty)
        directory_count: Number of input directories

    Returns:
        True if the group should be kept when only differences are shown
    """
    if len(files) != directory_count:
        return True

    first_name = files[0].name
    return any(f.name != first_name for f in files)


class ComparisonResult:
    """Frozen outcome of a comparison run."""

    def __init__(self, directories: list[Path], hash_algorithm: str,
                 groups: dict[str, list[FileEntry]], issues: list[ComparisonIssue]):
        self.directories = directories
        self.hash_algorithm = hash_algorithm
        self.groups = groups
        self.issues = issues

    def sorted_groups(self) -> list[ContentGroup]:
        """Groups in ascending lexicographic order of their digests."""
        return [ContentGroup(digest, self.groups[digest]) for digest in sorted(self.groups)]

    def differences(self) -> list[ContentGroup]:
        """Sorted groups that show a difference between the directories."""
        directory_count = len(self.directories)
        return [group for group in self.sorted_groups() if is_difference(group.files, directory_count)]

    def select_groups(self, differences_only: bool = False) -> list[ContentGroup]:
        return self.differences() if differences_only else self.sorted_groups()


class Comparison:
    """Hashes the files of several directories and groups them by content."""

    def __init__(
        self,
        directories: Iterable[str | os.PathLike],
        extension: str | None = None,
        hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
        on_issue: Callable[[ComparisonIssue], None] | None = None
    ):
        """Set up a comparison.

        Args:
            directories: Directories to compare, in the order of the report columns
            extension: If given, only files with exactly this final extension are compared
            hash_algorithm: Name of the hashlib algorithm used for the digests
            on_issue: Called for every failure as soon as it happens

        Raises:
            ValueError: No directory given, or unknown hash algorithm
        """
        self._directories = [Path(d) for d in directories]
        if not self._directories:
            raise ValueError("At least one directory is required")
        if hash_algorithm not in HASH_ALGORITHMS:
            raise ValueError(f"Unknown hash algorithm: {hash_algorithm}")

        self._extension = extension
        self._hash_algorithm = hash_algorithm
        self._on_issue = on_issue

    @property
    def directories(self) -> list[Path]:
        return list(self._directories)

    def run(self) -> ComparisonResult:
        """Scan and hash every input directory in order.

        Failures never stop the run. They are reported through ``on_issue``
        and collected on the result; the affected directory or file simply
        contributes nothing to the groups.
        """
        groups: dict[str, list[FileEntry]] = {}
        issues: list[ComparisonIssue] = []

        def report(issue: ComparisonIssue):
            logger.warning(issue.message())
            issues.append(issue)
            if self._on_issue is not None:
                self._on_issue(issue)

        for index, directory in enumerate(self._directories):
            logger.info(f"Scanning directory: {directory}")
            for path in scan_directory(directory, self._extension, report):
                try:
                    digest = compute_digest(path, self._hash_algorithm)
                except OSError as e:
                    report(ComparisonIssue(IssueKind.HASHING_FAILED, path, directory, e))
                    continue

                groups.setdefault(digest, []).append(FileEntry(path, index))

        logger.info(f"Found {len(groups)} distinct contents in {len(self._directories)} directories")
        return ComparisonResult(self.directories, self._hash_algorithm, groups, issues)
