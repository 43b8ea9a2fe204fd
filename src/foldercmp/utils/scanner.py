import logging
import stat
from pathlib import Path
from typing import Callable, Iterator

from ..issues import ComparisonIssue, IssueKind

logger = logging.getLogger(__name__)


def file_extension(name: str) -> str | None:
    """Get the final extension of a file name, without the dot.

    Only the part after the last dot counts, so "archive.tar.gz" has the
    extension "gz". A name without a dot, or a name whose only dot is the
    leading one (".bashrc"), has no extension. "notes." has an empty one.
    """
    stem, dot, extension = name.rpartition('.')
    if not dot or not stem:
        return None
    return extension


def _ignore_issue(issue: ComparisonIssue) -> None:
    pass


def scan_directory(
    directory: Path,
    extension: str | None = None,
    on_issue: Callable[[ComparisonIssue], None] = _ignore_issue
) -> Iterator[Path]:
    """List the regular files directly inside a directory.

    Subdirectories are not descended into. Symlinks are followed when deciding
    whether an entry is a regular file. Failures are passed to ``on_issue``
    and scanning carries on with whatever is still reachable.

    Args:
        directory: Directory to list
        extension: If given, only files whose final extension equals it exactly
        on_issue: Receives every failure encountered while listing

    Yields:
        Paths of the regular files in ``directory``
    """
    if not directory.is_dir():
        on_issue(ComparisonIssue(IssueKind.NOT_A_DIRECTORY, directory, directory))
        return

    try:
        children = list(directory.iterdir())
    except OSError as e:
        on_issue(ComparisonIssue(IssueKind.DIRECTORY_UNREADABLE, directory, directory, e))
        return

    child: Path
    for child in children:
        if extension is not None and file_extension(child.name) != extension:
            continue

        try:
            st = child.stat()
        except OSError as e:
            on_issue(ComparisonIssue(IssueKind.ENTRY_UNREADABLE, child, directory, e))
            continue

        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"Skipping non-regular entry: {child}")
            continue

        yield child
