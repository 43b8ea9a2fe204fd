"""Failures that are reported during a comparison without stopping it."""
from enum import StrEnum
from pathlib import Path
from typing import NamedTuple


class IssueKind(StrEnum):
    NOT_A_DIRECTORY = 'not_a_directory'
    DIRECTORY_UNREADABLE = 'directory_unreadable'
    ENTRY_UNREADABLE = 'entry_unreadable'
    HASHING_FAILED = 'hashing_failed'


class ComparisonIssue(NamedTuple):
    """A local, non-fatal failure encountered while scanning or hashing.

    Attributes:
        kind: Which step failed
        path: The directory, entry or file the failure concerns
        directory: The input directory being processed when it happened
        error: The underlying OS error, if there is one
    """
    kind: IssueKind
    path: Path
    directory: Path
    error: OSError | None = None

    def message(self) -> str:
        """One-line description of the failure, without the "Error:" prefix."""
        if self.kind == IssueKind.NOT_A_DIRECTORY:
            return f"{self.path} is not a directory!"
        elif self.kind == IssueKind.DIRECTORY_UNREADABLE:
            return f"Directory {self.path} could not be read: {self.error}"
        elif self.kind == IssueKind.ENTRY_UNREADABLE:
            return f"An IO error occurred while iterating through {self.directory} at {self.path}: {self.error}"
        else:
            return f"An error occurred while hashing {self.path}: {self.error}"
