"""Tab-separated table output for comparison results."""
import sys
from pathlib import Path
from typing import NamedTuple, TextIO

import regex

from .comparison import ContentGroup, FileEntry
from .utils.digest import DEFAULT_HASH_ALGORITHM, digest_length

# Placeholders for names that cannot be shown
UNKNOWN_DIRECTORY = "???"
UNNAMED_FILE = "(1 file)"
NO_FILE = "–"

_GRAPHEME = regex.compile(r'\X')


def fixed_length(text: str, length: int, padding: str = " ") -> str:
    """Cut off or pad a string to exactly ``length`` user-perceived characters.

    Works on grapheme clusters, so a character made of several code points
    (a letter with combining accents, a flag, a family emoji) is kept whole.

    >>> fixed_length("abc", 5)
    'abc  '
    >>> fixed_length("abcdefgh", 5)
    'abcde'
    """
    clusters = _GRAPHEME.findall(text)[:length]
    return "".join(clusters) + padding * (length - len(clusters))


def _is_text(name: str) -> bool:
    # Undecodable bytes in file names come back as lone surrogates
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True


def directory_label(directory: Path) -> str:
    """Base name of a directory for the table header, or a placeholder."""
    name = directory.name
    if not name or name == '..' or not _is_text(name):
        return UNKNOWN_DIRECTORY
    return name


def summarize_cell(files: list[FileEntry]) -> str:
    """Describe which files of one directory belong to a group."""
    if not files:
        return NO_FILE
    elif len(files) == 1:
        name = files[0].name
        return name if _is_text(name) else UNNAMED_FILE
    else:
        return f"({len(files)} files)"


class ReportRow(NamedTuple):
    ordinal: int
    digest: str
    cells: list[str]


class TableRenderer:
    """Renders content groups as a table with one column per directory.

    Every directory column, header included, is fit to the same fixed width.
    The digest column is as wide as a full digest.
    """

    def __init__(self, directories: list[Path], column_width: int = 20,
                 hash_algorithm: str = DEFAULT_HASH_ALGORITHM, output: TextIO | None = None):
        if column_width < 0:
            raise ValueError(f"Column width must not be negative: {column_width}")

        self._directories = directories
        self._column_width = column_width
        self._hash_algorithm = hash_algorithm
        self._output = output

    def header(self) -> str:
        label = self._hash_algorithm.upper()
        label = label + " " * (digest_length(self._hash_algorithm) - len(label))
        columns = [fixed_length(directory_label(d), self._column_width) for d in self._directories]
        return "\t".join(["#", label, *columns])

    def rows(self, groups: list[ContentGroup]) -> list[ReportRow]:
        return [
            ReportRow(ordinal, group.digest, [summarize_cell(group.files_in(index))
                                              for index in range(len(self._directories))])
            for ordinal, group in enumerate(groups, start=1)
        ]

    def format_row(self, row: ReportRow) -> str:
        cells = [fixed_length(cell, self._column_width) for cell in row.cells]
        return "\t".join([str(row.ordinal), row.digest, *cells])

    def render(self, groups: list[ContentGroup]) -> None:
        """Print the table, surrounded by blank lines, in the order of ``groups``."""
        output = self._output if self._output is not None else sys.stdout
        print(file=output)
        print(self.header(), file=output)
        for row in self.rows(groups):
            print(self.format_row(row), file=output)
        print(file=output)
