import argparse
import sys
import textwrap

from . import Comparison, ComparisonIssue, Settings, SettingsError, TableRenderer, __version__
from .settings import (
    SETTING_COLWIDTH,
    SETTING_DIFFONLY,
    SETTING_EXTENSION,
    SETTING_HASH_ALGORITHM,
)
from .utils.digest import DEFAULT_HASH_ALGORITHM, HASH_ALGORITHMS

DEFAULT_COLUMN_WIDTH = 20


def _column_width(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid column width: {value!r}") from None
    if width < 0:
        raise argparse.ArgumentTypeError(f"column width must not be negative: {width}")
    return width


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='foldercmp',
        description='Compare the contents of the given folders. Every file is hashed, and files with identical '
                    'content are listed in the same row, with one column per folder.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent('''
            Examples:
              foldercmp photos backup/photos
              foldercmp --extension jpg --diffonly photos backup/photos

            Cells:
              –            the content does not occur in that folder
              NAME         the content occurs once, under this name
              (N files)    the content occurs N times in that folder
            ''').strip()
    )
    parser.add_argument(
        'directories',
        nargs='+',
        metavar='DIRECTORY',
        help='Directories to compare (their files are compared, subdirectories are not descended into)')
    parser.add_argument(
        '--extension',
        metavar='EXT',
        help='Only regard files with this extension (compared exactly and case-sensitively, without the dot)')
    parser.add_argument(
        '--colwidth',
        type=_column_width,
        metavar='N',
        help=f'The width of each folder column in the output table (default: {DEFAULT_COLUMN_WIDTH})')
    parser.add_argument(
        '--diffonly',
        action='store_true',
        default=None,
        help='Only list the differences, i.e. contents that either (a) do not occur in all folders, or (b) do not '
             'have the same name in all folders, or (c) occur more than once in at least one folder')
    parser.add_argument(
        '--hash-algorithm',
        choices=sorted(HASH_ALGORITHMS),
        help=f'Hash function used to fingerprint the files (default: {DEFAULT_HASH_ALGORITHM})')
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='Path to a TOML settings file. If not provided, uses the FOLDERCMP_CONFIG environment variable.')
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log progress to stderr')
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Path to log file for operation logging. If not provided, uses logging.path from the settings file or '
             'no logging.')
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to INFO.')
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}')
    return parser


def _report_issue(issue: ComparisonIssue):
    print(f"Error: {issue.message()}", file=sys.stderr)


def foldercmp_main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.locate(args.config)
        settings.configure_logging(args.log_file, args.log_level, args.verbose)
    except SettingsError as e:
        parser.error(str(e))

    # Command-line options override the settings file
    extension = args.extension if args.extension is not None else settings.get(SETTING_EXTENSION)
    column_width = args.colwidth if args.colwidth is not None \
        else settings.get(SETTING_COLWIDTH, DEFAULT_COLUMN_WIDTH)
    diffonly = args.diffonly if args.diffonly is not None else settings.get(SETTING_DIFFONLY, False)
    hash_algorithm = args.hash_algorithm if args.hash_algorithm is not None \
        else settings.get(SETTING_HASH_ALGORITHM, DEFAULT_HASH_ALGORITHM)

    if not isinstance(column_width, int) or isinstance(column_width, bool) or column_width < 0:
        parser.error(f"invalid {SETTING_COLWIDTH} in settings: {column_width!r}")
    if not isinstance(diffonly, bool):
        parser.error(f"invalid {SETTING_DIFFONLY} in settings: {diffonly!r}")
    if hash_algorithm not in HASH_ALGORITHMS:
        parser.error(f"invalid {SETTING_HASH_ALGORITHM} in settings: {hash_algorithm!r}")
    if extension is not None:
        extension = str(extension)

    comparison = Comparison(args.directories, extension, hash_algorithm, on_issue=_report_issue)
    result = comparison.run()

    renderer = TableRenderer(result.directories, column_width, hash_algorithm)
    renderer.render(result.select_groups(diffonly))
    return 0


def main():
    sys.exit(foldercmp_main())


if __name__ == '__main__':
    main()
