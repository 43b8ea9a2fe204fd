import logging

from .comparison import Comparison, ComparisonResult, ContentGroup, FileEntry, is_difference
from .issues import ComparisonIssue, IssueKind
from .settings import Settings, SettingsError
from .table import TableRenderer, fixed_length

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
