"""
Core domain layer: cell classification, column statistics, previews,
column selection, chart projection and the exploration context
"""

from .actions import Action, WorkbenchHandlers
from .context import ExplorationContext, ExplorationProvider, WorkbenchSummary
from .exceptions import ConfigError, MissingContextError, WorkbenchError
from .preview import Preview, PreviewCache, SplitPreview
from .selection import ColumnSelection, KeyEvent
from .source import DatasetSource
from .stats import ColumnStats

__all__ = [
    "Action",
    "ColumnSelection",
    "ColumnStats",
    "ConfigError",
    "DatasetSource",
    "ExplorationContext",
    "ExplorationProvider",
    "KeyEvent",
    "MissingContextError",
    "Preview",
    "PreviewCache",
    "SplitPreview",
    "WorkbenchHandlers",
    "WorkbenchError",
    "WorkbenchSummary",
]
