"""Anime file naming and routing engine.

Plans a new file name plus destination folder and subfolder from series,
episode and stream metadata.
"""

__version__ = "1.0.0"

# Core exports
from .core.config import RenamerConfig
from .core.errors import ErrorKind, NamingError
from .core.models import (
    RelocationContext,
    RelocationResult,
    RelocationError,
    SeriesInfo,
    EpisodeInfo,
    FileInfo,
    DestinationFolder,
)
from .core.protocols import Renamer, ProgressReporter

# Service exports
from .services.renamer import CulturedRenamer, get_new_path
from .services.batch import plan_batch, BatchPlan, RelocationStats

# IO exports
from .documents import load_contexts, parse_contexts
from .settings import RenamerSettings, load_settings

# Logging exports
from .logging.rich_logger import RichProgressReporter, configure_logging

__all__ = [
    # Core
    "RenamerConfig",
    "ErrorKind",
    "NamingError",
    "RelocationContext",
    "RelocationResult",
    "RelocationError",
    "SeriesInfo",
    "EpisodeInfo",
    "FileInfo",
    "DestinationFolder",
    "Renamer",
    "ProgressReporter",
    # Services
    "CulturedRenamer",
    "get_new_path",
    "plan_batch",
    "BatchPlan",
    "RelocationStats",
    # IO
    "load_contexts",
    "parse_contexts",
    "RenamerSettings",
    "load_settings",
    # Logging
    "RichProgressReporter",
    "configure_logging",
]
