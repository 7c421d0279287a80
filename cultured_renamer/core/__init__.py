"""Core domain models and protocols."""
from .protocols import Renamer, ProgressReporter
from .models import (
    TitleLanguage,
    TitleType,
    SeriesType,
    EpisodeType,
    DropFolderType,
    Title,
    EpisodeCounts,
    SeriesInfo,
    EpisodeInfo,
    TextStream,
    VideoCodec,
    VideoStream,
    StreamInfo,
    FileInfo,
    DestinationFolder,
    RelocationContext,
    RelocationError,
    RelocationResult,
)
from .errors import (
    ErrorKind,
    NamingError,
    EmptyFileNameError,
    DestinationNotFoundError,
    NoEpisodeTitleError,
    UnrecognizedEpisodeCategoryError,
)
from .config import RenamerConfig

__all__ = [
    # Protocols
    "Renamer",
    "ProgressReporter",
    # Models
    "TitleLanguage",
    "TitleType",
    "SeriesType",
    "EpisodeType",
    "DropFolderType",
    "Title",
    "EpisodeCounts",
    "SeriesInfo",
    "EpisodeInfo",
    "TextStream",
    "VideoCodec",
    "VideoStream",
    "StreamInfo",
    "FileInfo",
    "DestinationFolder",
    "RelocationContext",
    "RelocationError",
    "RelocationResult",
    # Errors
    "ErrorKind",
    "NamingError",
    "EmptyFileNameError",
    "DestinationNotFoundError",
    "NoEpisodeTitleError",
    "UnrecognizedEpisodeCategoryError",
    # Config
    "RenamerConfig",
]
