"""Naming errors raised by the engine."""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a relocation failure."""
    EMPTY_FILE_NAME = "empty_file_name"
    DESTINATION_NOT_FOUND = "destination_not_found"
    NO_EPISODE_TITLE = "no_episode_title"
    UNRECOGNIZED_EPISODE_CATEGORY = "unrecognized_episode_category"


class NamingError(Exception):
    """Base class for failures local to a single relocation."""
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyFileNameError(NamingError):
    kind = ErrorKind.EMPTY_FILE_NAME

    def __init__(self, message: str = "Filename is empty"):
        super().__init__(message)


class DestinationNotFoundError(NamingError):
    kind = ErrorKind.DESTINATION_NOT_FOUND

    def __init__(self, message: str = "Destination is empty"):
        super().__init__(message)


class NoEpisodeTitleError(NamingError):
    kind = ErrorKind.NO_EPISODE_TITLE

    def __init__(self, message: str = "Episode has no titles"):
        super().__init__(message)


class UnrecognizedEpisodeCategoryError(NamingError):
    kind = ErrorKind.UNRECOGNIZED_EPISODE_CATEGORY
