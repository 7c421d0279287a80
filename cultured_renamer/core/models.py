"""Domain models - immutable data classes."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .errors import ErrorKind, NamingError


class _ParsableEnum(Enum):
    """Enum that parses host text by name or value, ignoring case."""

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        key = text.upper().replace("-", "_").replace(" ", "_")
        if key in cls.__members__:
            return cls.__members__[key]
        for member in cls:
            if member.value == text.lower():
                return member
        raise ValueError(f"{text!r} is not a valid {cls.__name__}")


class TitleLanguage(_ParsableEnum):
    """Language a title is written in."""
    UNKNOWN = "unknown"
    ENGLISH = "en"
    ROMAJI = "x-jat"
    JAPANESE = "ja"
    CHINESE = "zh"
    PINYIN = "x-zht"
    KOREAN = "ko"
    KOREAN_TRANSCRIPTION = "x-kot"
    GERMAN = "de"
    FRENCH = "fr"
    SPANISH = "es"
    ITALIAN = "it"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"


class TitleType(_ParsableEnum):
    """Role of a title within its owner's title list."""
    NONE = "none"
    MAIN = "main"
    OFFICIAL = "official"
    SHORT = "short"
    SYNONYM = "synonym"
    TITLE_CARD = "title-card"
    KANA_READING = "kana-reading"


class SeriesType(_ParsableEnum):
    """Broadcast format of a series."""
    SERIES = "series"
    MOVIE = "movie"
    OVA = "ova"
    TV_SPECIAL = "tv-special"
    WEB = "web"
    OTHER = "other"
    UNKNOWN = "unknown"


class EpisodeType(_ParsableEnum):
    """Episode category. Unrecognized raw values parse to UNKNOWN."""
    EPISODE = "episode"
    CREDITS = "credits"
    SPECIAL = "special"
    TRAILER = "trailer"
    PARODY = "parody"
    OTHER = "other"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value) -> "EpisodeType":
        try:
            return super().parse(value)
        except ValueError:
            return cls.UNKNOWN


class DropFolderType(_ParsableEnum):
    """How the host uses an import folder."""
    EXCLUDED = "excluded"
    SOURCE = "source"
    DESTINATION = "destination"
    BOTH = "both"


@dataclass(frozen=True, slots=True)
class Title:
    """A localized title of a series or episode."""
    text: str
    language: TitleLanguage = TitleLanguage.UNKNOWN
    type: TitleType = TitleType.NONE


@dataclass(frozen=True, slots=True)
class EpisodeCounts:
    """Total number of episodes per category, used for zero padding."""
    episodes: int = 0
    credits: int = 0
    specials: int = 0
    trailers: int = 0
    parodies: int = 0
    others: int = 0


@dataclass(frozen=True, slots=True)
class SeriesInfo:
    """The series (anime) a file belongs to."""
    preferred_title: str
    titles: tuple[Title, ...] = field(default_factory=tuple)
    type: SeriesType = SeriesType.SERIES
    restricted: bool = False
    episode_counts: EpisodeCounts = field(default_factory=EpisodeCounts)

    @property
    def is_movie(self) -> bool:
        return self.type == SeriesType.MOVIE


@dataclass(frozen=True, slots=True)
class EpisodeInfo:
    """The episode a file is linked to."""
    episode_number: int
    type: EpisodeType = EpisodeType.EPISODE
    titles: tuple[Title, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class TextStream:
    """A subtitle stream."""
    language_code: str


@dataclass(frozen=True, slots=True)
class VideoCodec:
    name: str


@dataclass(frozen=True, slots=True)
class VideoStream:
    bit_depth: int
    codec: Optional[VideoCodec] = None


@dataclass(frozen=True, slots=True)
class StreamInfo:
    """Technical stream properties of a video file."""
    video_stream: VideoStream
    text_streams: tuple[TextStream, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class FileInfo:
    """The file being relocated."""
    file_name: str
    stream_info: StreamInfo
    release_group_name: Optional[str] = None

    @property
    def extension(self) -> str:
        """Extension including the leading dot, case preserved."""
        return Path(self.file_name).suffix


@dataclass(frozen=True, slots=True)
class DestinationFolder:
    """A candidate destination (import folder) configured in the host."""
    id: int
    name: str
    path: Path
    drop_folder_type: DropFolderType = DropFolderType.DESTINATION


@dataclass(frozen=True, slots=True)
class RelocationContext:
    """Everything needed to plan where a single file goes.

    Only the first episode and the first series are used.
    """
    file: FileInfo
    episodes: tuple[EpisodeInfo, ...]
    series: tuple[SeriesInfo, ...]
    available_folders: tuple[DestinationFolder, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.episodes:
            raise ValueError("At least one episode is required")
        if not self.series:
            raise ValueError("At least one series is required")

    @property
    def episode(self) -> EpisodeInfo:
        return self.episodes[0]

    @property
    def anime(self) -> SeriesInfo:
        return self.series[0]


@dataclass(frozen=True, slots=True)
class RelocationError:
    """Why a relocation could not be planned."""
    kind: ErrorKind
    message: str

    @classmethod
    def from_exception(cls, exc: NamingError) -> "RelocationError":
        return cls(kind=exc.kind, message=exc.message)


@dataclass(frozen=True, slots=True)
class RelocationResult:
    """Planned file name and destination, or the error that prevented it."""
    file_name: Optional[str] = None
    destination_folder: Optional[DestinationFolder] = None
    subfolder: Optional[str] = None
    error: Optional[RelocationError] = None

    @classmethod
    def success(
        cls,
        file_name: str,
        destination_folder: DestinationFolder,
        subfolder: str,
    ) -> "RelocationResult":
        return cls(
            file_name=file_name,
            destination_folder=destination_folder,
            subfolder=subfolder,
        )

    @classmethod
    def failure(cls, error: RelocationError) -> "RelocationResult":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def target_path(self) -> Optional[Path]:
        """Full path the host should move the file to."""
        if not self.is_success:
            return None
        return Path(self.destination_folder.path) / self.subfolder / self.file_name
