"""JSON relocation context documents.

A host (or the CLI) describes each file to relocate as a JSON object.
Keys may be camelCase or snake_case; enum values are matched by name,
ignoring case.

    {
      "file": {"fileName": "src.mkv",
               "streamInfo": {"videoStream": {"bitDepth": 10, "codec": {"name": "HEVC"}},
                              "textStreams": [{"languageCode": "en"}]},
               "releaseGroupName": "GRP"},
      "episodes": [{"episodeNumber": 3, "type": "Episode",
                    "titles": [{"text": "The Beginning", "language": "English"}]}],
      "series": [{"preferredTitle": "My Show", "type": "Series",
                  "episodeCounts": {"episodes": 12},
                  "titles": [{"text": "My Show", "language": "English", "type": "Official"}]}],
      "availableFolders": [{"id": 1, "name": "Anime", "path": "/media/anime"}]
    }
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from .core.models import (
    DestinationFolder,
    DropFolderType,
    EpisodeCounts,
    EpisodeInfo,
    EpisodeType,
    FileInfo,
    RelocationContext,
    SeriesInfo,
    SeriesType,
    StreamInfo,
    TextStream,
    Title,
    TitleLanguage,
    TitleType,
    VideoCodec,
    VideoStream,
)


class _Document(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TitleDocument(_Document):
    text: str = Field(..., description="Title text")
    language: TitleLanguage = Field(default=TitleLanguage.UNKNOWN)
    type: TitleType = Field(default=TitleType.NONE)

    @field_validator("language", mode="before")
    @classmethod
    def parse_language(cls, value):
        return TitleLanguage.parse(value)

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value):
        return TitleType.parse(value)

    def to_model(self) -> Title:
        return Title(text=self.text, language=self.language, type=self.type)


class EpisodeCountsDocument(_Document):
    episodes: int = Field(default=0, ge=0)
    credits: int = Field(default=0, ge=0)
    specials: int = Field(default=0, ge=0)
    trailers: int = Field(default=0, ge=0)
    parodies: int = Field(default=0, ge=0)
    others: int = Field(default=0, ge=0)

    def to_model(self) -> EpisodeCounts:
        return EpisodeCounts(**self.model_dump())


class SeriesDocument(_Document):
    preferred_title: str = Field(..., description="Host's preferred series title")
    titles: List[TitleDocument] = Field(default_factory=list)
    type: SeriesType = Field(default=SeriesType.SERIES)
    restricted: bool = Field(default=False, description="Adult-only content")
    episode_counts: EpisodeCountsDocument = Field(default_factory=EpisodeCountsDocument)

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value):
        return SeriesType.parse(value)

    def to_model(self) -> SeriesInfo:
        return SeriesInfo(
            preferred_title=self.preferred_title,
            titles=tuple(t.to_model() for t in self.titles),
            type=self.type,
            restricted=self.restricted,
            episode_counts=self.episode_counts.to_model(),
        )


class EpisodeDocument(_Document):
    episode_number: int = Field(..., ge=0)
    type: EpisodeType = Field(default=EpisodeType.EPISODE)
    titles: List[TitleDocument] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value):
        return EpisodeType.parse(value)

    def to_model(self) -> EpisodeInfo:
        return EpisodeInfo(
            episode_number=self.episode_number,
            type=self.type,
            titles=tuple(t.to_model() for t in self.titles),
        )


class VideoCodecDocument(_Document):
    name: str = ""


class VideoStreamDocument(_Document):
    bit_depth: int = Field(..., ge=1)
    codec: Optional[VideoCodecDocument] = None

    def to_model(self) -> VideoStream:
        codec = VideoCodec(name=self.codec.name) if self.codec else None
        return VideoStream(bit_depth=self.bit_depth, codec=codec)


class TextStreamDocument(_Document):
    language_code: str


class StreamInfoDocument(_Document):
    video_stream: VideoStreamDocument
    text_streams: List[TextStreamDocument] = Field(default_factory=list)

    def to_model(self) -> StreamInfo:
        return StreamInfo(
            video_stream=self.video_stream.to_model(),
            text_streams=tuple(TextStream(s.language_code) for s in self.text_streams),
        )


class FileDocument(_Document):
    file_name: str = Field(..., description="Source file name including extension")
    stream_info: StreamInfoDocument
    release_group_name: Optional[str] = None

    def to_model(self) -> FileInfo:
        return FileInfo(
            file_name=self.file_name,
            stream_info=self.stream_info.to_model(),
            release_group_name=self.release_group_name,
        )


class FolderDocument(_Document):
    id: int
    name: str
    path: Path
    drop_folder_type: DropFolderType = Field(default=DropFolderType.DESTINATION)

    @field_validator("drop_folder_type", mode="before")
    @classmethod
    def parse_drop_folder_type(cls, value):
        return DropFolderType.parse(value)

    def to_model(self) -> DestinationFolder:
        return DestinationFolder(
            id=self.id,
            name=self.name,
            path=self.path,
            drop_folder_type=self.drop_folder_type,
        )


class ContextDocument(_Document):
    """One file to relocate, with everything the renamer needs."""
    file: FileDocument
    episodes: List[EpisodeDocument] = Field(..., min_length=1)
    series: List[SeriesDocument] = Field(..., min_length=1)
    available_folders: List[FolderDocument] = Field(default_factory=list)

    def to_model(self) -> RelocationContext:
        return RelocationContext(
            file=self.file.to_model(),
            episodes=tuple(e.to_model() for e in self.episodes),
            series=tuple(s.to_model() for s in self.series),
            available_folders=tuple(f.to_model() for f in self.available_folders),
        )


_CONTEXTS = TypeAdapter(Union[List[ContextDocument], ContextDocument])


def parse_contexts(data: Union[dict, list]) -> list[RelocationContext]:
    """Validate already-decoded JSON (one object or a list of them)."""
    parsed = _CONTEXTS.validate_python(data)
    if isinstance(parsed, ContextDocument):
        parsed = [parsed]
    return [doc.to_model() for doc in parsed]


def load_contexts(path: Path) -> list[RelocationContext]:
    """Load relocation contexts from a JSON file.

    Raises:
        FileNotFoundError: path does not exist.
        json.JSONDecodeError: File is not JSON.
        pydantic.ValidationError: JSON does not describe contexts.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return parse_contexts(data)
