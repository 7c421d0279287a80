"""Builders for relocation test data.

Each builder returns a valid object with sensible defaults so tests only
spell out the fields they care about.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from cultured_renamer.core.models import (
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


def make_series(
    title: str = "My Show",
    *,
    titles: Optional[tuple[Title, ...]] = None,
    preferred_title: Optional[str] = None,
    type: SeriesType = SeriesType.SERIES,
    restricted: bool = False,
    counts: Optional[EpisodeCounts] = None,
) -> SeriesInfo:
    if titles is None:
        titles = (Title(title, TitleLanguage.ENGLISH, TitleType.OFFICIAL),)
    return SeriesInfo(
        preferred_title=preferred_title or title,
        titles=titles,
        type=type,
        restricted=restricted,
        episode_counts=counts or EpisodeCounts(episodes=12),
    )


def make_episode(
    number: int = 3,
    *,
    title: Optional[str] = "The Beginning",
    titles: Optional[tuple[Title, ...]] = None,
    type: EpisodeType = EpisodeType.EPISODE,
) -> EpisodeInfo:
    if titles is None:
        titles = (Title(title, TitleLanguage.ENGLISH),) if title else ()
    return EpisodeInfo(episode_number=number, type=type, titles=titles)


def make_file(
    file_name: str = "src.mkv",
    *,
    subtitles: tuple[str, ...] = ("en",),
    bit_depth: int = 10,
    codec: Optional[str] = "HEVC",
    release_group: Optional[str] = "GRP",
) -> FileInfo:
    return FileInfo(
        file_name=file_name,
        stream_info=StreamInfo(
            video_stream=VideoStream(
                bit_depth=bit_depth,
                codec=VideoCodec(codec) if codec is not None else None,
            ),
            text_streams=tuple(TextStream(code) for code in subtitles),
        ),
        release_group_name=release_group,
    )


def make_folder(name: str, folder_id: int = 1, root: str = "/media") -> DestinationFolder:
    return DestinationFolder(
        id=folder_id,
        name=name,
        path=Path(root) / name.lower(),
        drop_folder_type=DropFolderType.DESTINATION,
    )


def make_context(
    *,
    series: Optional[SeriesInfo] = None,
    episode: Optional[EpisodeInfo] = None,
    file: Optional[FileInfo] = None,
    folders: Optional[tuple[DestinationFolder, ...]] = None,
) -> RelocationContext:
    if folders is None:
        folders = (make_folder("Anime"),)
    return RelocationContext(
        file=file or make_file(),
        episodes=(episode or make_episode(),),
        series=(series or make_series(),),
        available_folders=folders,
    )


SAMPLE_DOCUMENT = {
    "file": {
        "fileName": "src.mkv",
        "streamInfo": {
            "videoStream": {"bitDepth": 10, "codec": {"name": "HEVC"}},
            "textStreams": [{"languageCode": "en"}],
        },
        "releaseGroupName": "GRP",
    },
    "episodes": [
        {
            "episodeNumber": 3,
            "type": "Episode",
            "titles": [{"text": "The Beginning", "language": "English"}],
        }
    ],
    "series": [
        {
            "preferredTitle": "My Show",
            "type": "Series",
            "restricted": False,
            "episodeCounts": {"episodes": 12},
            "titles": [{"text": "My Show", "language": "English", "type": "Official"}],
        }
    ],
    "availableFolders": [
        {"id": 1, "name": "Movies", "path": "/media/movies"},
        {"id": 2, "name": "Anime", "path": "/media/anime", "dropFolderType": "Destination"},
    ],
}


def write_document(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
