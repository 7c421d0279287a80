"""Settings file for the renamer.

All options have defaults; CLI flags never need a settings file.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .core.config import DEFAULT_LANGUAGES, RenamerConfig
from .core.models import TitleLanguage


class RenamerSettings(BaseModel):
    """Renamer settings as stored on disk."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    preferred_languages: List[TitleLanguage] = Field(
        default_factory=lambda: list(DEFAULT_LANGUAGES),
        min_length=1,
        description="Title languages to try, most preferred first",
    )
    anime_dir: str = Field(
        default="Anime",
        description="Destination folder name for series",
    )
    movie_dir: str = Field(
        default="Movies",
        description="Destination folder name for movies",
    )
    restricted_dir: str = Field(
        default="Hentai",
        description="Destination folder name for restricted (18+) content",
    )

    @field_validator("preferred_languages", mode="before")
    @classmethod
    def parse_languages(cls, value):
        if isinstance(value, str):
            value = [part for part in value.split(",") if part.strip()]
        return [TitleLanguage.parse(item) for item in value]

    @field_validator("anime_dir", "movie_dir", "restricted_dir")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("folder name must not be blank")
        return value

    def to_config(self) -> RenamerConfig:
        return RenamerConfig(
            preferred_languages=tuple(self.preferred_languages),
            anime_dir=self.anime_dir,
            movie_dir=self.movie_dir,
            restricted_dir=self.restricted_dir,
        )


def load_settings(path: Optional[Path] = None) -> RenamerSettings:
    """Load settings from a JSON file, or defaults when path is None."""
    if path is None:
        return RenamerSettings()
    path = Path(path).expanduser()
    return RenamerSettings.model_validate_json(path.read_text(encoding="utf-8"))
