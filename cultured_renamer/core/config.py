"""Configuration dataclasses with validation."""
from __future__ import annotations

from dataclasses import dataclass, field, replace

from .models import TitleLanguage


DEFAULT_LANGUAGES: tuple[TitleLanguage, ...] = (
    TitleLanguage.ENGLISH,
    TitleLanguage.ROMAJI,
)


@dataclass(frozen=True, slots=True)
class RenamerConfig:
    """Read-only configuration shared by every relocation.

    Folder names are the category names matched against the host's
    destination folders.
    """
    preferred_languages: tuple[TitleLanguage, ...] = field(
        default_factory=lambda: DEFAULT_LANGUAGES
    )
    anime_dir: str = "Anime"
    movie_dir: str = "Movies"
    restricted_dir: str = "Hentai"

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.preferred_languages:
            raise ValueError("At least one preferred language is required")

        # Accept lists from callers but store a tuple
        if not isinstance(self.preferred_languages, tuple):
            object.__setattr__(
                self, "preferred_languages", tuple(self.preferred_languages)
            )

        for name in ("anime_dir", "movie_dir", "restricted_dir"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} must not be blank")

    def with_overrides(self, **kwargs) -> "RenamerConfig":
        """Create a new config with some values overridden."""
        return replace(self, **kwargs)
