"""Unit tests for settings module."""
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from cultured_renamer.core.config import RenamerConfig
from cultured_renamer.core.models import TitleLanguage
from cultured_renamer.settings import RenamerSettings, load_settings


class TestRenamerSettings:
    """Tests for RenamerSettings."""

    def test_default_values(self):
        settings = RenamerSettings()
        assert settings.preferred_languages == [TitleLanguage.ENGLISH, TitleLanguage.ROMAJI]
        assert settings.anime_dir == "Anime"
        assert settings.movie_dir == "Movies"
        assert settings.restricted_dir == "Hentai"

    def test_defaults_match_config(self):
        assert RenamerSettings().to_config() == RenamerConfig()

    def test_camel_case_keys(self):
        settings = RenamerSettings.model_validate({
            "preferredLanguages": ["Romaji", "english"],
            "animeDir": "TV",
        })
        assert settings.preferred_languages == [TitleLanguage.ROMAJI, TitleLanguage.ENGLISH]
        assert settings.anime_dir == "TV"

    def test_comma_separated_languages(self):
        settings = RenamerSettings(preferred_languages="japanese, english")
        assert settings.preferred_languages == [TitleLanguage.JAPANESE, TitleLanguage.ENGLISH]

    def test_unknown_language(self):
        with pytest.raises(ValidationError):
            RenamerSettings(preferred_languages=["Klingon"])

    def test_empty_languages(self):
        with pytest.raises(ValidationError):
            RenamerSettings(preferred_languages=[])

    def test_blank_folder(self):
        with pytest.raises(ValidationError):
            RenamerSettings(movie_dir="   ")

    def test_folder_stripped(self):
        assert RenamerSettings(movie_dir=" Films ").movie_dir == "Films"

    def test_to_config(self):
        config = RenamerSettings(
            preferred_languages=["German"],
            restricted_dir="Adult",
        ).to_config()

        assert config.preferred_languages == (TitleLanguage.GERMAN,)
        assert config.restricted_dir == "Adult"


class TestLoadSettings:
    """Tests for load_settings."""

    def test_none_gives_defaults(self):
        assert load_settings(None) == RenamerSettings()

    def test_load_file(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"movieDir": "Films"}), encoding="utf-8")

        settings = load_settings(path)

        assert settings.movie_dir == "Films"
        assert settings.anime_dir == "Anime"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "nope.json")

    def test_invalid_file(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValidationError):
            load_settings(path)
