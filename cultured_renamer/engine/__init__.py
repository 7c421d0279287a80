"""Naming and routing engine - pure functions over relocation contexts."""
from .titles import resolve_title, resolve_episode_title, series_title
from .episodes import pad_number, format_episode_label
from .sanitize import replace_invalid_path_characters
from .filename import build_file_name
from .destination import category_for, resolve_destination

__all__ = [
    "resolve_title",
    "resolve_episode_title",
    "series_title",
    "pad_number",
    "format_episode_label",
    "replace_invalid_path_characters",
    "build_file_name",
    "category_for",
    "resolve_destination",
]
