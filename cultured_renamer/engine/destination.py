"""Destination folder routing by series type and restriction."""
from __future__ import annotations

import logging

from ..core.config import RenamerConfig
from ..core.errors import DestinationNotFoundError
from ..core.models import DestinationFolder, RelocationContext, SeriesInfo
from .sanitize import replace_invalid_path_characters
from .titles import series_title


logger = logging.getLogger(__name__)


def category_for(series: SeriesInfo, config: RenamerConfig) -> str:
    """Category (folder) name for a series.

    Restricted content goes to the restricted folder whatever its type.
    """
    if series.restricted:
        return config.restricted_dir
    if series.is_movie:
        return config.movie_dir
    return config.anime_dir


def resolve_destination(
    ctx: RelocationContext,
    config: RenamerConfig,
) -> tuple[DestinationFolder, str]:
    """Pick the destination folder and subfolder for the file in ctx.

    Args:
        ctx: Relocation context with the host's available folders.
        config: Renamer configuration.

    Returns:
        (destination folder, subfolder name). The folder is always one of
        ctx.available_folders.

    Raises:
        DestinationNotFoundError: No available folder is named after the category.
    """
    location = category_for(ctx.anime, config)
    logger.info("Looking for %s.", location)

    for folder in ctx.available_folders:
        logger.debug(
            "%s | %s - Path: %s Type: %s",
            folder.id, folder.name, folder.path, folder.drop_folder_type.name,
        )

    wanted = location.casefold()
    destination = next(
        (folder for folder in ctx.available_folders if folder.name.casefold() == wanted),
        None,
    )
    if destination is None:
        raise DestinationNotFoundError()

    # Final subfolder holding the episode files
    subfolder = replace_invalid_path_characters(series_title(ctx.anime, config))
    return destination, subfolder
