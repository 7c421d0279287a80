"""Renamer service - orchestrates name and destination planning."""
from __future__ import annotations

import logging
from typing import Optional

from ..core.config import RenamerConfig
from ..core.errors import NamingError
from ..core.models import (
    DestinationFolder,
    RelocationContext,
    RelocationError,
    RelocationResult,
)
from ..engine.destination import resolve_destination
from ..engine.filename import build_file_name


logger = logging.getLogger(__name__)


class CulturedRenamer:
    """Renamer whose target folder depends on series type and restriction.

    Implements the Renamer protocol. Holds only read-only configuration,
    so one instance may serve concurrent callers.
    """

    name = "CulturedRenamer"
    description = (
        "Target Folder Structure is based on type (OVA, Movies, Series) "
        "and Restricted > 18+"
    )
    supports_moving = True
    supports_renaming = True

    def __init__(self, config: Optional[RenamerConfig] = None):
        """Initialize the renamer.

        Args:
            config: Preference languages and category folder names.
                Defaults to RenamerConfig().
        """
        self._config = config or RenamerConfig()

    @property
    def config(self) -> RenamerConfig:
        return self._config

    def get_filename(self, ctx: RelocationContext) -> str:
        """Build the new file name. Raises NamingError on failure."""
        return build_file_name(ctx, self._config)

    def get_destination(self, ctx: RelocationContext) -> tuple[DestinationFolder, str]:
        """Pick (destination folder, subfolder). Raises NamingError on failure."""
        return resolve_destination(ctx, self._config)

    def get_new_path(self, ctx: RelocationContext) -> RelocationResult:
        """Plan the new name and location of the file in ctx.

        The file name is planned first; if it fails the destination is not
        looked up. Failures are returned, never raised.
        """
        source = ctx.file.file_name

        try:
            file_name = self.get_filename(ctx)
        except NamingError as e:
            logger.error("Unable to get new filename for %s: %s", source, e.message)
            return RelocationResult.failure(RelocationError.from_exception(e))

        try:
            destination, subfolder = self.get_destination(ctx)
        except NamingError as e:
            logger.error("Unable to get new destination for %s: %s", source, e.message)
            return RelocationResult.failure(RelocationError.from_exception(e))

        return RelocationResult.success(
            file_name=file_name,
            destination_folder=destination,
            subfolder=subfolder,
        )


def get_new_path(
    ctx: RelocationContext,
    config: Optional[RenamerConfig] = None,
) -> RelocationResult:
    """Plan a relocation without keeping a renamer around."""
    return CulturedRenamer(config).get_new_path(ctx)
