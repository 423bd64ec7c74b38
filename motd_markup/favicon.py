"""Favicon loading for the status response."""

from __future__ import annotations

import base64
import logging
from pathlib import Path

from .config import ServerSettings
from .constants import DEFAULT_FAVICON
from .log import TRACE

logger = logging.getLogger("motd_markup.favicon")


def get_favicon(settings: ServerSettings, base_dir: Path | None = None) -> str:
    """Resolve the favicon advertised by the server.

    A configured `fav_icon` data URI wins. Otherwise the PNG at
    `fav_icon_path` is read and URL-safe base64 encoded. Read failures fall
    back to the built-in favicon.

    Args:
        settings: Server settings.
        base_dir: Directory relative favicon paths are resolved against.
            Defaults to the current working directory.

    Returns:
        str: ``data:image/png;base64,...`` URI.

    Examples:
        get_favicon(ServerSettings(fav_icon_path="server-icon.png"))
    """
    if settings.fav_icon is not None:
        return settings.fav_icon
    if settings.fav_icon_path is None:
        return DEFAULT_FAVICON

    path = Path(settings.fav_icon_path)
    if not path.is_absolute():
        path = (base_dir or Path.cwd()) / path

    try:
        data = path.read_bytes()
    except OSError as error:
        logger.error("Failed to read fav_icon_path %s: %s", path, error)
        return DEFAULT_FAVICON

    favicon = f"data:image/png;base64,{base64.urlsafe_b64encode(data).decode('ascii')}"
    logger.log(TRACE, "Favicon base64: %s", favicon)
    return favicon
