"""MOTD rendering for configured servers."""

from __future__ import annotations

from .config import ServerSettings
from .encoders import render
from .models import MotdOutput, OutputKind


def get_motd(
    settings: ServerSettings, kind: OutputKind, canonical_flags: bool = False
) -> MotdOutput:
    """Render the configured server name in the requested encoding.

    Args:
        settings: Settings providing `server_name`.
        kind: Requested encoding.
        canonical_flags: Forwarded to the component-tree encoder.

    Returns:
        MotdOutput: Result tagged with `kind`.

    Examples:
        get_motd(ServerSettings(server_name="§aHello"), OutputKind.PLAIN_TEXT).value  # "Hello"
    """
    return render(settings.server_name, kind, canonical_flags=canonical_flags)
