"""Settings loading and management."""

from __future__ import annotations

import logging
import re
import shutil
import time
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

import yaml

logger = logging.getLogger("motd_markup.config")


@dataclass(frozen=True)
class ServerSettings:
    """Settings of the sleeping server that supply the MOTD source string.

    Attributes:
        server_name: Markup string shown as the server's MOTD.
        server_port: Port the Java listener binds to.
        bedrock_port: Optional port for the Bedrock listener.
        max_players: Player count advertised in the status response.
        login_message: Message shown to players who wake the server.
        server_online_mode: Whether players are authenticated online.
        web_port: Port of the web panel, 0 to disable it.
        web_stop_on_start: Stop the web panel when the server starts.
        web_serve_dynmap: Serve Dynmap from the web panel (bool or path).
        web_sub_path: URL prefix of the web panel.
        start_minecraft: Start the server process when a player connects.
        minecraft_command: Command line used to start the server.
        prevent_stop: Keep the starter running after the server stops.
        version: Version string advertised, or False to use the default.
        fav_icon: Favicon as a ready data URI.
        fav_icon_path: Path to a PNG favicon, read when `fav_icon` is unset.
        minecraft_working_directory: Working directory of the server process.
        discord_webhook_url: Webhook receiving wake-up and shutdown notices.
        black_list_address: Addresses refused by the listener.
        white_listed_names: Only these players may wake the server.
        hide_ip_in_logs: Redact client addresses in logs.

    Examples:
        ServerSettings(server_name="§aLobby", server_port=25566)
    """

    # Status
    server_name: str = "A Minecraft Server"
    server_port: int = 25565
    bedrock_port: int | None = None
    max_players: int = 20
    login_message: str = "Welcome to the server!"
    server_online_mode: bool = True

    # Web panel
    web_port: int = 0
    web_stop_on_start: bool = False
    web_serve_dynmap: bool | str | None = None
    web_sub_path: str | None = None

    # Server process
    start_minecraft: bool = True
    minecraft_command: str = "java -jar server.jar nogui"
    prevent_stop: bool | None = None
    version: str | bool | None = False
    minecraft_working_directory: str | None = None

    # Favicon
    fav_icon: str | None = None
    fav_icon_path: str | None = None

    # Notifications and access
    discord_webhook_url: str | None = None
    black_list_address: list[str] | None = None
    white_listed_names: list[str] | None = None
    hide_ip_in_logs: bool | None = None


class SettingsError(ValueError):
    """Exception raised when settings values are invalid.

    Examples:
        raise SettingsError("`server_port` must be between 0 and 65535")
    """


_PORT_FIELDS = ("server_port", "web_port")
_OPTIONAL_PORT_FIELDS = ("bedrock_port",)
_STRING_FIELDS = ("server_name", "login_message", "minecraft_command")
_OPTIONAL_STRING_FIELDS = (
    "web_sub_path",
    "minecraft_working_directory",
    "fav_icon",
    "fav_icon_path",
    "discord_webhook_url",
)
_BOOL_FIELDS = ("server_online_mode", "web_stop_on_start", "start_minecraft")
_OPTIONAL_BOOL_FIELDS = ("prevent_stop", "hide_ip_in_logs")
_OPTIONAL_LIST_FIELDS = ("black_list_address", "white_listed_names")


DEFAULT_SETTINGS = ServerSettings()

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_field_name(key: str) -> str:
    """Map a settings key onto a `ServerSettings` field name.

    Examples:
        to_field_name("favIconPath")  # "fav_icon_path"
        to_field_name("server_name")  # "server_name"
    """
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def to_settings_key(field_name: str) -> str:
    """Map a `ServerSettings` field name onto its camelCase file key."""
    head, *tail = field_name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def read_settings(path: Path) -> ServerSettings:
    """Read settings from a YAML file, strictly.

    Keys may be written in camelCase (``serverName``) or snake_case
    (``server_name``). Keys present in the file replace the defaults; keys
    absent from the file keep their default values.

    Args:
        path: YAML settings file.

    Returns:
        ServerSettings: Merged and validated settings.

    Raises:
        OSError: If the file cannot be read.
        SettingsError: If the file is not valid YAML, is not a mapping, holds
            unsupported keys, or holds invalid values.

    Examples:
        settings = read_settings(Path("sleepingSettings.yml"))
    """
    with open(path, encoding="utf-8") as stream:
        try:
            data = yaml.safe_load(stream)
        except yaml.YAMLError as error:
            raise SettingsError(f"Invalid YAML in {path}: {error}") from error

    logger.debug("Settings read from %s: %r", path, data)

    if data is None:
        return DEFAULT_SETTINGS
    if not isinstance(data, dict):
        raise SettingsError(f"Settings in {path} must be a mapping")

    values = {to_field_name(str(key)): value for key, value in data.items()}
    known = {field.name for field in fields(ServerSettings)}
    unknown = sorted(str(key) for key in data if to_field_name(str(key)) not in known)
    if unknown:
        raise SettingsError(f"Unsupported settings in {path}: {', '.join(unknown)}")

    settings = replace(DEFAULT_SETTINGS, **values)
    validate_settings(settings)
    return settings


def load_settings(path: Path) -> ServerSettings:
    """Load settings, falling back to defaults on any failure.

    A missing or unreadable file is replaced with a default one. An invalid
    file is first copied to ``<stem>-invalid-<unix seconds><suffix>`` so it is
    not lost.

    Args:
        path: YAML settings file.

    Returns:
        ServerSettings: Settings from the file, or the defaults.

    Examples:
        settings = load_settings(Path("sleepingSettings.yml"))
    """
    try:
        return read_settings(path)
    except SettingsError as error:
        logger.error("Failed to load settings: %s", error)
        logger.warning("Using default settings")
        try:
            backup_settings(path)
        except OSError as backup_error:
            logger.error("Failed to backup settings: %s", backup_error)
            return DEFAULT_SETTINGS
    except OSError as error:
        logger.error("Failed to open settings file: %s", error)
        logger.warning("Using default settings")

    try:
        save_default_settings(path)
    except OSError as error:
        logger.error("Failed to create settings file: %s", error)
    return DEFAULT_SETTINGS


def backup_settings(path: Path) -> Path:
    """Copy a settings file aside, returning the backup path."""
    backup_path = path.with_name(f"{path.stem}-invalid-{int(time.time())}{path.suffix}")
    logger.debug("Backup file name: %s", backup_path)
    shutil.copyfile(path, backup_path)
    logger.info("Settings file backed up!")
    return backup_path


def save_default_settings(path: Path) -> None:
    """Write the default settings as YAML with camelCase keys, leaving out unset fields."""
    data = {
        to_settings_key(key): value
        for key, value in asdict(DEFAULT_SETTINGS).items()
        if value is not None
    }
    with open(path, "w", encoding="utf-8") as stream:
        yaml.safe_dump(data, stream, sort_keys=False, allow_unicode=True)
    logger.info("Settings file created!")


def validate_settings(settings: ServerSettings) -> None:
    """Validate a `ServerSettings` instance.

    Args:
        settings: Settings to validate.

    Returns:
        None.

    Raises:
        SettingsError: If a port is out of range, a count is negative, or a
            field holds a value of the wrong type.

    Examples:
        validate_settings(ServerSettings(server_port=25565))
    """
    ports = {name: getattr(settings, name) for name in _PORT_FIELDS}
    ports.update(
        {
            name: getattr(settings, name)
            for name in _OPTIONAL_PORT_FIELDS
            if getattr(settings, name) is not None
        }
    )
    _ensure_integers({**ports, "max_players": settings.max_players})

    for name, port in ports.items():
        if not 0 <= port <= 65535:
            raise SettingsError(f"`{name}` must be between 0 and 65535")
    if settings.max_players < 0:
        raise SettingsError("`max_players` must be >= 0")

    for name in _STRING_FIELDS:
        if not isinstance(getattr(settings, name), str):
            raise SettingsError(f"`{name}` must be a string")
    for name in _OPTIONAL_STRING_FIELDS:
        value = getattr(settings, name)
        if value is not None and not isinstance(value, str):
            raise SettingsError(f"`{name}` must be a string")

    for name in _BOOL_FIELDS:
        if not isinstance(getattr(settings, name), bool):
            raise SettingsError(f"`{name}` must be a boolean")
    for name in _OPTIONAL_BOOL_FIELDS:
        value = getattr(settings, name)
        if value is not None and not isinstance(value, bool):
            raise SettingsError(f"`{name}` must be a boolean")

    for name in _OPTIONAL_LIST_FIELDS:
        value = getattr(settings, name)
        if value is None:
            continue
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise SettingsError(f"`{name}` must be a list of strings")

    if not isinstance(settings.version, (str, bool)) and settings.version is not None:
        raise SettingsError("`version` must be a string or a boolean")
    if not isinstance(settings.web_serve_dynmap, (str, bool)) and settings.web_serve_dynmap is not None:
        raise SettingsError("`web_serve_dynmap` must be a string or a boolean")


def apply_overrides(settings: ServerSettings, **overrides: object) -> ServerSettings:
    """Apply override values to `ServerSettings`.

    Args:
        settings: Base settings to update.
        overrides: Override values keyed by field name; values set to None are
            ignored.

    Returns:
        ServerSettings: New settings with the overrides applied, or the
        original settings when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `ServerSettings`.

    Examples:
        updated = apply_overrides(settings, server_name="§6Gold Server")
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return settings
    return replace(settings, **changes)


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise SettingsError(f"`{key}` must be an integer")
