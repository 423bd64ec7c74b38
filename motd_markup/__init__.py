"""
motd-markup: section-sign (§) formatting codes to plain text, JSON and HTML.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    motd-markup render "§aHello §lWorld" --format html

Library Usage:
    from motd_markup import to_component_tree, to_html, tree_to_html

    html = to_html("§6Gold §lBold")
    tree = to_component_tree("§6Gold §lBold")
    assert tree_to_html(tree) == html
"""

from .codes import ColorCode, StyleCode, color_hex, color_hex_from_code, style_declaration
from .config import DEFAULT_SETTINGS, ServerSettings, SettingsError, load_settings, read_settings
from .encoders import escape_html, render, to_component_tree, to_html, to_plain_text
from .models import MotdOutput, OutputKind, StyleState, TextRun
from .motd import get_motd
from .renderer import tree_to_html
from .scanner import scan

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "scan",
    "to_plain_text",
    "to_component_tree",
    "to_html",
    "tree_to_html",
    "render",
    "get_motd",
    # Code tables
    "ColorCode",
    "StyleCode",
    "color_hex",
    "color_hex_from_code",
    "style_declaration",
    # Data models
    "MotdOutput",
    "OutputKind",
    "StyleState",
    "TextRun",
    # Utilities
    "escape_html",
    "DEFAULT_SETTINGS",
    "ServerSettings",
    "load_settings",
    "read_settings",
    # Exceptions
    "SettingsError",
    # Version
    "__version__",
]
