"""Lookup tables for section-sign color and style codes."""

from __future__ import annotations

from enum import Enum

from .constants import HEX_COLOR_PATTERN


class ColorCode(Enum):
    """The sixteen fixed colors, keyed by selector character.

    Attributes:
        selector: Lowercase hexadecimal character naming the color.
        hex: ``#RRGGBB`` value rendered for the color.

    Examples:
        ColorCode.GOLD.hex  # "#FFAA00"
        ColorCode.from_selector("6")  # ColorCode.GOLD
    """

    BLACK = ("0", "#000000")
    DARK_BLUE = ("1", "#0000AA")
    DARK_GREEN = ("2", "#00AA00")
    DARK_AQUA = ("3", "#00AAAA")
    DARK_RED = ("4", "#AA0000")
    DARK_PURPLE = ("5", "#AA00AA")
    GOLD = ("6", "#FFAA00")
    GRAY = ("7", "#AAAAAA")
    DARK_GRAY = ("8", "#555555")
    BLUE = ("9", "#5555FF")
    GREEN = ("a", "#55FF55")
    AQUA = ("b", "#55FFFF")
    RED = ("c", "#FF5555")
    LIGHT_PURPLE = ("d", "#FF55FF")
    YELLOW = ("e", "#FFFF55")
    WHITE = ("f", "#FFFFFF")

    def __init__(self, selector: str, hex_value: str):
        self.selector = selector
        self.hex = hex_value

    @classmethod
    def from_selector(cls, selector: str) -> ColorCode | None:
        return _COLORS_BY_SELECTOR.get(selector.casefold())

    @classmethod
    def from_name(cls, name: str) -> ColorCode | None:
        return cls.__members__.get(name.upper())


class StyleCode(Enum):
    """Text styles, keyed by selector character.

    Attributes:
        selector: Lowercase letter naming the style.
        declaration: CSS-like declaration emitted for the style.
        flag: Canonical chat-component flag name.
    """

    OBFUSCATED = ("k", "obfuscated;", "obfuscated")
    BOLD = ("l", "font-weight: bold;", "bold")
    STRIKETHROUGH = ("m", "text-decoration: line-through;", "strikethrough")
    UNDERLINE = ("n", "text-decoration: underline;", "underlined")
    ITALIC = ("o", "font-style: italic;", "italic")
    # Neutralizes color visually; the tracked color is left alone.
    RESET = (
        "r",
        "color: inherit;text-decoration: none !important;"
        "font-weight:normal!important;font-style: normal!important;",
        "reset",
    )

    def __init__(self, selector: str, declaration: str, flag: str):
        self.selector = selector
        self.declaration = declaration
        self.flag = flag

    @classmethod
    def from_selector(cls, selector: str) -> StyleCode | None:
        return _STYLES_BY_SELECTOR.get(selector.casefold())

    @classmethod
    def from_declaration(cls, declaration: str) -> StyleCode | None:
        return _STYLES_BY_DECLARATION.get(declaration)

    @classmethod
    def from_flag(cls, flag: str) -> StyleCode | None:
        return _STYLES_BY_FLAG.get(flag)


_COLORS_BY_SELECTOR = {color.selector: color for color in ColorCode}
_COLORS_BY_CODE = dict(enumerate(ColorCode))
_STYLES_BY_SELECTOR = {style.selector: style for style in StyleCode}
_STYLES_BY_DECLARATION = {style.declaration: style for style in StyleCode}
_STYLES_BY_FLAG = {style.flag: style for style in StyleCode}


def is_color_selector(selector: str) -> bool:
    return selector.casefold() in _COLORS_BY_SELECTOR


def is_style_selector(selector: str) -> bool:
    return selector.casefold() in _STYLES_BY_SELECTOR


def color_hex(selector: str) -> str:
    """Return the hex value for a color selector.

    Args:
        selector: Single selector character, matched case-insensitively.

    Returns:
        str: ``#RRGGBB`` for the color, or white's hex for anything that is
            not a color selector.

    Examples:
        color_hex("a")  # "#55FF55"
        color_hex("z")  # "#FFFFFF"
    """
    color = ColorCode.from_selector(selector)
    return (color or ColorCode.WHITE).hex


def color_hex_from_code(code: int) -> str:
    """Return the hex value for a numeric color code (0-15), white otherwise."""
    return _COLORS_BY_CODE.get(code, ColorCode.WHITE).hex


def style_declaration(selector: str) -> str:
    """Return the declaration for a style selector.

    Args:
        selector: Single selector character, matched case-insensitively.

    Returns:
        str: The style's declaration, or an empty string when the selector
            does not name a style. The empty string means "no active style".

    Examples:
        style_declaration("L")  # "font-weight: bold;"
        style_declaration("x")  # ""
    """
    style = StyleCode.from_selector(selector)
    return style.declaration if style else ""


def component_color(value: str) -> str:
    """Return the hex value of a component tree ``color`` field.

    Accepts a ``#RRGGBB`` string or a color name such as ``"dark_red"``.

    Examples:
        component_color("#55FF55")  # "#55FF55"
        component_color("gold")  # "#FFAA00"
        component_color("url(x)")  # ""
    """
    if HEX_COLOR_PATTERN.fullmatch(value):
        return value
    color = ColorCode.from_name(value)
    return color.hex if color else ""


def flag_declaration(key: str) -> str:
    """Return the declaration for a component style flag key.

    The key may be the declaration itself or the canonical flag name, so both
    shapes produced by the component-tree encoder are understood. Anything
    else gives an empty string.
    """
    style = StyleCode.from_declaration(key) or StyleCode.from_flag(key)
    return style.declaration if style else ""
