"""Encoders turning markup strings into plain text, component trees and HTML."""

from __future__ import annotations

from typing import Any

from .codes import StyleCode
from .constants import CODE_PATTERN
from .models import MotdOutput, OutputKind, TextRun
from .scanner import scan

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
        "\n": "<br/>",
    }
)


def to_plain_text(text: str) -> str:
    """Remove every formatting code from a markup string.

    Removal repeats until no code is left, so a marker left in front of a
    selector by an earlier removal (``"§§aa"``) is stripped as well.

    Args:
        text: Source string.

    Returns:
        str: The literal text, whitespace and line breaks untouched.

    Examples:
        to_plain_text("§aHello §lWorld")  # "Hello World"
    """
    stripped, removed = CODE_PATTERN.subn("", text)
    while removed:
        stripped, removed = CODE_PATTERN.subn("", stripped)
    return stripped


def escape_html(text: str) -> str:
    """Escape HTML-reserved characters and turn line breaks into ``<br/>``.

    ``\\r\\n``, ``\\n`` and a lone ``\\r`` each count as one line break.

    Examples:
        escape_html("A<B")  # "A&lt;B"
        escape_html("one\\ntwo")  # "one<br/>two"
    """
    return text.replace("\r\n", "\n").replace("\r", "\n").translate(_HTML_ESCAPES)


def _run_to_node(run: TextRun, canonical_flags: bool) -> dict[str, Any]:
    node: dict[str, Any] = {"text": run.text}
    if run.state.style:
        flag = run.state.style
        if canonical_flags:
            style = StyleCode.from_declaration(run.state.style)
            flag = style.flag if style else flag
        node[flag] = True
    if run.state.color:
        node["color"] = run.state.color
    return node


def to_component_tree(text: str, canonical_flags: bool = False) -> dict[str, Any]:
    """Build a chat-component tree from a markup string.

    Every run becomes one entry of the root's ``extra`` list with fields in the
    order ``text``, style flag, ``color``. The style flag is keyed by the
    style's declaration string (``"font-weight: bold;": True``); pass
    `canonical_flags` to key it by the component flag name (``"bold": True``)
    instead.

    Args:
        text: Source string.
        canonical_flags: Key style flags by canonical name rather than by
            declaration.

    Returns:
        dict[str, Any]: ``{"text": "", "extra": [...]}``. Text is not escaped.

    Examples:
        to_component_tree("§aHello")
        # {"text": "", "extra": [{"text": "Hello", "color": "#55FF55"}]}
    """
    return {
        "text": "",
        "extra": [_run_to_node(run, canonical_flags) for run in scan(text)],
    }


def run_to_html(run: TextRun) -> str:
    """Encode one run, wrapped in a span when it carries a color or a style."""
    escaped = escape_html(run.text)
    if not run.state.color and not run.state.style:
        return escaped

    color = f"color:{run.state.color};" if run.state.color else ""
    return f'<span style="{color}{run.state.style}">{escaped}</span>'


def to_html(text: str) -> str:
    """Render a markup string as an HTML fragment.

    Args:
        text: Source string.

    Returns:
        str: Escaped text; styled runs are wrapped in ``<span style="...">``.

    Examples:
        to_html("§aHello")  # '<span style="color:#55FF55;">Hello</span>'
        to_html("A<B")  # "A&lt;B"
    """
    return "".join(run_to_html(run) for run in scan(text))


def render(text: str, kind: OutputKind, canonical_flags: bool = False) -> MotdOutput:
    """Render a markup string into the requested encoding.

    Args:
        text: Source string.
        kind: Requested encoding.
        canonical_flags: Forwarded to `to_component_tree`.

    Returns:
        MotdOutput: Result tagged with `kind`.
    """
    if kind is OutputKind.COMPONENT_TREE:
        return MotdOutput(kind, to_component_tree(text, canonical_flags=canonical_flags))
    if kind is OutputKind.HTML:
        return MotdOutput(kind, to_html(text))
    return MotdOutput(kind, to_plain_text(text))
