"""Rendering chat-component trees back into HTML."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from .codes import color_hex, component_color, flag_declaration, style_declaration
from .constants import MARKER
from .encoders import run_to_html
from .models import StyleState
from .scanner import scan


def _style_for_key(key: str) -> str:
    if key.startswith(MARKER):
        return style_declaration(key[1:])
    return ""


def _node_state(node: Mapping[str, Any], state: StyleState) -> StyleState:
    # Component fields style the whole node, wherever they sit in it.
    for key, value in node.items():
        if key == "color" and isinstance(value, str):
            state = replace(state, color=component_color(value) or state.color)
        elif value is True and flag_declaration(str(key)):
            state = replace(state, style=flag_declaration(str(key)))
    return state


def _render_value(value: Any, state: StyleState) -> str:
    # bool is an int subclass but carries no text
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (str, int, float)):
        return "".join(run_to_html(run) for run in scan(str(value), state))
    if isinstance(value, Mapping):
        return _render_node(value, state)
    if isinstance(value, (list, tuple)):
        return "".join(_render_value(item, state) for item in value)
    return ""


def _render_node(node: Mapping[str, Any], state: StyleState) -> str:
    html_parts: list[str] = []
    state = _node_state(node, state)

    for key, value in node.items():
        key = str(key)
        if len(key) == 1:
            state = replace(state, color=color_hex(key))
        elif len(key) == 2:
            state = replace(state, style=_style_for_key(key))
        elif key != "color":
            html_parts.append(_render_value(value, state))

    return "".join(html_parts)


def tree_to_html(node: Mapping[str, Any]) -> str:
    """Render a chat-component tree as HTML.

    A node's ``color`` field (``#RRGGBB`` or a color name) and its ``true``
    style flags (keyed by declaration or by canonical name) set the node's
    color and style registers. The remaining fields are then visited in
    insertion order:

    - a one-character key is a color selector (unknown selectors give white);
    - a two-character key is a style selector, written ``§x``; any other
      two-character key clears the active style;
    - every other key holds payload. Strings and numbers are encoded like
      `to_html` would, starting from the active registers, so codes inside
      them still apply. Mappings and lists are rendered recursively and
      inherit the registers. Anything else contributes nothing.

    A tree built by `to_component_tree` renders exactly as `to_html` renders
    the markup it came from.

    Args:
        node: Component mapping, typically parsed from JSON with key order
            preserved.

    Returns:
        str: HTML fragment. Non-mapping input renders as an empty string.

    Examples:
        tree_to_html({"c": None, "text": "Hi"})
        # '<span style="color:#FF5555;">Hi</span>'
        tree_to_html(to_component_tree("§a§lHello")) == to_html("§a§lHello")
    """
    if not isinstance(node, Mapping):
        return ""
    return _render_node(node, StyleState())
