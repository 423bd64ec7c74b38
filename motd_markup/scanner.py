"""Tokenizing section-sign markup into styled text runs."""

from __future__ import annotations

from .codes import color_hex, is_color_selector, style_declaration
from .constants import CODE_PATTERN
from .models import StyleState, TextRun


def scan(text: str, state: StyleState = StyleState()) -> list[TextRun]:
    """Split a markup string into runs of literal text.

    Each code updates either the color or the style register, chosen by the
    captured selector character. Registers persist until another code of the
    same kind replaces them, so a style code never clears the color and vice
    versa. A marker that is not followed by a valid selector stays in the
    literal text.

    Args:
        text: Source string, possibly containing ``§`` formatting codes.
        state: Registers in effect before the first character; empty by
            default.

    Returns:
        list[TextRun]: Runs in source order. Empty spans between adjacent codes
            are not emitted.

    Examples:
        scan("§aHello")  # [TextRun("Hello", StyleState(color="#55FF55"))]
        scan("§lBold §rNormal")  # two runs, the second with the reset style
    """
    runs: list[TextRun] = []
    color = state.color
    style = state.style
    position = 0

    for match in CODE_PATTERN.finditer(text):
        literal = text[position : match.start()]
        if literal:
            runs.append(TextRun(literal, StyleState(color, style)))

        selector = match.group(1).casefold()
        if is_color_selector(selector):
            color = color_hex(selector)
        else:
            style = style_declaration(selector)

        position = match.end()

    literal = text[position:]
    if literal:
        runs.append(TextRun(literal, StyleState(color, style)))

    return runs
