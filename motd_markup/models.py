"""Data models for motd-markup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class OutputKind(Enum):
    """Encodings a MOTD string can be rendered into.

    Attributes:
        COMPONENT_TREE: Nested chat-component mapping.
        HTML: HTML fragment.
        PLAIN_TEXT: Text with every formatting code removed.
    """

    COMPONENT_TREE = "json"
    HTML = "html"
    PLAIN_TEXT = "plain"


@dataclass(frozen=True)
class StyleState:
    """Color and style active at a point in the source string.

    Attributes:
        color: Hex value of the active color, or an empty string when unset.
        style: Declaration of the active style, or an empty string when unset.
    """

    color: str = ""
    style: str = ""


@dataclass(frozen=True)
class TextRun:
    """A span of literal text and the state it was emitted under.

    Attributes:
        text: Literal text, never empty when produced by the scanner.
        state: Snapshot of the color and style registers.
    """

    text: str
    state: StyleState


@dataclass(frozen=True)
class MotdOutput:
    """A rendered MOTD tagged with the encoding it holds.

    Attributes:
        kind: Encoding of `value`.
        value: A dict for `OutputKind.COMPONENT_TREE`, a string otherwise.
    """

    kind: OutputKind
    value: Any
