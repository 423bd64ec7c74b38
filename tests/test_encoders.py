import pytest

from motd_markup.codes import StyleCode
from motd_markup.encoders import (
    escape_html,
    render,
    to_component_tree,
    to_html,
    to_plain_text,
)
from motd_markup.models import MotdOutput, OutputKind

BOLD = StyleCode.BOLD.declaration
RESET = StyleCode.RESET.declaration


class TestPlainText:
    def test_strips_codes(self):
        assert to_plain_text("§aHello") == "Hello"

    def test_keeps_whitespace_and_line_breaks(self):
        assert to_plain_text("§6 Gold\n§lBold \t") == " Gold\nBold \t"

    def test_keeps_invalid_codes(self):
        assert to_plain_text("§x§aA§") == "§xA§"

    def test_empty_string(self):
        assert to_plain_text("") == ""

    def test_uppercase_codes(self):
        assert to_plain_text("§AOne§LTwo§RThree") == "OneTwoThree"

    def test_leaves_no_code_behind(self):
        assert to_plain_text("§§aa") == ""
        assert to_plain_text("§§§lbb") == ""

    def test_no_escaping(self):
        assert to_plain_text("§c<b>&") == "<b>&"


class TestEscapeHtml:
    def test_reserved_characters(self):
        assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&#39;"

    def test_line_breaks(self):
        assert escape_html("one\ntwo\r\nthree") == "one<br/>two<br/>three"

    def test_lone_carriage_return_is_a_line_break(self):
        assert escape_html("one\rtwo\r\rthree") == "one<br/>two<br/><br/>three"
        assert to_html("§aone\rtwo") == '<span style="color:#55FF55;">one<br/>two</span>'

    def test_plain_text_unchanged(self):
        assert escape_html("Hello") == "Hello"


class TestComponentTree:
    def test_single_colored_run(self):
        assert to_component_tree("§aHello") == {
            "text": "",
            "extra": [{"text": "Hello", "color": "#55FF55"}],
        }

    def test_empty_string(self):
        assert to_component_tree("") == {"text": "", "extra": []}

    def test_plain_text(self):
        assert to_component_tree("A<B") == {"text": "", "extra": [{"text": "A<B"}]}

    def test_style_flag_keyed_by_declaration(self):
        tree = to_component_tree("§lBold §rNormal")

        assert tree == {
            "text": "",
            "extra": [
                {"text": "Bold ", BOLD: True},
                {"text": "Normal", RESET: True},
            ],
        }

    def test_canonical_style_flags(self):
        tree = to_component_tree("§lBold §rNormal", canonical_flags=True)

        assert tree["extra"] == [
            {"text": "Bold ", "bold": True},
            {"text": "Normal", "reset": True},
        ]

    def test_field_order(self):
        tree = to_component_tree("§e§lHi")

        assert list(tree) == ["text", "extra"]
        assert list(tree["extra"][0]) == ["text", BOLD, "color"]

    def test_runs_keep_source_order(self):
        tree = to_component_tree("§4AA§9BB")

        assert [node["text"] for node in tree["extra"]] == ["AA", "BB"]
        assert [node["color"] for node in tree["extra"]] == ["#AA0000", "#5555FF"]
        assert all(BOLD not in node for node in tree["extra"])


class TestHtml:
    def test_colored_run(self):
        assert to_html("§aHello") == '<span style="color:#55FF55;">Hello</span>'

    def test_escapes_plain_text_without_span(self):
        assert to_html("A<B") == "A&lt;B"

    def test_empty_string(self):
        assert to_html("") == ""

    def test_style_without_color_omits_color_segment(self):
        assert to_html("§lBold §rNormal") == (
            f'<span style="{BOLD}">Bold </span>' f'<span style="{RESET}">Normal</span>'
        )

    def test_color_and_style(self):
        assert to_html("§a§lHi") == f'<span style="color:#55FF55;{BOLD}">Hi</span>'

    def test_newlines_and_escaping_inside_span(self):
        assert to_html("§cA&\nB") == '<span style="color:#FF5555;">A&amp;<br/>B</span>'

    def test_unstyled_prefix_then_styled(self):
        assert to_html("Hi §6there") == 'Hi <span style="color:#FFAA00;">there</span>'


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (OutputKind.PLAIN_TEXT, "Hello"),
        (OutputKind.HTML, '<span style="color:#55FF55;">Hello</span>'),
        (OutputKind.COMPONENT_TREE, {"text": "", "extra": [{"text": "Hello", "color": "#55FF55"}]}),
    ],
)
def test_render_dispatches_on_kind(kind: OutputKind, expected):
    assert render("§aHello", kind) == MotdOutput(kind, expected)
