from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st
from motd_markup.constants import CODE_PATTERN, MARKER
from motd_markup.encoders import escape_html, to_component_tree, to_html, to_plain_text
from motd_markup.renderer import tree_to_html
from motd_markup.scanner import scan

markup_strategy = st.text(alphabet="§§§0aAfFlLrRkxz <&\n'") | st.text()
plain_strategy = st.text().map(lambda text: text.replace(MARKER, ""))


@given(plain_strategy)
def test_markup_free_text_passes_through(text: str):
    assert to_plain_text(text) == text
    assert to_html(text) == escape_html(text)
    expected_extra = [{"text": text}] if text else []
    assert to_component_tree(text) == {"text": "", "extra": expected_extra}


@given(markup_strategy)
def test_plain_text_never_contains_a_code(text: str):
    assert CODE_PATTERN.search(to_plain_text(text)) is None


@given(markup_strategy)
def test_plain_text_is_idempotent(text: str):
    once = to_plain_text(text)
    assert to_plain_text(once) == once


@given(markup_strategy)
def test_runs_are_the_text_between_codes(text: str):
    runs = scan(text)

    assert all(run.text for run in runs)
    assert "".join(run.text for run in runs) == CODE_PATTERN.sub("", text)


@given(markup_strategy)
def test_tree_has_one_node_per_run(text: str):
    tree = to_component_tree(text)

    assert tree["text"] == ""
    assert [node["text"] for node in tree["extra"]] == [run.text for run in scan(text)]


@given(markup_strategy)
def test_encoders_are_deterministic(text: str):
    assert to_html(text) == to_html(text)
    assert to_component_tree(text) == to_component_tree(text)


json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.floats(allow_nan=False) | st.text(),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(alphabet="§abl xtext", max_size=5), children, max_size=4),
    max_leaves=20,
)


@given(st.dictionaries(st.text(max_size=6), json_values, max_size=6))
def test_tree_renderer_is_total(tree: dict):
    assert isinstance(tree_to_html(tree), str)


@given(markup_strategy, st.booleans())
def test_component_tree_renders_back_to_the_same_html(text: str, canonical_flags: bool):
    tree = to_component_tree(text, canonical_flags=canonical_flags)

    assert tree_to_html(tree) == to_html(text)
