"""Tests for the CSS-like selector evaluator."""

from __future__ import annotations

import pytest

from audioscrobbler.api.selectors import (
    Step,
    compile_selector,
    field_key,
    parse_document,
    select,
    text_of,
)
from audioscrobbler.errors import MalformedResponseError

DOCUMENT = """
<lfm status="ok">
  <artist>
    <name>Cher</name>
    <similar>
      <artist><name>Madonna</name></artist>
      <artist><name>Sonny &amp; Cher</name></artist>
    </similar>
  </artist>
</lfm>
"""


def test_compile_selector_combinators() -> None:
    assert compile_selector("a > b c") == (
        Step("descendant", "a"),
        Step("child", "b"),
        Step("descendant", "c"),
    )
    assert compile_selector("a>b") == (Step("descendant", "a"), Step("child", "b"))


@pytest.mark.parametrize("selector", ["", "   ", "> a", "a >", "a > > b"])
def test_compile_selector_rejects_invalid(selector: str) -> None:
    with pytest.raises(ValueError):
        _ = compile_selector(selector)


def test_descendant_selector_matches_all_levels_in_document_order() -> None:
    root = parse_document(DOCUMENT)

    names = [text_of(node) for node in select("artist name", root)]

    assert names == ["Cher", "Madonna", "Sonny & Cher"]


def test_child_selector_from_root() -> None:
    root = parse_document(DOCUMENT)

    assert [text_of(node) for node in select("lfm > artist > name", root)] == ["Cher"]


def test_first_step_includes_root() -> None:
    root = parse_document("<token>abc123</token>")

    assert [text_of(node) for node in select("token", root)] == ["abc123"]


def test_wildcard_step() -> None:
    root = parse_document(DOCUMENT)

    assert len(select("similar > *", root)) == 2


def test_text_of_empty_node_is_empty_string() -> None:
    root = parse_document("<lfm><mbid/></lfm>")

    assert text_of(select("mbid", root)[0]) == ""


def test_parse_document_rejects_invalid_xml() -> None:
    with pytest.raises(MalformedResponseError):
        _ = parse_document("<lfm><unclosed></lfm>")


@pytest.mark.parametrize(
    ("selector", "expected"),
    [
        ("artist > name", "artist_name"),
        ("toptags > tag > count", "toptags_tag_count"),
        ("artist name", "artistname"),
        ("token", "token"),
    ],
)
def test_field_key(selector: str, expected: str) -> None:
    assert field_key(selector) == expected
