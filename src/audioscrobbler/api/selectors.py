"""Where: src/audioscrobbler/api/selectors.py
What: Parse XML responses and select nodes with CSS-like tag paths.
Why: Result fields are declared as selectors such as ``"toptags > tag > name"``.

Grammar: tag names separated by whitespace (descendant) or ``>`` (direct
child). ``*`` matches any tag. The first step matches the document root or
any of its descendants.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Literal, final

from audioscrobbler.errors import MalformedResponseError

Combinator = Literal["descendant", "child"]

_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r">|[^\s>]+")
_WILDCARD: Final[str] = "*"


@final
@dataclass(frozen=True, slots=True)
class Step:
    """One tag test and the combinator linking it to the previous step."""

    combinator: Combinator
    tag: str

    def matches(self, element: ET.Element) -> bool:
        return self.tag == _WILDCARD or element.tag == self.tag


@lru_cache(maxsize=256)
def compile_selector(selector: str) -> tuple[Step, ...]:
    """Tokenize ``selector`` into steps.

    Raises:
        ValueError: If the selector is empty or a ``>`` is not between two tags.
    """

    tokens: list[str] = _TOKEN_PATTERN.findall(selector)
    if not tokens:
        raise ValueError("Selector must not be empty")

    steps: list[Step] = []
    pending: Combinator = "descendant"
    expect_tag = True
    for token in tokens:
        if token == ">":
            if expect_tag:
                raise ValueError(f"Dangling '>' in selector: {selector!r}")
            pending = "child"
            expect_tag = True
            continue
        steps.append(Step(pending, token))
        pending = "descendant"
        expect_tag = False

    if expect_tag:
        raise ValueError(f"Selector ends with '>': {selector!r}")
    return tuple(steps)


def parse_document(text: str) -> ET.Element:
    """Parse response text into an element tree root.

    Raises:
        MalformedResponseError: If the text is not well-formed XML.
    """

    try:
        return ET.fromstring(text.lstrip())
    except ET.ParseError as exc:
        raise MalformedResponseError(f"Response is not well-formed XML: {exc}") from exc


def select(selector: str, root: ET.Element) -> list[ET.Element]:
    """Return the elements matched by ``selector``, unique and in document order."""

    steps = compile_selector(selector)
    order = {id(element): index for index, element in enumerate(root.iter())}

    first = steps[0]
    current = [element for element in root.iter() if first.matches(element)]
    for step in steps[1:]:
        found: dict[int, ET.Element] = {}
        for node in current:
            if step.combinator == "child":
                candidates = list(node)
            else:
                candidates = [element for element in node.iter() if element is not node]
            for candidate in candidates:
                if step.matches(candidate):
                    found[id(candidate)] = candidate
        current = sorted(found.values(), key=lambda element: order[id(element)])
    return current


def text_of(element: ET.Element) -> str:
    """Return the stripped text content of ``element`` and its descendants."""

    return "".join(element.itertext()).strip()


def field_key(selector: str) -> str:
    """Derive a record label from a selector: ``"artist > name"`` -> ``"artist_name"``."""

    return re.sub(r"\s+", "", selector.replace(">", "_"))


__all__ = [
    "Step",
    "compile_selector",
    "field_key",
    "parse_document",
    "select",
    "text_of",
]
