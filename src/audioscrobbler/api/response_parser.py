"""Where: src/audioscrobbler/api/response_parser.py
What: Detect service errors and reshape XML responses into records.
Why: Every generated binding shares one extraction and transposition routine.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from typing import Final, TypeAlias

from audioscrobbler.errors import MalformedResponseError, ServiceError
from audioscrobbler.platform.logging import logger

from .registry import MethodDescriptor
from .selectors import field_key, parse_document, select, text_of

Record: TypeAlias = str | tuple[str, ...]

_ERROR_SELECTOR: Final[str] = "error"


def _service_error_from(root: ET.Element) -> ServiceError | None:
    nodes = select(_ERROR_SELECTOR, root)
    if not nodes:
        return None
    node = nodes[0]
    raw_code = node.get("code")
    code = int(raw_code) if raw_code is not None and raw_code.strip().isdecimal() else None
    return ServiceError(text_of(node), code=code)


def find_service_error(text: str) -> ServiceError | None:
    """Return the error carried by ``text`` or ``None``.

    Unparseable text yields ``None``; it carries no service error.
    """

    try:
        root = parse_document(text)
    except MalformedResponseError:
        return None
    return _service_error_from(root)


def values_for(selector: str, root: ET.Element) -> list[str]:
    """Text of every node matched by ``selector``, in document order."""

    return [text_of(node) for node in select(selector, root)]


def parse_response(
    text: str,
    descriptor: MethodDescriptor,
    *,
    strict: bool = False,
) -> list[Record]:
    """Parse ``text`` and shape it into records for ``descriptor``.

    Single-selector descriptors yield plain strings; others yield tuples with
    one field per selector, paired by position.

    Args:
        text: Raw response body.
        descriptor: Method whose selectors define the record fields.
        strict: Raise instead of truncating when selectors match different
            numbers of nodes.

    Raises:
        ServiceError: If the response contains an ``<error>`` node.
        MalformedResponseError: If the text is not XML, or ``strict`` is set
            and the selector columns are ragged.
    """

    root = parse_document(text)
    error = _service_error_from(root)
    if error is not None:
        raise error

    columns = [values_for(selector, root) for selector in descriptor.selectors]
    if not columns:
        return []
    if len(columns) == 1:
        return list(columns[0])

    lengths = {len(column) for column in columns}
    if len(lengths) > 1:
        counts = ", ".join(
            f"{selector}={len(column)}" for selector, column in zip(descriptor.selectors, columns)
        )
        if strict:
            raise MalformedResponseError(
                f"{descriptor.wire_name}: selectors matched different node counts ({counts})"
            )
        logger.warning(
            "%s: selectors matched different node counts (%s); truncating to %d records",
            descriptor.wire_name,
            counts,
            min(lengths),
        )
    return list(zip(*columns))


def label_records(
    records: Sequence[Record],
    descriptor: MethodDescriptor,
) -> list[dict[str, str]]:
    """Attach field keys derived from the selectors to each record."""

    keys = [field_key(selector) for selector in descriptor.selectors]
    labeled: list[dict[str, str]] = []
    for record in records:
        fields = (record,) if isinstance(record, str) else record
        labeled.append(dict(zip(keys, fields)))
    return labeled


__all__ = [
    "Record",
    "find_service_error",
    "label_records",
    "parse_response",
    "values_for",
]
