"""
Write primitives for the BeerXML dialect.

Every function writes straight to an already-open text sink and never
opens or closes it. ``depth`` counts two-space indentation units.
Scalar tags are indented one unit deeper than the ``depth`` they are
given, and block bodies receive ``depth + 1``, which reproduces the
layout other brewing tools write: records four spaces inside their
container and fields eight.
"""

import html
import math
import re
from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Any, TextIO, TypeVar

from brewcalc.enums import BrewEnum
from brewcalc.exceptions import InvalidCharacterError

T = TypeVar("T")

INDENT = "  "

BlockWriter = Callable[[TextIO, int], None]

# Characters outside the XML 1.0 Char production.
_XML_ILLEGAL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def render(value: Any) -> str:
    """
    Text for a scalar value.

    Floats use the shortest digits that round-trip, in positional
    notation, with a trailing ``.0`` dropped (``5.0`` -> ``5``,
    ``1e-05`` -> ``0.00001``).

    Raises:
        InvalidCharacterError: If text holds a control character that XML
            cannot represent
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, BrewEnum):
        return _escape(value.value)
    if isinstance(value, float):
        return _render_float(value)
    if isinstance(value, int):
        return str(value)
    return _escape(str(value))


def _escape(text: str) -> str:
    if _XML_ILLEGAL.search(text):
        raise InvalidCharacterError(text)
    return html.escape(text, quote=False)


def _render_float(value: float) -> str:
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def indent(sink: TextIO, depth: int) -> None:
    sink.write(INDENT * depth)


def _write_line(sink: TextIO, depth: int, tag: str, value: Any) -> None:
    indent(sink, depth + 1)
    sink.write(f"<{tag}>{render(value)}</{tag}>\n")


def write_tag(sink: TextIO, depth: int, tag: str, value: Any) -> None:
    """Write a required field."""
    _write_line(sink, depth, tag, value)


def write_bool(sink: TextIO, depth: int, tag: str, value: bool) -> None:
    """Write a flag. Only ``true`` is ever written; absence means false."""
    if value:
        _write_line(sink, depth, tag, value)


def write_opt(sink: TextIO, depth: int, tag: str, value: Any | None) -> None:
    """Write an optional field, or nothing when it is ``None``."""
    if value is not None:
        _write_line(sink, depth, tag, value)


def write_block(sink: TextIO, depth: int, tag: str, body: BlockWriter) -> None:
    """Write ``<TAG>``, then ``body`` one level deeper, then ``</TAG>``."""
    indent(sink, depth)
    sink.write(f"<{tag}>\n")
    body(sink, depth + 1)
    indent(sink, depth)
    sink.write(f"</{tag}>\n")


def write_map(
    sink: TextIO,
    depth: int,
    tag: str,
    records: Iterable[T],
    element_writer: Callable[[TextIO, T, int], None],
) -> None:
    """
    Write a container block holding one element per record.

    Records are written in iteration order. An empty collection still
    produces the opening and closing tags.
    """

    def body(sink: TextIO, depth: int) -> None:
        for record in records:
            element_writer(sink, record, depth + 1)

    write_block(sink, depth, tag, body)
