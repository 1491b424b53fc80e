"""Helpers for recognising and converting JSON text."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any, NoReturn

_WHITESPACE = " \t\n\r"


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"invalid JSON literal: {name}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _read_source(source: Any) -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("utf-8")
    read = getattr(source, "read", None)
    if callable(read):
        content = read()
        if isinstance(content, (bytes, bytearray)):
            return bytes(content).decode("utf-8")
        return content
    raise TypeError(f"unsupported type: {type(source).__name__}")


def _decode_first(text: str) -> Any:
    """Decode the first JSON value in ``text``, ignoring what follows it."""
    start = len(text) - len(text.lstrip(_WHITESPACE))
    value, _ = _DECODER.raw_decode(text, start)
    return value


def is_complete_json(candidate: str) -> bool:
    """Return True if ``candidate`` is exactly one valid JSON value."""
    try:
        json.loads(candidate, parse_constant=_reject_constant)
    except ValueError:
        return False
    return True


def is_structured_json(candidate: str) -> bool:
    """Return True if ``candidate`` is a valid JSON object or array."""
    candidate = candidate.strip("\n \t\r")
    if not candidate:
        return False
    curly_start, curly_end = candidate.count("{"), candidate.count("}")
    square_start, square_end = candidate.count("["), candidate.count("]")
    if curly_start != curly_end or square_start != square_end:
        return False
    if curly_start + square_start == 0:
        return False
    wrapped = (candidate.startswith("{") and candidate.endswith("}")) or (
        candidate.startswith("[") and candidate.endswith("]")
    )
    return wrapped and is_complete_json(candidate)


def _multiline_content(text: str) -> list[str]:
    text = text.strip()
    if not text:
        return []
    return [line for line in text.split("\n") if line.strip(" \r")]


def is_new_line_delimited_json(candidate: str) -> bool:
    """Return True if the first two non-blank lines are JSON structures."""
    lines = _multiline_content(candidate)
    if len(lines) <= 1:
        return False
    return is_structured_json(lines[0]) and is_structured_json(lines[1])


def new_line_delimited_json(candidate: str) -> list[Any]:
    """Decode every non-blank line of ``candidate`` as JSON."""
    return [_decode_first(line) for line in _multiline_content(candidate)]


def json_to_interface(source: Any) -> Any:
    """Decode text, bytes or a readable object; newline-delimited input gives a list."""
    text = _read_source(source)
    if is_new_line_delimited_json(text):
        return new_line_delimited_json(text)
    return _decode_first(text)


def json_to_map(source: Any) -> dict[str, Any]:
    """Decode a JSON object from text, bytes or a readable object."""
    value = _decode_first(_read_source(source))
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"expected JSON object, got {type(value).__name__}")
    return value


def json_to_slice(source: Any) -> list[Any]:
    """Decode a JSON array from text, bytes or a readable object."""
    value = _decode_first(_read_source(source))
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected JSON array, got {type(value).__name__}")
    return value


def _is_structure(source: Any) -> bool:
    if dataclasses.is_dataclass(source) and not isinstance(source, type):
        return True
    return isinstance(source, (Mapping, list, tuple))


def _encodable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"unsupported type: {type(value).__name__}")


def _prepare(source: Any) -> tuple[Any, bool]:
    if source is None:
        raise ValueError("source was nil")
    if not _is_structure(source):
        raise TypeError(f"unsupported type: {type(source).__name__}")
    if isinstance(source, Mapping):
        return dict(source), True
    if isinstance(source, (list, tuple)):
        return source, False
    return dataclasses.asdict(source), False


def as_json_text(source: Any) -> str:
    """Encode a mapping, sequence or dataclass as compact JSON ending in a newline."""
    data, sort_keys = _prepare(source)
    text = json.dumps(
        data,
        separators=(",", ":"),
        ensure_ascii=False,
        sort_keys=sort_keys,
        default=_encodable,
    )
    return text + "\n"


def as_indent_json_text(source: Any) -> str:
    """Encode a mapping, sequence or dataclass as tab-indented JSON."""
    data, sort_keys = _prepare(source)
    return json.dumps(
        data,
        indent="\t",
        separators=(",", ": "),
        ensure_ascii=False,
        sort_keys=sort_keys,
        default=_encodable,
    )


class AnyJSONType(str):
    """Raw JSON text of any type, decoded on demand."""

    def value(self) -> Any:
        """Decode the held JSON text."""
        return json.loads(self)

    def to_json(self) -> str:
        """Return the raw JSON text, an empty string literal when unset."""
        return str(self) if self else '""'