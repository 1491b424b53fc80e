"""Log message records and content types by file extension."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

JSON_MIME_TYPE = "text/json"
CSV_MIME_TYPE = "text/csv"
TSV_MIME_TYPE = "text/tsv"
TEXT_MIME_TYPE = "text/sql"

FILE_EXTENSION_MIME_TYPE: dict[str, str] = {
    "json": JSON_MIME_TYPE,
    "csv": CSV_MIME_TYPE,
    "tsv": TSV_MIME_TYPE,
    "sql": TEXT_MIME_TYPE,
    "html": "text/html",
    "js": "text/javascript",
    "jpg": "image/jpeg",
    "png": "image/png",
}


@dataclass
class LogMessage:
    """A log message with its type."""

    message_type: str
    message: Any


@dataclass
class LogMessages:
    """An ordered collection of log messages."""

    messages: list[LogMessage] = field(default_factory=list)

    def add(self, message_type: str, message: Any) -> LogMessage:
        """Append a message and return it."""
        entry = LogMessage(message_type, message)
        self.messages.append(entry)
        return entry


def mime_type_for(extension: str) -> str | None:
    """Return the content type for a file extension, or None if unknown."""
    return FILE_EXTENSION_MIME_TYPE.get(extension.lstrip(".").lower())