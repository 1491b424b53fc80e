"""Inspection of the call stack."""

from __future__ import annotations

import inspect
import os
from types import FrameType


def _ancestor(frame: FrameType | None, steps: int) -> FrameType | None:
    for _ in range(max(steps, 0)):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


def _describe(frame: FrameType) -> tuple[str, str, int]:
    return frame.f_code.co_filename, frame.f_code.co_name, frame.f_lineno


def caller_info(caller_index: int) -> tuple[str, str, int]:
    """Return (filename, function name, line) of a frame on the stack.

    Index 1 is this function itself, 2 its caller, and so on.
    """
    frame = _ancestor(inspect.currentframe(), caller_index - 1)
    if frame is None:
        raise ValueError(f"no caller at index {caller_index}")
    return _describe(frame)


def caller_directory(caller_index: int) -> str:
    """Return the directory, with a trailing separator, of a caller's source file."""
    filename, _, _ = caller_info(caller_index)
    parent, _ = os.path.split(filename)
    return os.path.join(parent, "")


def discover_caller(
    offset: int, max_depth: int, *ignore_files: str
) -> tuple[str, str, int]:
    """Return the first caller between ``offset`` and ``max_depth`` whose file is not ignored.

    Files are ignored by suffix; if every frame is ignored the deepest one
    examined is returned.
    """
    current = inspect.currentframe()
    found: FrameType | None = None
    for index in range(offset, max_depth):
        frame = _ancestor(current, index - 1)
        if frame is None:
            break
        found = frame
        if not frame.f_code.co_filename.endswith(ignore_files or ("\0",)):
            break
    if found is None:
        raise ValueError(f"no caller between {offset} and {max_depth}")
    return _describe(found)