"""File system helpers."""

from __future__ import annotations

import os

DIR_MODE = 0o744


def file_exists(filename: str) -> bool:
    """Return True if ``filename`` exists."""
    try:
        os.stat(filename)
    except OSError:
        return False
    return True


def is_directory(location: str) -> bool:
    """Return True if ``location`` is an existing directory."""
    return os.path.isdir(location)


def remove_file_if_exist(*filenames: str) -> None:
    """Remove each existing file or empty directory; missing ones are skipped."""
    for filename in filenames:
        if not file_exists(filename):
            continue
        if os.path.isdir(filename) and not os.path.islink(filename):
            os.rmdir(filename)
        else:
            os.remove(filename)


def create_dir_if_not_exist(*dirs: str) -> None:
    """Create each directory, with any missing parents."""
    for directory in dirs:
        if len(directory) > 1 and directory.endswith("/"):
            directory = directory[:-1]
        parent = os.path.dirname(directory)
        if parent and parent not in ("/", directory) and not file_exists(parent):
            try:
                create_dir_if_not_exist(parent)
            except OSError:
                pass
        if not file_exists(directory):
            try:
                os.mkdir(directory, DIR_MODE)
            except OSError as error:
                raise OSError(f"failed to create dir {directory} {error}") from error