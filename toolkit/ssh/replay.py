"""Recorded shell conversations: stdin commands and the stdout they produced."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from toolkit.fsutil import create_dir_if_not_exist, file_exists

_STDIN_SUFFIX = "_000.stdin"
_MAX_ENTRIES = 1000


@dataclass
class ReplayCommand:
    """One stdin command with the stdout answers recorded for it, in order."""

    stdin: str
    index: int = 0
    stdout: list[str] = field(default_factory=list)
    error: str = ""


@dataclass
class ReplayCommands:
    """Replay commands grouped by stdin, kept in registration order."""

    base_dir: str
    commands: dict[str, ReplayCommand] = field(default_factory=dict)

    @property
    def keys(self) -> list[str]:
        """The stdin commands in the order they were first registered."""
        return list(self.commands)

    def register(self, stdin: str, stdout: str) -> None:
        """Record ``stdout`` as the next answer to ``stdin``."""
        command = self.commands.setdefault(stdin, ReplayCommand(stdin))
        command.stdout.append(stdout)

    def next(self, stdin: str) -> str:
        """Return the next recorded answer to ``stdin``, or "" once exhausted.

        Raises KeyError for a command that was never recorded.
        """
        try:
            command = self.commands[stdin]
        except KeyError:
            raise KeyError(f"no recorded command: {stdin!r}") from None
        if command.index < len(command.stdout):
            answer = command.stdout[command.index]
            command.index += 1
            return answer
        return ""

    def store(self) -> None:
        """Write every command and its answers as files into the base directory."""
        create_dir_if_not_exist(self.base_dir)
        base = Path(self.base_dir)
        for number, command in enumerate(self.commands.values(), 1):
            prefix = f"{number:03d}"
            (base / (prefix + _STDIN_SUFFIX)).write_bytes(command.stdin.encode("utf-8"))
            for answer_number, answer in enumerate(command.stdout, 1):
                name = f"{prefix}_{answer_number:03d}.stdout"
                (base / name).write_bytes(answer.encode("utf-8"))

    def load(self) -> None:
        """Register the commands and answers stored in the base directory."""
        stdin_files: dict[str, str] = {}
        stdout_files: dict[str, str] = {}
        with os.scandir(self.base_dir) as entries:
            names = [entry.name for _, entry in zip(range(_MAX_ENTRIES), entries)]
        for name in names:
            extension = os.path.splitext(name)[1]
            if extension == ".stdin":
                target = stdin_files
            elif extension == ".stdout":
                target = stdout_files
            else:
                continue
            try:
                content = (Path(self.base_dir) / name).read_bytes()
            except OSError:
                return
            target[name] = content.decode("utf-8")

        stdout_names = sorted(stdout_files)
        for name in sorted(stdin_files):
            prefix = name[: -len(_STDIN_SUFFIX)]
            stdin = stdin_files[name]
            for stdout_name in stdout_names:
                if stdout_name.startswith(prefix):
                    self.register(stdin, stdout_files[stdout_name])

    def shell(self) -> str:
        """Return the first answer to a prompt setting command, or ""."""
        for command in self.commands.values():
            if command.stdin.startswith("PS1=") and command.stdout:
                return command.stdout[0]
        return ""

    def system(self) -> str:
        """Return the lower-cased system name answered to ``uname -s``, or ""."""
        for command in self.commands.values():
            if command.stdin.startswith("uname -s") and command.stdout:
                return command.stdout[0].lower()
        return ""


def new_replay_commands(basedir: str) -> ReplayCommands:
    """Create replay commands for ``basedir``, creating the directory if needed."""
    if not file_exists(basedir):
        os.makedirs(basedir, 0o744)
    return ReplayCommands(base_dir=basedir)