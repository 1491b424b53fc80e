"""An SSH service and shell session that answer from recorded conversations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from toolkit.ssh.replay import ReplayCommands

COMMAND_NOT_FOUND = "Command not found"

Listener = Callable[[str, bool], None]


class ReplayError(RuntimeError):
    """A recorded command failed, or an operation cannot be replayed."""


class UnsupportedOperation(ReplayError):
    """An operation that a replayed connection cannot perform."""

    def __init__(self, operation: str):
        super().__init__("unsupported")
        self.operation = operation


@dataclass
class SessionConfig:
    """Settings for opening a shell session."""

    env_variables: dict[str, str] = field(default_factory=dict)
    shell: str = ""
    term: str = ""
    rows: int = 0
    columns: int = 0

    def apply_default(self) -> None:
        """Fill unset fields with their defaults."""
        if not self.shell:
            self.shell = "/bin/bash"
        if not self.term:
            self.term = "xterm"
        if not self.rows:
            self.rows = 100
        if not self.columns:
            self.columns = 100


class ReplayMultiCommandSession:
    """A shell session whose answers come from recorded commands."""

    def __init__(self, shell_prompt: str, system: str, replay: ReplayCommands):
        self.shell_prompt = shell_prompt
        self.system = system
        self.replay = replay
        self.closed = False
        self.reconnect_attempts = 0

    def run(
        self,
        command: str,
        listener: Optional[Listener] = None,
        timeout_ms: int = 0,
        *terminators: str,
    ) -> str:
        """Return the next recorded answer to ``command``."""
        if not command.endswith("\n"):
            command += "\n"
        recorded = self.replay.commands.get(command)
        if recorded is None:
            return COMMAND_NOT_FOUND
        if recorded.error:
            raise ReplayError(recorded.error)
        return self.replay.next(command)

    def reconnect(self) -> None:
        """Count the attempt and refuse: a replayed session cannot reconnect."""
        self.reconnect_attempts += 1
        raise UnsupportedOperation("reconnect")

    def close(self) -> None:
        """Mark the session closed; no connection is held."""
        self.closed = True

    def __enter__(self) -> ReplayMultiCommandSession:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class ReplayService:
    """An SSH service answering from recorded commands, with in-memory storage."""

    def __init__(
        self,
        shell_prompt: str,
        system: str,
        commands: ReplayCommands,
        storage: Optional[dict[str, bytes]] = None,
    ):
        self.shell_prompt = shell_prompt
        self.system = system
        self.commands = commands
        self.storage: dict[str, bytes] = storage if storage else {}
        self.tunnels: list[tuple[str, str]] = []
        self.closed = False
        self.reconnect_attempts = 0

    def open_multi_command_session(
        self, config: Optional[SessionConfig] = None
    ) -> ReplayMultiCommandSession:
        """Open a replayed shell session."""
        return ReplayMultiCommandSession(self.shell_prompt, self.system, self.commands)

    def run(self, command: str) -> None:
        """Replay ``command``, raising its recorded error if it has one."""
        recorded = self.commands.commands.get(command)
        if recorded is not None and recorded.error:
            raise ReplayError(recorded.error)
        self.commands.next(command)

    def upload(self, destination: str, mode: int, content: bytes) -> None:
        """Keep ``content`` under ``destination``."""
        self.storage[destination] = content

    def download(self, source: str) -> bytes:
        """Return content uploaded under ``source``."""
        try:
            return self.storage[source]
        except KeyError:
            raise FileNotFoundError("no such file or directory") from None

    def open_tunnel(self, local_address: str, remote_address: str) -> None:
        """Record the tunnel; no traffic flows when replaying."""
        self.tunnels.append((local_address, remote_address))

    def reconnect(self) -> None:
        """Count the attempt and refuse: a replayed service cannot reconnect."""
        self.reconnect_attempts += 1
        raise UnsupportedOperation("reconnect")

    def close(self) -> None:
        """Drop recorded tunnels and mark the service closed."""
        self.tunnels.clear()
        self.closed = True

    def __enter__(self) -> ReplayService:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()