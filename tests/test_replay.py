import os

import pytest

from toolkit.ssh.replay import ReplayCommand, ReplayCommands, new_replay_commands


def test_new_replay_commands_creates_directory(tmp_path):
    target = tmp_path / "a" / "b"
    commands = new_replay_commands(str(target))
    assert target.is_dir()
    assert commands.base_dir == str(target)
    assert commands.commands == {}


def test_register_and_next_in_order(tmp_path):
    commands = new_replay_commands(str(tmp_path))
    commands.register("ls\n", "first")
    commands.register("ls\n", "second")
    commands.register("pwd\n", "/home")
    assert commands.keys == ["ls\n", "pwd\n"]
    assert commands.next("ls\n") == "first"
    assert commands.next("ls\n") == "second"
    assert commands.next("ls\n") == ""
    assert commands.next("pwd\n") == "/home"


def test_next_unknown_command_raises(tmp_path):
    commands = new_replay_commands(str(tmp_path))
    with pytest.raises(KeyError):
        commands.next("missing\n")


def test_store_writes_numbered_files(tmp_path):
    commands = new_replay_commands(str(tmp_path))
    commands.register("ls\n", "a")
    commands.register("ls\n", "b")
    commands.register("pwd\n", "/")
    commands.store()
    assert sorted(os.listdir(tmp_path)) == [
        "001_000.stdin",
        "001_001.stdout",
        "001_002.stdout",
        "002_000.stdin",
        "002_001.stdout",
    ]
    assert (tmp_path / "001_000.stdin").read_text() == "ls\n"
    assert (tmp_path / "001_002.stdout").read_text() == "b"


def test_store_and_load_round_trip(tmp_path):
    original = new_replay_commands(str(tmp_path))
    original.register("ls /etc/hosts\n", "/etc/hosts")
    original.register("uname -s\n", "Darwin")
    original.register("uname -s\n", "Linux")
    original.store()

    loaded = new_replay_commands(str(tmp_path))
    loaded.load()
    assert set(loaded.commands) == set(original.commands)
    for key, command in original.commands.items():
        assert loaded.commands[key].stdout == command.stdout


def test_load_ignores_other_files(tmp_path):
    (tmp_path / "notes.txt").write_text("ignored")
    (tmp_path / "001_000.stdin").write_text("ls\n")
    (tmp_path / "001_001.stdout").write_text("out")
    commands = new_replay_commands(str(tmp_path))
    commands.load()
    assert list(commands.commands) == ["ls\n"]
    assert commands.next("ls\n") == "out"


def test_load_missing_directory_raises(tmp_path):
    commands = ReplayCommands(base_dir=str(tmp_path / "absent"))
    with pytest.raises(FileNotFoundError):
        commands.load()


def test_shell_and_system(tmp_path):
    commands = new_replay_commands(str(tmp_path))
    assert commands.shell() == ""
    assert commands.system() == ""
    commands.register('PS1="123\\$"\n', "123$")
    commands.register("uname -s\n", "Darwin")
    assert commands.shell() == "123$"
    assert commands.system() == "darwin"


def test_replay_command_defaults():
    command = ReplayCommand("ls\n")
    assert command.index == 0
    assert command.stdout == []
    assert command.error == ""