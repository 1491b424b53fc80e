# toolkit

A small library of general-purpose helpers, using only the standard library.

## Modules

- `toolkit.conversion`: lenient conversions. `as_string`, `as_int`,
  `as_float`, `as_boolean` and `can_convert_to_float` accept numbers,
  text or bytes and fall back to an empty or zero value. `as_time` reads
  datetimes, ISO 8601 text, text in a strptime layout, or Unix seconds.
  It returns `None` when the value cannot be read.
- `toolkit.iteration`: `new_slice_iterator(items)` returns a
  `SliceIterator`. It has `has_next()` and `next_as(kind)`. `next_as`
  converts the item to `str`, `int`, `float`, `bool` or `datetime`. The
  iterator also works as an ordinary Python iterator.
- `toolkit.jsonutil`: JSON helpers.
  - Recognising JSON: `is_complete_json`, `is_structured_json` and
    `is_new_line_delimited_json`.
  - Decoding text, bytes or a readable object: `json_to_interface`,
    `json_to_map`, `json_to_slice` and `new_line_delimited_json`.
    Newline-delimited input given to `json_to_interface` yields a list.
  - Encoding mappings, sequences or dataclasses: `as_json_text` gives
    compact JSON ending in a newline, and `as_indent_json_text` gives
    tab-indented JSON.
  - `AnyJSONType`: raw JSON text that is decoded on demand with `value()`.
- `toolkit.predicates`: single-value predicates with an `apply(value)`
  method. The constructors are `new_within_predicate`,
  `new_between_predicate`, `new_in_predicate`,
  `new_comparable_predicate` (`=`, `!=`, `>`, `>=`, `<`, `<=`),
  `new_nil_predicate` and `new_like_predicate` (SQL `%` wildcards, case
  insensitive).
- `toolkit.macro`: `MacroEvaluator(prefix, postfix, value_providers)`
  expands macros written as `prefix name [json arguments] postfix`.
  - Each provider is a callable invoked as `provider(context, *arguments)`.
  - Macros nested inside string arguments are expanded first.
  - A text that is exactly one macro yields the provider's value
    unchanged.
  - `expand_parameters` and `expand_value` expand to text.
- `toolkit.fsutil`: `file_exists`, `is_directory`,
  `remove_file_if_exist` and `create_dir_if_not_exist`.
  `remove_file_if_exist` removes files and empty directories.
  `create_dir_if_not_exist` also creates missing parents.
- `toolkit.messages`: the `LogMessage` and `LogMessages` records, and
  `mime_type_for(extension)` for json, csv, tsv, sql, html, js, jpg and png.
- `toolkit.stack`: `caller_info`, `caller_directory` and `discover_caller`
  inspect the call stack.
- `toolkit.sampler`: `Sampler(accept_pct, seed=None)` accepts roughly the
  given percentage of calls to `accept()`. `accept_with_threshold(pct)`
  ignores the configured percentage. It is safe to use from several
  threads.
- `toolkit.secret`: secret keys, secret values and credential prompting.
  - `SecretKey.is_dynamic()` is false for keys starting with `*` or `#`.
  - `SecretKey.secret(credentials)` picks the user name, password or data
    from an object with those attributes.
  - `Secret.is_location()` and `new_secrets` handle secret values.
  - `read_user_and_password(timeout)` prompts on the terminal. It raises
    `TimeoutError` if the prompt is not completed in time, and
    `ValueError` if the two passwords differ.
- `toolkit.kms`: request and response dataclasses for encryption services.
  These are `Resource`, `EncryptRequest`, `EncryptResponse`,
  `DecryptRequest` and `DecryptResponse`. Both request types have a
  `validate()` method.
- `toolkit.ssh.replay`: `ReplayCommands` records the stdout answers given
  to stdin commands.
  - `register(stdin, stdout)` records an answer and `next(stdin)` replays
    them in order.
  - `store()` and `load()` save and read them as numbered files in the
    base directory.
  - `shell()` and `system()` read the prompt and the system name from the
    recording.
  - `new_replay_commands(basedir)` creates the directory if needed.
- `toolkit.ssh.replay_service`: `ReplayService` plays recorded commands
  back as an SSH-like service.
  - `upload` and `download` use in-memory storage.
  - `open_multi_command_session` returns a `ReplayMultiCommandSession`.
  - `SessionConfig` holds session settings with defaults.
  - `reconnect()` raises `UnsupportedOperation`.

## Installation

```
pip install .
```

## Examples

Decode newline-delimited JSON:

```python
from toolkit.jsonutil import is_new_line_delimited_json, json_to_interface

text = '{"a": 1}\n{"a": 2}\n'
assert is_new_line_delimited_json(text)
print(json_to_interface(text))  # [{'a': 1}, {'a': 2}]
```

Apply predicates:

```python
from toolkit.predicates import new_between_predicate, new_like_predicate

assert new_between_predicate(10, 20).apply(11)
assert new_like_predicate("abc%efg").apply("abcefg")
```

Expand a macro:

```python
from toolkit.macro import MacroEvaluator

evaluator = MacroEvaluator("<ds:", ">", {"name": lambda context: "World"})
print(evaluator.expand(None, "Hello <ds:name>!"))  # Hello World!
```

Sample a percentage of events:

```python
from toolkit.sampler import Sampler

sampler = Sampler(25.0)
accepted = sum(sampler.accept() for _ in range(10_000))
```

Replay a recorded shell session:

```python
import tempfile

from toolkit.ssh.replay import new_replay_commands
from toolkit.ssh.replay_service import ReplayService

commands = new_replay_commands(tempfile.mkdtemp())
commands.register("ls /etc/hosts\n", "/etc/hosts")
service = ReplayService("prompt$", "linux", commands)
with service.open_multi_command_session(None) as session:
    print(session.run("ls /etc/hosts", None, 2000))  # /etc/hosts
```

## What it does not do

- The package has no command-line program.
- It opens no network connections. The SSH support only replays recorded
  conversations; it cannot connect to a host, run remote commands or
  forward ports.
- It has no HTTP routing or client.
- `toolkit.kms` defines request and response types only. It has no
  encryption backend.

## Running the tests

```
pip install .[test]
pytest
```