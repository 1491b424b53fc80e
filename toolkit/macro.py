"""Expansion of macros of the form ``prefix name [json arguments] postfix``."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

from toolkit.conversion import as_string

ValueProvider = Callable[..., Any]
"""Called as ``provider(context, *arguments)``; returns the macro's value."""

_ARGUMENT_BREAKS = " \b\n["
_DECODER = json.JSONDecoder()


@dataclass(frozen=True)
class _Macro:
    text: str
    name: str
    arguments: str


@dataclass
class MacroEvaluator:
    """Expands macros using the value providers registered by name."""

    prefix: str
    postfix: str
    value_providers: Mapping[str, ValueProvider] = field(default_factory=dict)

    def has_macro(self, candidate: str) -> bool:
        """Return True if ``candidate`` holds a prefix followed by a postfix."""
        start = candidate.find(self.prefix)
        if start == -1:
            return False
        return candidate.find(self.postfix, start) != -1

    def _extract(self, text: str) -> _Macro | None:
        start = text.find(self.prefix)
        if start == -1:
            return None
        body_start = start + len(self.prefix)
        previous = text[body_start - 1] if body_start > 0 else ""
        macro: list[str] = []
        name: list[str] = []
        in_quotes = False
        expect_arguments = False
        depth = 0
        argument_start = argument_end = 0
        for position, char in enumerate(text[body_start:], body_start):
            if char in _ARGUMENT_BREAKS:
                expect_arguments = True
            escaped = previous == "\\"
            if char == '"' and not escaped:
                in_quotes = not in_quotes
            if not in_quotes and not escaped:
                if char == "[":
                    if depth == 0:
                        argument_start = position
                    depth += 1
                elif char == "]":
                    argument_end = position
                    depth -= 1
            macro.append(char)
            if depth == 0:
                if char == self.postfix:
                    break
                if not expect_arguments:
                    name.append(char)
            previous = char
        arguments = ""
        if 0 < argument_start < argument_end:
            arguments = text[argument_start : argument_end + 1]
        return _Macro(self.prefix + "".join(macro), "".join(name), arguments)

    def _expand_argument(self, context: Any, argument: Any) -> Any:
        if not isinstance(argument, str) or not self.has_macro(argument):
            return argument
        try:
            return self.expand(context, argument)
        except Exception as error:
            raise ValueError(
                f"failed to expand argument: {argument} due to:\n\t{error}"
            ) from error

    def _decode_arguments(self, context: Any, encoded: str) -> list[Any]:
        if not encoded:
            return []
        encoded = encoded.replace('\\"', '"')
        try:
            arguments, _ = _DECODER.raw_decode(encoded)
        except ValueError as error:
            raise ValueError(
                f"failed to process macro arguments: {encoded} due to:\n\t{error}"
            ) from error
        if not isinstance(arguments, list):
            raise ValueError(f"macro arguments are not a list: {encoded}")
        return [self._expand_argument(context, argument) for argument in arguments]

    def expand(self, context: Any, text: str) -> Any:
        """Expand the macros in ``text``.

        A text that is exactly one macro yields the provider's value as is;
        otherwise every macro is replaced by its textual value.
        """
        macro = self._extract(text)
        if macro is None:
            return text
        if macro.name not in self.value_providers:
            raise LookupError(
                f"failed to lookup macro: '{macro.name}' while processing: {text}"
            )
        try:
            arguments = self._decode_arguments(context, macro.arguments)
        except ValueError as error:
            raise ValueError(
                f"failed expand macro: {macro.text} due to {error}"
            ) from error
        value = self.value_providers[macro.name](context, *arguments)
        if len(macro.text) == len(text):
            return value
        result = text.replace(macro.text, as_string(value), 1)
        if self.has_macro(result):
            return self.expand(context, result)
        return result


def expand_parameters(
    evaluator: MacroEvaluator, parameters: MutableMapping[str, str]
) -> None:
    """Expand, in place, every parameter value that holds a macro."""
    for key, value in list(parameters.items()):
        if evaluator.has_macro(value):
            parameters[key] = as_string(evaluator.expand(None, as_string(value)))


def expand_value(evaluator: MacroEvaluator, value: str) -> str:
    """Return ``value`` with its macros expanded to text."""
    if evaluator.has_macro(value):
        return as_string(evaluator.expand(None, value))
    return value