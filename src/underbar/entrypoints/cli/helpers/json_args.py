"""JSON input and output for CLI commands.

Commands take their collections as JSON documents on the command line, or
``-`` to read a document from stdin, and print their result as JSON on stdout.
``ABSENT`` is written as ``null``.
"""

import json
from typing import Any

import click

from underbar.absent import ABSENT

STDIN_MARKER = "-"


class JsonValue(click.ParamType):
    """Click parameter type decoding a JSON document."""

    name = "json"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Any:
        if not isinstance(value, str):
            return value  # already decoded (e.g. a default)
        text = value
        if value == STDIN_MARKER:
            text = click.get_text_stream("stdin").read()
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            self.fail(f"{value!r} is not valid JSON: {e.msg}", param, ctx)


JSON = JsonValue()


def _encode(value: Any) -> Any:
    if value is ABSENT:
        return None
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(value: Any) -> str:
    """Serialize a result to JSON text, writing ``ABSENT`` as ``null``."""
    return json.dumps(value, default=_encode)
