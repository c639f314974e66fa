"""Format strings and output parsing for tmux list commands.

appear.formats
~~~~~~~~~~~~~~

Records are requested from tmux as ``name:#{tmux_field}`` pairs joined by
spaces, so each output line reads ``name:value name:value ...``.

- man tmux(1), FORMATS section
"""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:
    from collections.abc import Iterable

FORMAT_SEPARATOR = ":"
"""Separates a key from its value within one token."""

RawRecord = dict[str, str]


def format_pair(name: str, tmux_field: str) -> str:
    """Return the format template for one field.

    >>> format_pair("pid", "pane_pid")
    'pid:#{pane_pid}'
    """
    return f"{name}{FORMAT_SEPARATOR}#{{{tmux_field}}}"


def build_format(pairs: Iterable[tuple[str, str]]) -> str:
    """Return a ``-F`` template requesting each ``(name, tmux_field)`` pair.

    Every pair is prefixed by a single space.

    >>> build_format([("session", "session_name"), ("id", "session_id")])
    ' session:#{session_name} id:#{session_id}'
    """
    return "".join(" " + format_pair(name, field) for name, field in pairs)


def parse_line(line: str) -> RawRecord:
    """Parse one line of ``key:value`` tokens.

    Only the first separator splits a token, later ones belong to the value.
    A token without a separator maps to an empty value, and a blank line
    gives an empty record.

    >>> parse_line("pid:123 path:/a/b:c")
    {'pid': '123', 'path': '/a/b:c'}

    >>> parse_line("command_name: active:1")
    {'command_name': '', 'active': '1'}

    >>> parse_line("   ")
    {}

    >>> parse_line("no-delimiter")
    {'no-delimiter': ''}
    """
    record: RawRecord = {}
    for token in line.split():
        key, _, value = token.partition(FORMAT_SEPARATOR)
        record[key] = value
    return record


def parse_output(output: str) -> list[RawRecord]:
    """Parse command output, one record per line, in output order.

    >>> parse_output("id:%1 pane:0\\nid:%2 pane:1\\n")
    [{'id': '%1', 'pane': '0'}, {'id': '%2', 'pane': '1'}]

    >>> parse_output("")
    []
    """
    return [parse_line(line) for line in output.splitlines()]
