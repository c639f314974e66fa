"""Provide exceptions used by appear.

appear.exc
~~~~~~~~~~

Every failure surfaced by the tmux control layer derives from
:exc:`AppearException`. Nothing here is retried internally: errors are raised
at the call site that ran the tmux command.

Notes
-----
A tmux record that simply lacks a field is not an error, the corresponding
attribute is ``None``.
"""

from __future__ import annotations

import subprocess
import typing as t

if t.TYPE_CHECKING:
    from collections.abc import Sequence


class AppearException(Exception):
    """Base exception for all appear errors."""


class SpawnError(AppearException):
    """Raised when the tmux executable cannot be found or launched.

    >>> raise SpawnError(["tmux", "list-panes"], "No such file or directory")
    Traceback (most recent call last):
        ...
    appear.exc.SpawnError: Could not launch tmux list-panes: No such file or directory
    """

    def __init__(
        self,
        argv: Sequence[str],
        reason: str | None = None,
        *args: object,
    ) -> None:
        self.argv = list(argv)
        self.reason = reason
        msg = f"Could not launch {subprocess.list2cmdline(self.argv)}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class CommandFailed(AppearException):
    """Raised when tmux ran but exited with a non-zero status.

    Attributes
    ----------
    argv : list[str]
        The command that was executed
    returncode : int
        Exit status of the child
    stderr : str
        Captured standard error, e.g. ``no server running on ...``

    >>> argv = ["tmux", "select-pane", "-t", "%99"]
    >>> err = CommandFailed(argv, 1, "can't find pane\\n")
    >>> err.returncode
    1
    >>> print(err)
    tmux select-pane -t %99 exited with status 1: can't find pane
    """

    def __init__(
        self,
        argv: Sequence[str],
        returncode: int,
        stderr: str = "",
        *args: object,
    ) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        msg = (
            f"{subprocess.list2cmdline(self.argv)} exited with status {returncode}"
        )
        if stderr.strip():
            msg += f": {stderr.strip()}"
        super().__init__(msg)


class ParseMismatch(AppearException):
    """Raised when tmux output does not match what was asked for.

    Usually a coercion failure (a numeric field holding text), which points at
    a tmux version mismatch rather than bad user input.

    >>> str(ParseMismatch(field="pid", value="abc", record_type="Pane"))
    "Could not parse Pane.pid from tmux value 'abc'"
    """

    def __init__(
        self,
        msg: str | None = None,
        *,
        field: str | None = None,
        value: str | None = None,
        record_type: str | None = None,
    ) -> None:
        self.field = field
        self.value = value
        self.record_type = record_type
        if msg is None and field is not None:
            msg = f"Could not parse {record_type}.{field} from tmux value {value!r}"
        super().__init__(msg or "Unexpected tmux output")
