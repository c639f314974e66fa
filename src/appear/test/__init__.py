"""Helper methods for testing code built on appear."""

from __future__ import annotations

import logging
import typing as t

from appear.test.constants import TEST_SESSION_PREFIX, TEST_SOCKET_PREFIX

from .random import namer

if t.TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)

__all__ = (
    "TEST_SESSION_PREFIX",
    "TEST_SOCKET_PREFIX",
    "FakeRunner",
    "namer",
)


class FakeRunner:
    """Command runner answering from canned output instead of spawning tmux.

    ``outputs`` maps a tmux subcommand to the text it prints, or to an
    exception to raise. Subcommands without an entry print nothing. Every
    argv is recorded in :attr:`calls`.

    >>> from appear import exc
    >>> runner = FakeRunner({
    ...     "list-sessions": "session:main id:$1\\n",
    ...     "kill-session": exc.CommandFailed(["tmux"], 1, "no such session"),
    ... })
    >>> runner.run(["tmux", "list-sessions", "-F", "x"])
    'session:main id:$1\\n'
    >>> runner.run(["tmux", "select-pane", "-t", "%1"])
    ''
    >>> runner.run(["tmux", "kill-session"])
    Traceback (most recent call last):
        ...
    appear.exc.CommandFailed: tmux exited with status 1: no such session
    >>> len(runner.calls)
    3
    """

    def __init__(self, outputs: Mapping[str, str | Exception] | None = None) -> None:
        self.outputs: dict[str, str | Exception] = dict(outputs or {})
        self.calls: list[list[str]] = []

    def subcommand(self, argv: Sequence[str]) -> str | None:
        """Return the first argument of ``argv`` with canned output."""
        for arg in argv[1:]:
            if arg in self.outputs:
                return arg
        return None

    def calls_to(self, subcommand: str) -> list[list[str]]:
        """Return the recorded argvs that ran ``subcommand``."""
        return [argv for argv in self.calls if subcommand in argv[1:]]

    def run(self, argv: Sequence[str]) -> str:
        """Record ``argv`` and answer with its canned output."""
        self.calls.append(list(argv))
        key = self.subcommand(argv)
        if key is None:
            return ""
        output = self.outputs[key]
        if isinstance(output, Exception):
            raise output
        return output
