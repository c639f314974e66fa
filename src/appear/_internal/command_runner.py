"""Command runner protocol consumed by :class:`appear.server.Server`."""

from __future__ import annotations

import typing as t
from typing import Protocol

if t.TYPE_CHECKING:
    from collections.abc import Sequence


class CommandRunner(Protocol):
    """Protocol for anything able to execute a tmux argument vector.

    The server decides what a command looks like and how its output is
    parsed; how the child process is spawned is left to the runner.

    Examples
    --------
    >>> from appear.common import SubprocessRunner
    >>> runner = SubprocessRunner()
    >>> callable(runner.run)
    True
    """

    def run(self, argv: Sequence[str]) -> str:
        """Execute a command.

        Parameters
        ----------
        argv : Sequence[str]
            Program name followed by its arguments. Never a shell string.

        Returns
        -------
        str
            Captured standard output

        Raises
        ------
        :exc:`appear.exc.SpawnError`
            The executable could not be launched
        :exc:`appear.exc.CommandFailed`
            The executable exited with a non-zero status
        """
        ...
