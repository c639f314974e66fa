"""Fluent argv assembly for tmux commands.

appear._internal.command_builder
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Commands are always kept as argument vectors. Nothing here joins arguments
into a shell string except :meth:`CommandBuilder.__str__`, which is only for
display.
"""

from __future__ import annotations

import shlex
import typing as t

if t.TYPE_CHECKING:
    import sys
    from collections.abc import Mapping, Sequence

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self

FlagValue = t.Union[str, int, bool, None]


class CommandBuilder:
    """Build an argument vector from a base command, flags and positionals.

    Flags render in the order they were added. ``True`` renders as a bare
    flag, ``False`` and ``None`` are dropped, anything else renders as the
    flag followed by ``str(value)``. Positional arguments always come last.

    Examples
    --------
    >>> cmd = CommandBuilder(["tmux", "foo"])
    >>> cmd.flags({"a": True, "b": "x"}).args("k1", "k2").to_list()
    ['tmux', 'foo', '-a', '-b', 'x', 'k1', 'k2']

    Duplicates are passed through untouched:

    >>> CommandBuilder(["tmux", "foo"]).flag("t", "%1").flag("t", "%2").to_list()
    ['tmux', 'foo', '-t', '%1', '-t', '%2']

    >>> print(CommandBuilder(["tmux", "send-keys"]).args("echo hi", "Enter"))
    tmux send-keys 'echo hi' Enter
    """

    def __init__(self, command: Sequence[str]) -> None:
        self.command: list[str] = list(command)
        self._flags: list[tuple[str, FlagValue]] = []
        self._args: list[str] = []

    def flag(self, name: str, value: FlagValue = True) -> Self:
        """Append a single flag."""
        self._flags.append((name, value))
        return self

    def flags(self, flags: Mapping[str, FlagValue]) -> Self:
        """Append every flag of a mapping, in mapping order."""
        for name, value in flags.items():
            self.flag(name, value)
        return self

    def args(self, *args: str | int) -> Self:
        """Append positional arguments."""
        self._args.extend(str(a) for a in args)
        return self

    def copy(self) -> CommandBuilder:
        """Return an independent builder with the same contents.

        >>> base = CommandBuilder(["tmux", "list-panes"]).flag("a")
        >>> base.copy().flag("F", "#{pane_id}").to_list()
        ['tmux', 'list-panes', '-a', '-F', '#{pane_id}']
        >>> base.to_list()
        ['tmux', 'list-panes', '-a']
        """
        other = CommandBuilder(self.command)
        other._flags = list(self._flags)
        other._args = list(self._args)
        return other

    def to_list(self) -> list[str]:
        """Return the final argument vector."""
        argv = list(self.command)
        for name, value in self._flags:
            if value is None or value is False:
                continue
            argv.append(f"-{name}")
            if value is not True:
                argv.append(str(value))
        argv.extend(self._args)
        return argv

    def __iter__(self) -> t.Iterator[str]:
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandBuilder):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __str__(self) -> str:
        return shlex.join(self.to_list())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_list()!r})"
