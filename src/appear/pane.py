"""Pythonization of the :ref:`tmux(1)` pane.

appear.pane
~~~~~~~~~~~

"""

from __future__ import annotations

import dataclasses
import logging
import typing as t

from appear.neo import Obj, nonzero, to_int, tmux_field

if t.TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Pane(Obj):
    """:term:`tmux(1)` :term:`Pane` [pane_manual]_.

    A snapshot of one pane, as printed by ``list-panes`` or ``split-window``.
    It goes stale as soon as tmux changes, list again for fresh data.

    Examples
    --------
    >>> from appear.formats import parse_line
    >>> from appear.server import Server
    >>> from appear.test import FakeRunner
    >>> server = Server(runner=FakeRunner())
    >>> pane = Pane.parse(
    ...     parse_line("pid:4242 session:main window:1 pane:0 active:1 id:%3"),
    ...     server,
    ... )
    >>> pane
    Pane(pid=4242, session='main', window=1, pane=0, active=True, command_name=None, current_path=None, id='%3')
    >>> pane.target
    '%3'

    References
    ----------
    .. [pane_manual] tmux pane. openbsd manpage for TMUX(1).
           "Each window displayed by tmux may be split into one or more
           panes; each pane takes up a certain area of the display and is
           a separate terminal."

       https://man.openbsd.org/tmux.1#WINDOWS_AND_PANES.
    """

    pid: int | None = tmux_field("pane_pid", parse=to_int)
    """pid of the process running in the pane"""
    session: str | None = tmux_field("session_name")
    window: int | None = tmux_field("window_index", parse=to_int)
    pane: int | None = tmux_field("pane_index", parse=to_int)
    active: bool | None = tmux_field("pane_active", parse=nonzero)
    """is this pane the active pane of its window"""
    command_name: str | None = tmux_field("pane_current_command")
    current_path: str | None = tmux_field("pane_current_path")
    id: str | None = tmux_field("pane_id")

    @property
    def target(self) -> str | None:
        """Pane id, e.g. ``%3``. Stable while the pane lives."""
        return self.id

    def split(self, **flags: t.Any) -> Pane:
        """Split this pane, ``$ tmux split-window -t <pane>``.

        Parameters
        ----------
        **flags
            Extra ``split-window`` flags, e.g. ``h=True`` for a horizontal
            split or ``c="/tmp"`` for the start directory.
        """
        return self.server.split_window(**{**flags, "t": self.target})

    def reveal(self) -> Pane:
        """Select this pane and its window."""
        return self.server.reveal_pane(self)

    def send_keys(self, keys: str | Sequence[str], **flags: t.Any) -> None:
        """Send keys to this pane, ``$ tmux send-keys -t <pane> <keys>``.

        Examples
        --------
        >>> from appear.formats import parse_line
        >>> from appear.server import Server
        >>> from appear.test import FakeRunner
        >>> runner = FakeRunner()
        >>> pane = Pane.parse(parse_line("id:%3"), Server(runner=runner))
        >>> pane.send_keys(["echo hi", "Enter"])
        >>> runner.calls[-1]
        ['tmux', 'send-keys', '-t', '%3', 'echo hi', 'Enter']
        """
        self.server.send_keys(self, keys, **flags)
