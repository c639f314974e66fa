"""Pythonization of the :term:`tmux(1)` window.

appear.window
~~~~~~~~~~~~~

"""

from __future__ import annotations

import dataclasses
import logging
import typing as t

from appear.neo import Obj, nonzero, to_int, tmux_field

if t.TYPE_CHECKING:
    from appear.pane import Pane

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Window(Obj):
    """:term:`tmux(1)` :term:`Window` [window_manual]_.

    Holds panes. The relation is resolved on demand from a fresh
    ``list-panes``, nothing is cached on the record.

    Examples
    --------
    >>> from appear.server import Server
    >>> from appear.test import FakeRunner
    >>> server = Server(runner=FakeRunner({
    ...     "list-windows": "session:main window:1 id:@1 active:1\\n",
    ...     "list-panes": (
    ...         "session:main window:1 pane:0 id:%1\\n"
    ...         "session:main window:2 pane:0 id:%2\\n"
    ...         "session:work window:1 pane:0 id:%3\\n"
    ...     ),
    ... }))
    >>> window = server.windows()[0]
    >>> window.target
    '@1'
    >>> [pane.target for pane in window.panes]
    ['%1']

    References
    ----------
    .. [window_manual] tmux window. openbsd manpage for TMUX(1).
           "Each session has one or more windows linked into it. Windows may
           be linked to multiple sessions and are made up of one or more
           panes, each of which contains a pseudo terminal."

       https://man.openbsd.org/tmux.1#WINDOWS_AND_PANES.
    """

    session: str | None = tmux_field("session_name")
    window: int | None = tmux_field("window_index", parse=to_int)
    id: str | None = tmux_field("window_id")
    active: bool | None = tmux_field("window_active", parse=nonzero)

    @property
    def target(self) -> str | None:
        """Window id, e.g. ``@2``. Stable across renames and moves."""
        return self.id

    @property
    def panes(self) -> list[Pane]:
        """Panes of this window."""
        return [
            p
            for p in self.server.panes()
            if p.session == self.session and p.window == self.window
        ]
