"""Pythonization of the :term:`tmux(1)` session.

appear.session
~~~~~~~~~~~~~~

"""

from __future__ import annotations

import dataclasses
import logging
import typing as t

from appear.neo import Obj, to_int, tmux_field

if t.TYPE_CHECKING:
    from appear.client import Client
    from appear.window import Window

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Session(Obj):
    """:term:`tmux(1)` :term:`Session` [session_manual]_.

    Holds windows, and clients attach to it. Both relations are filters over
    a full listing, matched on the session name.

    Examples
    --------
    >>> from appear.server import Server
    >>> from appear.test import FakeRunner
    >>> server = Server(runner=FakeRunner({
    ...     "list-sessions": "session:main id:$1 attached:1 width:80 height:24\\n",
    ...     "list-windows": (
    ...         "session:main window:1 id:@1 active:1\\n"
    ...         "session:work window:1 id:@2 active:1\\n"
    ...     ),
    ... }))
    >>> session = server.sessions()[0]
    >>> session
    Session(session='main', id='$1', attached=1, width=80, height=24)
    >>> session.target
    '$1'
    >>> [w.target for w in session.windows]
    ['@1']

    References
    ----------
    .. [session_manual] tmux session. openbsd manpage for TMUX(1).
           "When tmux is started it creates a new session with a single window
           and displays it on screen..."

           "A session is a single collection of pseudo terminals under the
           management of tmux.  Each session has one or more windows linked
           to it."

       https://man.openbsd.org/tmux.1#DESCRIPTION.
    """

    session: str | None = tmux_field("session_name")
    id: str | None = tmux_field("session_id")
    attached: int | None = tmux_field("session_attached", parse=to_int)
    """number of clients attached to this session"""
    width: int | None = tmux_field("session_width", parse=to_int)
    height: int | None = tmux_field("session_height", parse=to_int)

    @property
    def target(self) -> str | None:
        """Session id, e.g. ``$1``. Stable across renames."""
        return self.id

    @property
    def windows(self) -> list[Window]:
        """Windows of this session."""
        return [w for w in self.server.windows() if w.session == self.session]

    @property
    def clients(self) -> list[Client]:
        """Clients attached to this session."""
        return [c for c in self.server.clients() if c.session == self.session]

    def new_window(self, **flags: t.Any) -> Window:
        """Create a window after the highest existing index of this session.

        Parameters
        ----------
        **flags
            Extra ``new-window`` flags, e.g. ``n="logs"`` or ``d=True``.

        Examples
        --------
        >>> from appear.server import Server
        >>> from appear.test import FakeRunner
        >>> runner = FakeRunner({
        ...     "list-sessions": "session:main id:$1\\n",
        ...     "list-windows": (
        ...         "session:main window:3 id:@3\\n"
        ...         "session:main window:1 id:@1\\n"
        ...     ),
        ...     "new-window": "session:main window:4 id:@9 active:1\\n",
        ... })
        >>> session = Server(runner=runner).sessions()[0]
        >>> session.new_window(d=True)
        Window(session='main', window=4, id='@9', active=True)
        >>> runner.calls[-1][:6]
        ['tmux', 'new-window', '-d', '-t', '$1:4', '-P']
        """
        indexes = [w.window for w in self.windows if w.window is not None]
        index = max(indexes, default=-1) + 1
        return self.server.new_window(**{**flags, "t": f"{self.target}:{index}"})
