"""Pythonization of the :term:`tmux(1)` client.

appear.client
~~~~~~~~~~~~~

"""

from __future__ import annotations

import dataclasses

from appear.neo import Obj, tmux_field


@dataclasses.dataclass(frozen=True)
class Client(Obj):
    """:term:`tmux(1)` client, a terminal attached to a session.

    >>> from appear.formats import parse_line
    >>> client = Client.parse(
    ...     parse_line("tty:/dev/ttys004 term:xterm-256color session:main"),
    ...     server=None,
    ... )
    >>> client.target
    '/dev/ttys004'
    """

    tty: str | None = tmux_field("client_tty")
    """path to the TTY device of this client"""
    term: str | None = tmux_field("client_termname")
    session: str | None = tmux_field("client_session")

    @property
    def target(self) -> str | None:
        """Client tty path, what ``-t`` expects for client commands."""
        return self.tty
