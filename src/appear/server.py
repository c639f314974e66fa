"""Wrapper for :term:`tmux(1)` server.

appear.server
~~~~~~~~~~~~~

"""

from __future__ import annotations

import logging
import typing as t

from appear import exc
from appear._internal.command_builder import CommandBuilder
from appear._internal.memoizer import Memoizer
from appear.client import Client
from appear.common import SubprocessRunner
from appear.formats import parse_output
from appear.pane import Pane
from appear.session import Session
from appear.window import Window

if t.TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from appear._internal.command_runner import CommandRunner
    from appear.formats import RawRecord
    from appear.neo import Obj

    ObjT = t.TypeVar("ObjT", bound=Obj)

logger = logging.getLogger(__name__)


class Server:
    """:term:`tmux(1)` :term:`Server` [server_manual]_.

    Typed queries and commands against a running tmux server. Every public
    call runs tmux once (:meth:`reveal_pane` runs it twice).

    - :meth:`Server.sessions` [:class:`Session`, ...]

      - :attr:`Session.windows` [:class:`Window`, ...]

        - :attr:`Window.panes` [:class:`Pane`, ...]

      - :attr:`Session.clients` [:class:`Client`, ...]

    Listings are memoized for the lifetime of the instance, with no
    invalidation: a long lived server hands back stale lists once tmux
    changes. Create a new :class:`Server` to see fresh state.

    Parameters
    ----------
    runner : :class:`appear._internal.command_runner.CommandRunner`, optional
        Executes commands, defaults to :class:`appear.common.SubprocessRunner`
    tmux_bin : str, optional
        tmux executable, looked up on ``PATH`` by the runner
    socket_name : str, optional
        Passthrough to ``[-L socket-name]``
    socket_path : str, optional
        Passthrough to ``[-S socket-path]``

    Examples
    --------
    >>> from appear.test import FakeRunner
    >>> runner = FakeRunner({
    ...     "list-panes": "pid:10 session:main window:0 pane:0 active:1 id:%1\\n",
    ... })
    >>> server = Server(runner=runner)
    >>> server.panes()
    [Pane(pid=10, session='main', window=0, pane=0, active=True, command_name=None, current_path=None, id='%1')]
    >>> runner.calls[0][:4]
    ['tmux', 'list-panes', '-a', '-F']

    References
    ----------
    .. [server_manual] CLIENTS AND SESSIONS. openbsd manpage for TMUX(1)
           "The tmux server manages clients, sessions, windows and panes.
           Clients are attached to sessions to interact with them, either when
           they are created with the new-session command, or later with the
           attach-session command."

       https://man.openbsd.org/tmux.1#CLIENTS_AND_SESSIONS.
    """

    socket_name = None
    """Passthrough to ``[-L socket-name]``"""
    socket_path = None
    """Passthrough to ``[-S socket-path]``"""

    def __init__(
        self,
        runner: CommandRunner | None = None,
        tmux_bin: str = "tmux",
        socket_name: str | None = None,
        socket_path: str | None = None,
    ) -> None:
        if runner is None:
            runner = SubprocessRunner()
        self.runner: CommandRunner = runner
        self.tmux_bin = tmux_bin

        if socket_path is not None:
            self.socket_path = socket_path
        elif socket_name is not None:
            self.socket_name = socket_name

        self._memo = Memoizer()

    @classmethod
    def from_services(cls, services: Mapping[str, t.Any], **kwargs: t.Any) -> Server:
        """Build a server from a bundle of services.

        ``services["runner"]`` provides ``run(argv) -> str``.
        """
        return cls(runner=services["runner"], **kwargs)

    def __repr__(self) -> str:
        """Representation of :class:`Server` object."""
        if self.socket_path is not None:
            return f"{self.__class__.__name__}(socket_path={self.socket_path})"
        if self.socket_name is not None:
            return f"{self.__class__.__name__}(socket_name={self.socket_name})"
        return f"{self.__class__.__name__}()"

    #
    # Command
    #
    def command(self, subcommand: str) -> CommandBuilder:
        """Return a builder for ``$ tmux [-L name | -S path] <subcommand>``.

        >>> Server(socket_name="work").command("list-sessions").to_list()
        ['tmux', '-Lwork', 'list-sessions']
        """
        base = [self.tmux_bin]
        if self.socket_path:
            base.append(f"-S{self.socket_path}")
        elif self.socket_name:
            base.append(f"-L{self.socket_name}")
        base.append(subcommand)
        return CommandBuilder(base)

    def _ipc(self, cmd: CommandBuilder) -> list[RawRecord]:
        return parse_output(self.runner.run(cmd.to_list()))

    def _ipc_returning(self, cmd: CommandBuilder, cls: type[ObjT]) -> list[ObjT]:
        key = (tuple(cmd.to_list()), cls)

        def fetch() -> list[ObjT]:
            rows = self._ipc(cmd.copy().flag("F", cls.format_string()))
            return cls.parse_all(rows, self)

        return self._memo(key, fetch)

    def _ipc_returning_one(self, cmd: CommandBuilder, cls: type[ObjT]) -> ObjT:
        # -P makes tmux print the object it created
        cmd.flag("P").flag("F", cls.format_string())
        rows = [row for row in self._ipc(cmd) if row]
        if not rows:
            msg = f"{cmd.command[-1]} printed no {cls.__name__}"
            raise exc.ParseMismatch(msg)
        obj = cls.parse(rows[0], self)
        logger.debug(f"created {obj!r}")
        return obj

    #
    # Listings
    #
    def clients(self) -> list[Client]:
        """List all tmux clients, ``$ tmux list-clients``."""
        return self._ipc_returning(self.command("list-clients"), Client)

    def panes(self) -> list[Pane]:
        """List panes of every session, ``$ tmux list-panes -a``."""
        return self._ipc_returning(self.command("list-panes").flag("a"), Pane)

    def sessions(self) -> list[Session]:
        """List all sessions, ``$ tmux list-sessions``."""
        return self._ipc_returning(self.command("list-sessions"), Session)

    def windows(self) -> list[Window]:
        """List windows of every session, ``$ tmux list-windows -a``."""
        return self._ipc_returning(self.command("list-windows").flag("a"), Window)

    #
    # Commands
    #
    def reveal_pane(self, pane: Pane) -> Pane:
        """Select ``pane``, then select its window.

        Two commands. When the second fails the pane selection has already
        happened, it is not undone.

        Examples
        --------
        >>> from appear.formats import parse_line
        >>> from appear.test import FakeRunner
        >>> runner = FakeRunner()
        >>> server = Server(runner=runner)
        >>> pane = Pane.parse(parse_line("session:main window:2 id:%7"), server)
        >>> server.reveal_pane(pane) is pane
        True
        >>> runner.calls
        [['tmux', 'select-pane', '-t', '%7'], ['tmux', 'select-window', '-t', 'main:2']]
        """
        self._ipc(self.command("select-pane").flag("t", pane.target))
        # select-window is addressed by position, not by the pane id
        self._ipc(
            self.command("select-window").flag("t", f"{pane.session}:{pane.window}"),
        )
        return pane

    def new_window(self, **flags: t.Any) -> Window:
        """Create a window, ``$ tmux new-window -P``.

        Parameters
        ----------
        **flags
            ``new-window`` flags, e.g. ``t="$1:4"``, ``n="logs"``, ``d=True``.
        """
        return self._ipc_returning_one(self.command("new-window").flags(flags), Window)

    def split_window(self, **flags: t.Any) -> Pane:
        """Split a pane, ``$ tmux split-window -P``."""
        return self._ipc_returning_one(self.command("split-window").flags(flags), Pane)

    def new_session(self, **flags: t.Any) -> Session:
        """Create a session, ``$ tmux new-session -P``.

        Pass ``d=True`` to create it detached, tmux otherwise tries to
        attach the calling terminal.
        """
        return self._ipc_returning_one(
            self.command("new-session").flags(flags),
            Session,
        )

    def send_keys(
        self,
        pane: Pane,
        keys: str | Sequence[str],
        **flags: t.Any,
    ) -> None:
        """Send keys to ``pane``, ``$ tmux send-keys -t <pane> <keys...>``.

        A string is sent as one key argument.
        """
        if isinstance(keys, str):
            keys = [keys]
        self._ipc(
            self.command("send-keys").flags({**flags, "t": pane.target}).args(*keys),
        )

    def attach_session_command(self, session: str) -> CommandBuilder:
        """Return, without running it, a command attaching ``session``.

        Parameters
        ----------
        session : str
            Session target, see :attr:`Session.target`

        >>> print(Server().attach_session_command("$1"))
        tmux attach-session -t '$1'
        """
        return self.command("attach-session").flag("t", session)
